import time
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..config import APP_VERSION, settings
from ..services.store import LinkStore, get_store

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


@router.get("/healthz")
async def health_check(request: Request):
    """Liveness probe"""
    return {
        "ok": True,
        "version": APP_VERSION,
        "uptime": time.monotonic() - request.app.state.started_at,
    }


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def dashboard(
    request: Request,
    q: Optional[str] = None,
    store: LinkStore = Depends(get_store)
):
    """Serve the dashboard with all links, newest first"""
    search = (q or "").strip()
    links = store.list(search or None)
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"links": links, "search": search, "base_url": settings.public_base_url},
    )


@router.get("/code/{code}", response_class=HTMLResponse, include_in_schema=False)
def link_stats(
    code: str,
    request: Request,
    store: LinkStore = Depends(get_store)
):
    """Serve the stats page for a single code"""
    link = store.get(code)
    return templates.TemplateResponse(
        request,
        "stats.html",
        {"link": link, "base_url": settings.public_base_url},
    )
