import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api import links, pages
from .api.redirect import redirect_to_url
from .config import APP_VERSION, settings
from .core.exceptions import LinkError
from .core.logging_config import setup_logging
from .database import Base, engine
from .middleware.logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

static_path = Path(__file__).parent / "static"


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api/") or request.url.path == "/api"


async def link_error_handler(request: Request, exc: LinkError):
    """API callers get JSON errors, pages and redirects get plain text"""
    if _is_api_request(request):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    if _is_api_request(request):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})
    return PlainTextResponse("Bad Request", status_code=400)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("TinyLink listening on port %d", settings.PORT)
    yield


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="TinyLink",
        description="URL shortening service with click counting",
        version=APP_VERSION,
        lifespan=lifespan
    )
    app.state.started_at = time.monotonic()

    app.add_exception_handler(LinkError, link_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.mount("/static", StaticFiles(directory=str(static_path)), name="static")

    # Include routers
    app.include_router(links.router, prefix="/api", tags=["links"])
    app.include_router(pages.router, tags=["pages"])

    # Redirect endpoint (must be last to not conflict with other routes)
    app.get("/{code}", include_in_schema=False)(redirect_to_url)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
