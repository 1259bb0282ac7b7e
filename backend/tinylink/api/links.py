import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from ..schemas.link import ErrorResponse, LinkCreate, LinkResponse, LinkStats
from ..services.links import create_link
from ..services.store import LinkStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/links")


@router.post(
    "",
    response_model=LinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}
)
def create_short_link(
    link_data: LinkCreate,
    store: LinkStore = Depends(get_store)
):
    """
    Create a short link.

    Generates a code when none is given. A taken custom code is a 409.
    """
    return create_link(store, link_data.url, link_data.code)


@router.get("", response_model=List[LinkResponse])
def list_links(
    q: Optional[str] = None,
    store: LinkStore = Depends(get_store)
):
    """List links newest first, optionally filtered by code or URL substring."""
    return store.list(q)


@router.get("/{code}", response_model=LinkStats, responses={404: {"model": ErrorResponse}})
def get_link(code: str, store: LinkStore = Depends(get_store)):
    return store.get(code)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_link(code: str, store: LinkStore = Depends(get_store)):
    store.delete(code)
    logger.info("Deleted link %s", code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
