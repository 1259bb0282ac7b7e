import logging

from fastapi import Depends
from fastapi.responses import PlainTextResponse, RedirectResponse

from ..core.exceptions import NotFound
from ..core.shortener import validate_code
from ..services.store import LinkStore, get_store

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


def redirect_to_url(code: str, store: LinkStore = Depends(get_store)):
    """
    Redirect to the target URL for a short code.

    Case-sensitive lookup. The click is recorded before the redirect
    is returned; a store failure propagates as a 500.
    """
    is_valid, _ = validate_code(code)
    if not is_valid:
        return PlainTextResponse("Not found", status_code=404)

    try:
        link = store.get(code)
        target_url = link.target_url
        store.record_click(code)
    except NotFound:
        return PlainTextResponse("Not found", status_code=404)

    # 302 so browsers keep coming back and every visit is counted
    return RedirectResponse(url=target_url, status_code=302, headers=NO_CACHE_HEADERS)
