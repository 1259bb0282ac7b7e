import logging
from typing import Optional

from ..config import settings
from ..core.exceptions import DuplicateCode, InvalidInput, StoreError
from ..core.shortener import generate_code, is_reserved_code, validate_code
from ..models import Link
from ..utils.validators import is_valid_url
from .store import LinkStore

logger = logging.getLogger(__name__)


def create_link(store: LinkStore, url: Optional[str], code: Optional[str] = None) -> Link:
    """
    Validate input and create a new link.

    Args:
        store: Link store bound to the request session
        url: Target URL, must be absolute
        code: Optional custom code; empty means generate one

    Returns:
        The created link with zeroed counters

    Raises:
        InvalidInput: URL or custom code is malformed or reserved
        DuplicateCode: Custom code is already taken
        StoreError: Persistence failed or no free generated code was found
    """
    is_valid, error_msg = is_valid_url(url)
    if not is_valid:
        raise InvalidInput(error_msg)

    if code:
        is_valid, error_msg = validate_code(code)
        if not is_valid:
            raise InvalidInput(error_msg)

        if is_reserved_code(code):
            raise InvalidInput(f"'{code}' is a reserved word and cannot be used")

        link = store.create(code, url)
        logger.info("Created link %s -> %s", link.code, link.target_url)
        return link

    # Generated codes are inserted optimistically and retried on collision
    for attempt in range(1, settings.CODE_MAX_ATTEMPTS + 1):
        candidate = generate_code(settings.CODE_LENGTH)
        if is_reserved_code(candidate):
            continue

        try:
            link = store.create(candidate, url)
        except DuplicateCode:
            logger.warning("Generated code %s collided (attempt %d)", candidate, attempt)
            continue

        logger.info("Created link %s -> %s", link.code, link.target_url)
        return link

    logger.error("Unable to generate unique short code after %d attempts",
                 settings.CODE_MAX_ATTEMPTS)
    raise StoreError()
