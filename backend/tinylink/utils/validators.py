from urllib.parse import urlparse

MAX_URL_LENGTH = 2048


def is_valid_url(url) -> tuple[bool, str]:
    """
    Validate that a string is an absolute URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "Invalid or missing URL"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if url != url.strip() or any(c.isspace() for c in url):
        return False, "Invalid or missing URL"

    try:
        result = urlparse(url)
        # Accessing port validates it
        result.port
    except ValueError:
        return False, "Invalid or missing URL"

    # Must have scheme and authority
    if not all([result.scheme, result.netloc]):
        return False, "Invalid or missing URL"

    if not result.hostname:
        return False, "Invalid or missing URL"

    return True, ""
