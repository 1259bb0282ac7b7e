import random
import re
import string


# Case-sensitive alphanumeric codes (Base62)
CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits

MIN_CODE_LENGTH = 6
MAX_CODE_LENGTH = 8

CODE_PATTERN = re.compile(r"[A-Za-z0-9]{6,8}")

# Fixed single-segment routes a code must never shadow
RESERVED_CODES = frozenset({
    'healthz', 'static', 'api', 'code', 'docs', 'redoc',
})


def generate_code(length: int = 6) -> str:
    """
    Generate a random short code.

    Args:
        length: Length of the code (6 to 8 characters)

    Returns:
        A code drawn uniformly from the 62 character alphabet

    Note:
        Uniqueness is not checked here. The caller inserts the code
        and relies on the primary key constraint to report a collision.
        6 chars: 62^6 = 56,800,235,584 combinations
    """
    if not MIN_CODE_LENGTH <= length <= MAX_CODE_LENGTH:
        raise ValueError(
            f"Code length must be between {MIN_CODE_LENGTH} and {MAX_CODE_LENGTH}"
        )

    return ''.join(random.choices(CHARSET, k=length))


def validate_code(code) -> tuple[bool, str]:
    """
    Validate a custom short code.

    Args:
        code: The code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not code or not isinstance(code, str):
        return False, "Code cannot be empty"

    if not CODE_PATTERN.fullmatch(code):
        return False, "Custom code must match [A-Za-z0-9]{6,8}"

    return True, ""


def is_reserved_code(code: str) -> bool:
    """Check if a code collides with a fixed route segment"""
    return code in RESERVED_CODES
