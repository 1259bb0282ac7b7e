import logging
import sys

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure root logging for the service.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric_level)

    # Avoid duplicate output when the app is created more than once
    if not any(getattr(h, "_tinylink", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tinylink = True
        root.addHandler(handler)

    return logging.getLogger("tinylink")
