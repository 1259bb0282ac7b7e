from .link import LinkCreate, LinkResponse, LinkStats, ErrorResponse

__all__ = ["LinkCreate", "LinkResponse", "LinkStats", "ErrorResponse"]
