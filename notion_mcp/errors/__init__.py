from notion_mcp.errors.classifier import classify
from notion_mcp.errors.exceptions import (
    AuthenticationError,
    ConflictError,
    ErrorKind,
    NotFoundError,
    NotionError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from notion_mcp.errors.formatter import format_user_message

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "ErrorKind",
    "NotFoundError",
    "NotionError",
    "PermissionDeniedError",
    "RateLimitError",
    "ServerError",
    "ValidationError",
    "classify",
    "format_user_message",
]
