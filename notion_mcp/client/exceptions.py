from notion_mcp.client.models import RemoteFailure


class NotionClientError(Exception):
    """Base exception for all HTTP client errors."""


class MissingPathParameterError(NotionClientError):
    """Raised when a path placeholder has no matching parameter."""


class RemoteFailureError(NotionClientError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, failure: RemoteFailure) -> None:
        super().__init__(failure.reason or f"HTTP {failure.status}")
        self.failure = failure
