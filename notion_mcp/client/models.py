from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass(frozen=True)
class OperationDescriptor:
    """A callable API operation as declared by the operation registry."""

    operation_id: str
    method: str
    path: str

    @property
    def is_read(self) -> bool:
        return self.method.lower() in ("get", "head")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "OperationDescriptor":
        return cls(
            operation_id=str(raw.get("operation_id") or raw.get("operationId") or ""),
            method=str(raw.get("method", "get")),
            path=str(raw.get("path", "")),
        )


@dataclass(frozen=True)
class RemoteSuccess:
    """Decoded body of a successful API call."""

    data: Any = None


@dataclass(frozen=True)
class RemoteFailure:
    """A non-2xx API response, reduced to what error classification needs."""

    status: int
    body: Any = None
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    reason: str = ""

    def __post_init__(self) -> None:
        # Header lookups must be case-insensitive whatever mapping was passed in.
        if not isinstance(self.headers, httpx.Headers):
            object.__setattr__(self, "headers", httpx.Headers(self.headers or {}))

    @classmethod
    def from_response(cls, response: httpx.Response) -> "RemoteFailure":
        body: Any = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = response.text
        return cls(
            status=response.status_code,
            body=body,
            headers=response.headers,
            reason=f"{response.status_code} {response.reason_phrase}".strip(),
        )
