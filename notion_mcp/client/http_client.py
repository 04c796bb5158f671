import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from notion_mcp.client.exceptions import MissingPathParameterError, RemoteFailureError
from notion_mcp.client.models import OperationDescriptor, RemoteFailure, RemoteSuccess
from notion_mcp.logging.logger import Log

_PATH_PLACEHOLDER = re.compile(r"\{(\w+)\}")
_QUERY_METHODS = frozenset({"GET", "HEAD", "DELETE"})


class NotionHttpClient:
    """Executes registry operations against the Notion REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        notion_version: str,
        timeout_seconds: int = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Notion-Version": notion_version,
                "Content-Type": "application/json",
            },
        )

    def execute(
        self,
        operation: OperationDescriptor,
        params: Mapping[str, Any] | None = None,
    ) -> RemoteSuccess:
        """Call ``operation`` with ``params``.

        Path placeholders are filled from ``params``; the remaining values go
        to the query string for GET/HEAD/DELETE and to the JSON body otherwise.

        Raises:
            RemoteFailureError: when the API answers with a non-2xx status.
            MissingPathParameterError: when a path placeholder has no value.
            httpx.TransportError: on network failures.
        """
        method = operation.method.upper()
        path, remaining = self._render_path(operation.path, dict(params or {}))

        request_kwargs: dict[str, Any] = {}
        if remaining:
            key = "params" if method in _QUERY_METHODS else "json"
            request_kwargs[key] = remaining

        Log.debug(f"{method} {path} ({operation.operation_id})")
        response = self._client.request(method, path, **request_kwargs)
        if response.is_error:
            raise RemoteFailureError(RemoteFailure.from_response(response))

        return RemoteSuccess(data=response.json() if response.content else None)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "NotionHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def _render_path(template: str, params: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in params:
                raise MissingPathParameterError(f"Missing path parameter '{name}' for {template}")
            return quote(str(params.pop(name)), safe="")

        return _PATH_PLACEHOLDER.sub(substitute, template), params
