import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from notion_mcp.adapter.params import deserialize_params, parse_fields
from notion_mcp.client.exceptions import RemoteFailureError
from notion_mcp.client.http_client import NotionHttpClient
from notion_mcp.client.models import OperationDescriptor, RemoteFailure
from notion_mcp.config.settings import Settings
from notion_mcp.errors.classifier import classify
from notion_mcp.errors.formatter import format_user_message
from notion_mcp.logging.logger import Log
from notion_mcp.transform.base import BaseTransformer
from notion_mcp.transform.factory import TransformerFactory

OUTPUT_ARGUMENT = "_output"
FIELDS_ARGUMENT = "_fields"


@dataclass(frozen=True)
class ToolResult:
    """Text content of a tool call response."""

    text: str
    is_error: bool = False

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            payload["isError"] = True
        return payload


class ToolCallHandler:
    """Run one tool call: API request, then transform or classify the outcome."""

    def __init__(self, client: NotionHttpClient, transformer: BaseTransformer) -> None:
        self._client = client
        self._transformer = transformer

    def handle(
        self,
        operation: OperationDescriptor,
        arguments: Mapping[str, Any] | None = None,
    ) -> ToolResult:
        """Execute ``operation`` and render its result as tool content.

        API failures come back as an error result; any other exception propagates.
        """
        params = deserialize_params(arguments or {})
        mode = params.pop(OUTPUT_ARGUMENT, None)
        fields = parse_fields(params.pop(FIELDS_ARGUMENT, None))

        Log.info(
            f"Tool call {operation.operation_id} "
            f"({operation.method.upper()} {operation.path}, mode={mode or 'default'})"
        )
        try:
            response = self._client.execute(operation, params)
        except RemoteFailureError as exc:
            return self._error_result(exc.failure, operation, params)

        transformed = self._transformer.transform(response.data, mode, fields)
        return ToolResult(text=json.dumps(transformed, ensure_ascii=False))

    @staticmethod
    def _error_result(
        failure: RemoteFailure,
        operation: OperationDescriptor,
        params: dict[str, Any],
    ) -> ToolResult:
        error = classify(failure, operation.operation_id or None, params or None)
        Log.error(
            f"Tool call {operation.operation_id} failed: HTTP {failure.status} "
            f"{error.code} (retryable={error.retryable})"
        )
        envelope = {"message": format_user_message(error), "error": error.to_dict()}
        return ToolResult(text=json.dumps(envelope, ensure_ascii=False), is_error=True)

    def close(self) -> None:
        self._client.close()


def build_tool_handler(settings: Settings) -> ToolCallHandler:
    """Wire the HTTP client and transformer from application settings."""
    client = NotionHttpClient(
        base_url=settings.notion_base_url,
        token=settings.notion_token,
        notion_version=settings.notion_version,
        timeout_seconds=settings.notion_timeout_seconds,
    )
    return ToolCallHandler(client, TransformerFactory.create(settings))
