import io
import json
from unittest.mock import MagicMock, patch

import pytest

from notion_mcp.adapter.handler import ToolResult
from notion_mcp.client.models import OperationDescriptor
from notion_mcp.main import main

_CALL = {
    "operation": {"operation_id": "retrieve-a-page", "method": "get", "path": "/v1/pages/{page_id}"},
    "arguments": {"page_id": "p1", "_output": "success_only"},
}


def _run_main(monkeypatch: pytest.MonkeyPatch, handler: MagicMock) -> str:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(_CALL)))
    stdout = io.StringIO()
    monkeypatch.setattr("sys.stdout", stdout)
    with patch("notion_mcp.main.build_tool_handler", return_value=handler), \
            patch("notion_mcp.main.Log"):
        main()
    return stdout.getvalue()


class TestMain:
    def test_prints_tool_result(self, monkeypatch: pytest.MonkeyPatch) -> None:
        handler = MagicMock()
        handler.handle.return_value = ToolResult(text='{"success": true}')
        output = _run_main(monkeypatch, handler)
        assert json.loads(output) == {"content": [{"type": "text", "text": '{"success": true}'}]}

    def test_passes_operation_and_arguments(self, monkeypatch: pytest.MonkeyPatch) -> None:
        handler = MagicMock()
        handler.handle.return_value = ToolResult(text="{}")
        _run_main(monkeypatch, handler)
        handler.handle.assert_called_once_with(
            OperationDescriptor("retrieve-a-page", "get", "/v1/pages/{page_id}"),
            {"page_id": "p1", "_output": "success_only"},
        )
        handler.close.assert_called_once_with()

    def test_closes_handler_and_reraises_on_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        handler = MagicMock()
        handler.handle.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError, match="boom"):
            _run_main(monkeypatch, handler)
        handler.close.assert_called_once_with()
