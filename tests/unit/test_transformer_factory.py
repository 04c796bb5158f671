"""Tests for TransformerFactory."""

from unittest.mock import patch

import pytest

from notion_mcp.config.settings import Settings
from notion_mcp.transform.base import BaseTransformer
from notion_mcp.transform.factory import TransformerFactory
from notion_mcp.transform.models import OutputMode
from notion_mcp.transform.transformer import ResponseTransformer


class TestTransformerFactory:
    def test_creates_response_transformer(self) -> None:
        transformer = TransformerFactory.create(Settings(notion_mcp_output_mode="full"))
        assert isinstance(transformer, BaseTransformer)
        assert isinstance(transformer, ResponseTransformer)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("full", OutputMode.FULL),
            ("reduced", OutputMode.REDUCED),
            ("success_only", OutputMode.SUCCESS_ONLY),
            ("Reduced", OutputMode.REDUCED),
        ],
    )
    def test_uses_configured_mode(self, raw: str, expected: OutputMode) -> None:
        transformer = TransformerFactory.create(Settings(notion_mcp_output_mode=raw))
        assert isinstance(transformer, ResponseTransformer)
        assert transformer.default_mode is expected

    def test_unknown_mode_falls_back_to_full(self) -> None:
        transformer = TransformerFactory.create(Settings(notion_mcp_output_mode="verbose"))
        assert isinstance(transformer, ResponseTransformer)
        assert transformer.default_mode is OutputMode.FULL

    def test_unknown_mode_logs_warning(self) -> None:
        with patch("notion_mcp.transform.factory.Log") as mock_log:
            TransformerFactory.create(Settings(notion_mcp_output_mode="verbose"))
        mock_log.warning.assert_called_once()
        assert "verbose" in mock_log.warning.call_args.args[0]

    def test_reads_mode_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOTION_MCP_OUTPUT_MODE", "success_only")
        transformer = TransformerFactory.create(Settings())
        assert isinstance(transformer, ResponseTransformer)
        assert transformer.default_mode is OutputMode.SUCCESS_ONLY
