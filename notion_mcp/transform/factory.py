from notion_mcp.config.settings import Settings
from notion_mcp.logging.logger import Log
from notion_mcp.transform.base import BaseTransformer
from notion_mcp.transform.models import OutputMode
from notion_mcp.transform.transformer import ResponseTransformer


class TransformerFactory:
    """Creates the response transformer with the configured default mode."""

    @classmethod
    def create(cls, settings: Settings) -> BaseTransformer:
        return ResponseTransformer(default_mode=cls._resolve_mode(settings))

    @staticmethod
    def _resolve_mode(settings: Settings) -> OutputMode:
        raw = settings.notion_mcp_output_mode
        mode = OutputMode.parse(raw)
        if mode is None:
            Log.warning(
                f"Unknown output mode '{raw}', falling back to '{OutputMode.FULL.value}'. "
                f"Choose from: {[m.value for m in OutputMode]}"
            )
            return OutputMode.FULL
        return mode
