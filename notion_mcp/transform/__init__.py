from notion_mcp.transform.base import BaseTransformer
from notion_mcp.transform.factory import TransformerFactory
from notion_mcp.transform.models import OutputMode
from notion_mcp.transform.transformer import ResponseTransformer

__all__ = ["BaseTransformer", "OutputMode", "ResponseTransformer", "TransformerFactory"]
