from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from notion_mcp.transform.models import OutputMode


class BaseTransformer(ABC):
    """Contract for all response transformers."""

    @abstractmethod
    def transform(
        self,
        data: Any,
        mode: OutputMode | str | None = None,
        fields: Sequence[str] | None = None,
    ) -> Any:
        """Reshape a successful API response.

        Args:
            data: Decoded JSON body of the response.
            mode: Requested output mode; None selects the configured default.
            fields: Optional whitelist of top-level resource fields.

        Returns:
            The transformed value. Never raises.
        """
