import json
import sys

from notion_mcp.adapter.handler import build_tool_handler
from notion_mcp.client.models import OperationDescriptor
from notion_mcp.config.settings import Settings
from notion_mcp.logging.logger import Log


def main() -> None:
    """Entry point: read one tool call from stdin -> execute -> write the result to stdout."""
    settings = Settings()
    Log.configure(settings.log_level)

    call = json.load(sys.stdin)
    operation = OperationDescriptor.from_dict(call["operation"])

    handler = build_tool_handler(settings)
    try:
        result = handler.handle(operation, call.get("arguments"))
    except Exception:
        Log.exception(f"Tool call {operation.operation_id} failed unexpectedly")
        raise
    finally:
        handler.close()

    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
