from typing import Any

import pytest


@pytest.fixture()
def page_resource() -> dict[str, Any]:
    """A Notion page as returned by the retrieve-page endpoint."""
    return {
        "object": "page",
        "id": "p1",
        "created_time": "2025-01-10T09:00:00.000Z",
        "last_edited_time": "2025-01-11T10:30:00.000Z",
        "created_by": {"object": "user", "id": "u1"},
        "last_edited_by": {"object": "user", "id": "u2"},
        "cover": None,
        "icon": {"type": "emoji", "emoji": "📄"},
        "parent": {"type": "database_id", "database_id": "db1"},
        "archived": False,
        "in_trash": False,
        "url": "https://www.notion.so/p1",
        "public_url": None,
        "properties": {
            "Name": {
                "id": "title",
                "type": "title",
                "title": [
                    {
                        "type": "text",
                        "text": {"content": "Quarterly ", "link": None},
                        "plain_text": "Quarterly ",
                        "annotations": {"bold": False, "color": "default"},
                    },
                    {
                        "type": "text",
                        "text": {"content": "review", "link": None},
                        "plain_text": "review",
                        "annotations": {"bold": True, "color": "default"},
                    },
                ],
            },
            "Status": {
                "id": "s%3A",
                "type": "select",
                "select": {"id": "opt1", "name": "Done", "color": "green"},
            },
            "Tags": {
                "id": "t%3A",
                "type": "multi_select",
                "multi_select": [
                    {"id": "a", "name": "finance", "color": "blue"},
                    {"id": "b", "name": "q1", "color": "red"},
                ],
            },
            "Estimate": {"id": "e%3A", "type": "number", "number": 8},
        },
    }


@pytest.fixture()
def query_response(page_resource: dict[str, Any]) -> dict[str, Any]:
    """A paginated database query response holding one page."""
    return {
        "object": "list",
        "type": "page_or_database",
        "results": [page_resource],
        "next_cursor": "cursor-2",
        "has_more": True,
        "request_id": "req-1",
        "page_or_database": {},
    }
