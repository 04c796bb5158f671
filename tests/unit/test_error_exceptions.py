"""Tests for the typed error hierarchy and its serialization."""

import pytest

from notion_mcp.errors.exceptions import (
    AuthenticationError,
    ConflictError,
    ErrorKind,
    NotFoundError,
    NotionError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    ValidationError,
)


def _all_errors() -> list[NotionError]:
    return [
        AuthenticationError("a"),
        ValidationError("v"),
        PermissionDeniedError("p"),
        NotFoundError("n"),
        ConflictError("c"),
        RateLimitError("r"),
        ServerError("s"),
    ]


class TestRetryable:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (AuthenticationError("x"), False),
            (AuthenticationError("x", http_status=403), False),
            (ValidationError("x"), False),
            (PermissionDeniedError("x"), False),
            (NotFoundError("x"), False),
            (ConflictError("x"), True),
            (RateLimitError("x"), True),
            (ServerError("x"), True),
        ],
    )
    def test_follows_kind(self, error: NotionError, expected: bool) -> None:
        assert error.retryable is expected

    def test_cannot_be_overridden(self) -> None:
        error = ServerError("x")
        with pytest.raises(AttributeError):
            error.retryable = False  # type: ignore[misc]

    def test_each_class_has_distinct_kind(self) -> None:
        kinds = {error.kind for error in _all_errors()}
        assert kinds == set(ErrorKind)


class TestToDict:
    def test_base_fields(self) -> None:
        error = NotFoundError("Could not find page", resource_type="page")
        assert error.to_dict() == {
            "type": "NotFoundError",
            "code": "object_not_found",
            "httpStatus": 404,
            "message": "Could not find page",
            "retryable": False,
            "suggestion": (
                'La ressource de type "page" n\'existe pas '
                "ou n'est pas partagée avec votre intégration."
            ),
        }

    def test_includes_operation_and_params_when_supplied(self) -> None:
        error = ConflictError("conflict", operation="update-a-page", params={"page_id": "p1"})
        payload = error.to_dict()
        assert payload["operation"] == "update-a-page"
        assert payload["params"] == {"page_id": "p1"}

    def test_omits_operation_and_params_when_absent(self) -> None:
        payload = ServerError("boom").to_dict()
        assert "operation" not in payload
        assert "params" not in payload

    def test_permission_error_type_name(self) -> None:
        assert PermissionDeniedError("x").to_dict()["type"] == "PermissionError"

    def test_retry_after_only_when_known(self) -> None:
        assert "retryAfter" not in RateLimitError("slow").to_dict()
        assert RateLimitError("slow", retry_after=0).to_dict()["retryAfter"] == 0

    def test_retry_after_only_on_rate_limit(self) -> None:
        for error in _all_errors():
            if not isinstance(error, RateLimitError):
                assert "retryAfter" not in error.to_dict()


class TestAsException:
    def test_is_raisable_with_message(self) -> None:
        with pytest.raises(NotionError, match="token is invalid"):
            raise AuthenticationError("API token is invalid.")

    def test_authentication_code_depends_on_status(self) -> None:
        assert AuthenticationError("x").code == "unauthorized"
        assert AuthenticationError("x", http_status=403).code == "forbidden"

    def test_zero_retry_after_uses_generic_suggestion(self) -> None:
        assert RateLimitError("x", retry_after=0).suggestion == "Ralentissez les requêtes."
