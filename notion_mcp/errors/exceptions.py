"""Typed errors for failed Notion API calls.

Each class is one member of a closed taxonomy. Whether an error may be retried
depends only on its kind.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar


class ErrorKind(str, Enum):
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"


RETRYABLE_KINDS: frozenset[ErrorKind] = frozenset({
    ErrorKind.CONFLICT,
    ErrorKind.RATE_LIMIT,
    ErrorKind.SERVER,
})


class NotionError(Exception):
    """Base class for all classified API failures."""

    kind: ClassVar[ErrorKind | None] = None
    type_name: ClassVar[str] = "NotionError"

    def __init__(
        self,
        message: str,
        *,
        code: str,
        http_status: int,
        suggestion: str | None = None,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.suggestion = suggestion
        self.operation = operation
        self.params = params

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the error body of a tool error response."""
        payload: dict[str, Any] = {
            "type": self.type_name,
            "code": self.code,
            "httpStatus": self.http_status,
            "message": self.message,
            "retryable": self.retryable,
            "suggestion": self.suggestion,
        }
        if self.operation is not None:
            payload["operation"] = self.operation
        if self.params is not None:
            payload["params"] = dict(self.params)
        return payload


class AuthenticationError(NotionError):
    """Invalid or missing token (401), or a 403 not caused by sharing settings."""

    kind = ErrorKind.AUTHENTICATION
    type_name = "AuthenticationError"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
        http_status: int = 401,
    ) -> None:
        forbidden = http_status == 403
        super().__init__(
            message,
            code="forbidden" if forbidden else "unauthorized",
            http_status=http_status,
            suggestion=(
                "Votre intégration n'a pas accès à cette ressource. Vérifiez les permissions."
                if forbidden
                else 'Vérifiez que votre token NOTION_TOKEN commence par "ntn_" et est valide.'
            ),
            operation=operation,
            params=params,
        )


class ValidationError(NotionError):
    kind = ErrorKind.VALIDATION
    type_name = "ValidationError"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code="validation_error",
            http_status=400,
            suggestion=(
                f'Le champ "{field}" est invalide ou manquant.'
                if field
                else "Vérifiez vos paramètres."
            ),
            operation=operation,
            params=params,
        )
        self.field = field


class PermissionDeniedError(NotionError):
    """The integration lacks access to the resource (403 ``permission_required``)."""

    kind = ErrorKind.PERMISSION
    type_name = "PermissionError"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code="forbidden",
            http_status=403,
            suggestion=(
                "Votre intégration n'a pas les permissions nécessaires. "
                "Ajoutez la ressource via les paramètres d'intégration."
            ),
            operation=operation,
            params=params,
        )


class NotFoundError(NotionError):
    kind = ErrorKind.NOT_FOUND
    type_name = "NotFoundError"

    def __init__(
        self,
        message: str,
        resource_type: str | None = None,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code="object_not_found",
            http_status=404,
            suggestion=(
                f'La ressource de type "{resource_type}" n\'existe pas '
                "ou n'est pas partagée avec votre intégration."
                if resource_type
                else "Ressource non trouvée."
            ),
            operation=operation,
            params=params,
        )
        self.resource_type = resource_type


class ConflictError(NotionError):
    kind = ErrorKind.CONFLICT
    type_name = "ConflictError"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code="conflict",
            http_status=409,
            suggestion="Un conflit est survenu (modification simultanée). Veuillez réessayer.",
            operation=operation,
            params=params,
        )


class RateLimitError(NotionError):
    kind = ErrorKind.RATE_LIMIT
    type_name = "RateLimitError"

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code="rate_limited",
            http_status=429,
            suggestion=(
                f"Attendez {retry_after} seconde(s) avant de réessayer."
                if retry_after
                else "Ralentissez les requêtes."
            ),
            operation=operation,
            params=params,
        )
        self.retry_after = retry_after

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.retry_after is not None:
            payload["retryAfter"] = self.retry_after
        return payload


class ServerError(NotionError):
    """5xx and any status outside the mapped set."""

    kind = ErrorKind.SERVER
    type_name = "ServerError"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        params: Mapping[str, Any] | None = None,
        http_status: int = 500,
    ) -> None:
        super().__init__(
            message,
            code="internal_server_error",
            http_status=http_status,
            suggestion=(
                "Une erreur serveur est survenue. Veuillez réessayer dans quelques instants."
            ),
            operation=operation,
            params=params,
        )
