"""Renders typed errors as user-facing markdown messages (French)."""

from notion_mcp.errors.exceptions import ErrorKind, NotionError

# kind -> (emoji, title, label)
_TEMPLATES: dict[ErrorKind, tuple[str, str, str]] = {
    ErrorKind.AUTHENTICATION: ("🔑", "Erreur d'authentification", "Solution"),
    ErrorKind.VALIDATION: ("⚠️", "Erreur de validation", "Solution"),
    ErrorKind.PERMISSION: ("🔒", "Erreur de permission", "Solution"),
    ErrorKind.NOT_FOUND: ("🔍", "Ressource non trouvée", "Détails"),
    ErrorKind.CONFLICT: ("⚡", "Conflit détecté", "Action"),
    ErrorKind.RATE_LIMIT: ("⏱️", "Limite de requêtes atteinte", "Action"),
    ErrorKind.SERVER: ("🔴", "Erreur serveur", "Action"),
}


def format_user_message(error: NotionError) -> str:
    """Return the markdown message shown to the user for ``error``."""
    template = _TEMPLATES.get(error.kind)
    if template is None:
        return f"❌ **Erreur** : {error.message}"
    emoji, title, label = template
    return f"{emoji} **{title}**\n\n{error.message}\n\n**{label}** : {error.suggestion}"
