"""Operation kinds for permission attribute mapping.

Each kind names the category of action attempted on a resource. The five
CRUD tokens are the fixed operation part of a permission attribute
(``article:list``, ``article:read``, ...); CUSTOM operations carry their own
token taken from an explicit name or the URI template.

Reference:
    - resource_voter.application.security.attribute_mapper
"""

from enum import Enum


class OperationKind(str, Enum):
    """Kinds of operations that can be performed on a resource.

    String Enum:
        Values are lowercase for logging and error payloads.
    """

    LIST = "list"
    """Collection read (GET /articles)."""

    CREATE = "create"
    """Create a new item (POST /articles)."""

    READ = "read"
    """Read a single item (GET /articles/{id})."""

    UPDATE = "update"
    """Full replacement (PUT /articles/{id})."""

    PATCH = "patch"
    """Partial update (PATCH /articles/{id}), checked as ``update``."""

    DELETE = "delete"
    """Delete an item (DELETE /articles/{id})."""

    CUSTOM = "custom"
    """Non-CRUD action (POST /articles/{id}/publish)."""

    @property
    def is_update_style(self) -> bool:
        """True for UPDATE and PATCH."""
        return self in (OperationKind.UPDATE, OperationKind.PATCH)

    @property
    def crud_token(self) -> str | None:
        """Fixed attribute token for this kind, None for CUSTOM.

        Returns:
            str | None: "list", "create", "read", "update", "delete" or None.
        """
        if self is OperationKind.CUSTOM:
            return None
        if self.is_update_style:
            return "update"
        return self.value


CRUD_TOKENS: frozenset[str] = frozenset({"list", "create", "read", "update", "delete"})
"""Operation tokens every CRUD voter understands without registration."""
