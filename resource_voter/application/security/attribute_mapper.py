"""Operation -> permission attribute mapping.

Mapping rules (first match wins):
    1. Explicit operation name that is not framework-internal -> {prefix}:{name}
    2. LIST -> {prefix}:list (only when collection enforcement is on)
       READ -> {prefix}:read, CREATE -> {prefix}:create,
       UPDATE/PATCH -> {prefix}:update, DELETE -> {prefix}:delete
    3. Last URI template segment, unless it is a placeholder
       (/articles/{id}/publish -> {prefix}:publish)
    4. Otherwise the operation is not checked (None)

Framework-internal names are recognized by prefix (default "_api_"), so
generated route names never leak into permission attributes.

Usage:
    mapper = OperationAttributeMapper(enforce_collection_list=True)
    mapper.map(Operation(kind=OperationKind.LIST), "article")  # "article:list"
"""

import re
from collections.abc import Iterable

from resource_voter.core.enums import NamingConvention
from resource_voter.domain.enums import OperationKind
from resource_voter.domain.value_objects import (
    ATTRIBUTE_DELIMITER,
    Operation,
    is_valid_token,
    validate_prefix,
)
from resource_voter.application.security.naming import apply_naming_convention

# Trailing "{._format}"-style placeholder glued to a segment
_TRAILING_PLACEHOLDER = re.compile(r"\{[^}]*\}$")


def last_uri_segment(uri_template: str) -> str | None:
    """Extract the trailing action segment of a URI template.

    Args:
        uri_template: Routing template.

    Returns:
        str | None: The last path segment, or None if it is a placeholder.

    Example:
        >>> last_uri_segment("/articles/{id}/publish")
        'publish'
        >>> last_uri_segment("/articles/{id}") is None
        True
    """
    path = uri_template.strip().strip("/")
    if not path:
        return None
    segment = path.rsplit("/", 1)[-1]
    if not segment or segment.startswith("{"):
        return None
    return _TRAILING_PLACEHOLDER.sub("", segment) or None


class OperationAttributeMapper:
    """Maps operation descriptors to ``prefix:operation`` attributes.

    Attributes:
        enforce_collection_list: Map LIST operations to "list" (else unchecked).
        internal_prefixes: Operation name prefixes treated as framework-internal.
        naming: Naming convention applied to custom tokens.
        normalize_names: Lowercase custom tokens before the convention.
    """

    def __init__(
        self,
        *,
        enforce_collection_list: bool = True,
        internal_prefixes: Iterable[str] = ("_api_",),
        naming: NamingConvention = NamingConvention.PRESERVE,
        normalize_names: bool = False,
    ) -> None:
        self.enforce_collection_list = enforce_collection_list
        self.internal_prefixes = tuple(p for p in internal_prefixes if p)
        self.naming = naming
        self.normalize_names = normalize_names

    def map(self, operation: Operation, prefix: str) -> str | None:
        """Map an operation to a permission attribute.

        Args:
            operation: Operation descriptor.
            prefix: Attribute prefix of the resource type.

        Returns:
            str | None: "prefix:token", or None if the operation is not checked.

        Raises:
            ConfigurationError: If the prefix is empty or contains ':'.
        """
        validate_prefix(prefix)

        token = self.resolve_token(operation)
        if token is None or not is_valid_token(token):
            return None
        return f"{prefix}{ATTRIBUTE_DELIMITER}{token}"

    def resolve_token(self, operation: Operation) -> str | None:
        """Resolve the operation part of the attribute (unvalidated)."""
        if operation.name is not None and not self.is_internal(operation.name):
            return self._normalize(operation.name)

        crud_token = operation.kind.crud_token
        if crud_token is not None:
            if operation.kind is OperationKind.LIST and not self.enforce_collection_list:
                return None
            return crud_token

        if operation.uri_template:
            segment = last_uri_segment(operation.uri_template)
            if segment is not None:
                return self._normalize(segment)

        return None

    def is_internal(self, name: str) -> bool:
        """Whether an operation name is framework-generated."""
        return any(name.startswith(p) for p in self.internal_prefixes)

    def _normalize(self, token: str) -> str:
        return apply_naming_convention(
            token, self.naming, lowercase=self.normalize_names
        )
