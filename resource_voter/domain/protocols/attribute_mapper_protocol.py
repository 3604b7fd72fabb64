"""Attribute mapper protocol."""

from typing import Protocol

from resource_voter.domain.value_objects import Operation


class AttributeMapperProtocol(Protocol):
    """Operation + prefix -> permission attribute."""

    def map(self, operation: Operation, prefix: str) -> str | None:
        """Map an operation to "prefix:token".

        Returns:
            str | None: Attribute, or None when the operation is not checked.
        """
        ...
