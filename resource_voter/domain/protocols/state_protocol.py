"""Decorated read/write path protocols.

The gateway wraps the host's data provider (read path) and data processor
(write path): it authorizes what the provider returns, and authorizes
payloads before the processor persists them.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from resource_voter.domain.value_objects import Operation


class DataProviderProtocol(Protocol):
    """Loads the data an operation reads."""

    def provide(
        self,
        operation: Operation,
        uri_variables: Mapping[str, Any],
        context: Mapping[str, Any],
    ) -> Any:
        """Load an item, a collection, or None."""
        ...


class DataProcessorProtocol(Protocol):
    """Persists the payload of a write operation."""

    def process(
        self,
        data: Any,
        operation: Operation,
        uri_variables: Mapping[str, Any],
        context: Mapping[str, Any],
    ) -> Any:
        """Persist data and return the result."""
        ...
