"""Voter protocols.

VoterProtocol is the contract the host's decision manager polls.
CrudCapability is the set of checks a CRUD voter implements for its
resource type; CrudVoter dispatches to it by operation token.
"""

from typing import Any, Protocol

from resource_voter.domain.enums import Decision


class VoterProtocol(Protocol):
    """A decision unit for permission attributes."""

    @property
    def identity(self) -> str:
        """Identity compared against TargetedSubject.voter."""
        ...

    def supports(self, attribute: str, subject: Any) -> bool:
        """Whether this voter applies to the attribute and subject."""
        ...

    def vote(self, attribute: str, subject: Any) -> Decision:
        """GRANT, DENY, or ABSTAIN when the voter does not apply."""
        ...


class CrudCapability(Protocol):
    """Per-resource checks. Return True to grant, False to deny."""

    def can_list(self) -> bool: ...

    def can_create(self, obj: Any) -> bool: ...

    def can_read(self, obj: Any) -> bool: ...

    def can_update(self, obj: Any, previous: Any) -> bool: ...

    def can_delete(self, obj: Any) -> bool: ...

    def can_custom_operation(self, operation: str, obj: Any, previous: Any) -> bool: ...
