"""Tri-state voter decision."""

from enum import Enum


class Decision(str, Enum):
    """Result of one voter for one attribute and subject.

    ABSTAIN means the voter does not apply (wrong prefix, unknown operation,
    unrelated subject type, or a subject targeted at another voter).
    """

    GRANT = "grant"
    DENY = "deny"
    ABSTAIN = "abstain"

    @classmethod
    def from_bool(cls, granted: bool) -> "Decision":
        """Map a hook result to GRANT or DENY.

        Args:
            granted: Hook return value.

        Returns:
            Decision: GRANT when granted is truthy, DENY otherwise.
        """
        return cls.GRANT if granted else cls.DENY
