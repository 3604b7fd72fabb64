"""Decision manager protocol (consumed, implemented by the host).

The decision manager polls every registered voter for one attribute and
subject and combines their votes, typically "any grant wins, else any deny
wins, else a configurable default". The combination policy belongs to the
host; this package only calls is_granted().
"""

from typing import Any, Protocol


class DecisionManagerProtocol(Protocol):
    """Final yes/no for one permission attribute and subject."""

    def is_granted(self, attribute: str, subject: Any) -> bool:
        """Combine voter decisions.

        Args:
            attribute: Permission attribute (e.g. "article:update").
            subject: Resolved subject, possibly a TargetedSubject.

        Returns:
            bool: True if access is granted.
        """
        ...
