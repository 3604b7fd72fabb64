"""Domain events package.

Usage:
    from resource_voter.domain.events import AuthorizationDecided, DomainEvent
"""

from resource_voter.domain.events.authorization_events import AuthorizationDecided
from resource_voter.domain.events.base_event import DomainEvent

__all__ = ["AuthorizationDecided", "DomainEvent"]
