"""Voter base classes.

Usage:
    from resource_voter.application.voters import AutoConfiguredVoter, CrudVoter
"""

from resource_voter.application.voters.auto_configured_voter import (
    AutoConfiguredVoter,
)
from resource_voter.application.voters.crud_voter import CrudVoter, OperationHandler

__all__ = ["AutoConfiguredVoter", "CrudVoter", "OperationHandler"]
