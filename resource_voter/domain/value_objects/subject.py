"""Subject shapes handed to voters.

A subject is what a voter inspects to decide:

- a single object (read, create, delete, custom operations),
- a pair ``(object, previous_or_None)`` for update-style operations
  (any tuple qualifies; UpdateSubject is the named form),
- a resource type (class object) for collection-level operations,
- any of the above wrapped in a TargetedSubject naming the one voter
  allowed to act on it.
"""

from dataclasses import dataclass
from typing import Any, NamedTuple

from resource_voter.domain.value_objects.voter_identity import voter_identity


class UpdateSubject(NamedTuple):
    """Current object plus its pre-update state (None when unknown)."""

    current: Any
    previous: Any = None


@dataclass(frozen=True, slots=True)
class TargetedSubject:
    """Subject reserved for one voter.

    Used when a resource type names an explicit voter and several voters
    share the same permission attribute namespace. Every other voter
    abstains.

    Attributes:
        subject: Wrapped subject.
        voter: Identity of the voter allowed to act (class or string accepted,
            stored normalized).
    """

    subject: Any
    voter: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "voter", voter_identity(self.voter))


def unwrap_subject(subject: Any) -> Any:
    """Strip a TargetedSubject wrapper, if any."""
    if isinstance(subject, TargetedSubject):
        return subject.subject
    return subject


def split_subject(subject: Any) -> tuple[Any, Any]:
    """Normalize a subject into (object, previous_object).

    Args:
        subject: Any subject shape.

    Returns:
        tuple[Any, Any]: The main object and the previous object (or None).
    """
    subject = unwrap_subject(subject)
    if isinstance(subject, tuple):
        if not subject:
            return None, None
        return subject[0], subject[1] if len(subject) > 1 else None
    return subject, None


def main_object(subject: Any) -> Any:
    """Object whose type decides whether a voter applies."""
    return split_subject(subject)[0]


def describe_subject(subject: Any) -> str:
    """Short, log-safe description of a subject.

    Example:
        >>> describe_subject(TargetedSubject(UpdateSubject(article, None), "v"))
        'Article (targeted: v)'
    """
    suffix = ""
    if isinstance(subject, TargetedSubject):
        suffix = f" (targeted: {subject.voter})"
    obj = main_object(subject)
    if obj is None:
        name = "None"
    elif isinstance(obj, type):
        name = f"type[{obj.__name__}]"
    else:
        name = type(obj).__name__
    return f"{name}{suffix}"
