"""Voter identity normalization.

Voters are identified by a string so that identities can live in
configuration, resource markers and caches. A voter class maps to
``"<module>.<qualname>"`` unless it declares an ``identity`` class attribute.
"""

from typing import Any


def voter_identity(voter: Any) -> str:
    """Normalize a voter class, instance or identity string.

    Args:
        voter: Identity string, voter class, or voter instance.

    Returns:
        str: Voter identity.

    Example:
        >>> voter_identity("article-voter")
        'article-voter'
        >>> voter_identity(ArticleVoter) == voter_identity(ArticleVoter())
        True
    """
    if isinstance(voter, str):
        return voter
    cls = voter if isinstance(voter, type) else type(voter)
    declared = getattr(cls, "identity", None)
    if isinstance(declared, str) and declared:
        return declared
    return f"{cls.__module__}.{cls.__qualname__}"
