"""Operation token naming helpers.

Two conversions live here:

1. Naming conventions for tokens produced by OperationAttributeMapper
   (preserve, snake_case, camel_case, kebab_case).
2. Token <-> handler name conversion used by voters to key custom
   operations: ``publish-article`` <-> ``PublishArticle``.

The handler name conversion is NOT a bijection. Tokens that differ only in
separator style (``publish-article``, ``publish_article``, ``publishArticle``)
or in digit adjacency (``publish-2fa``, ``publish2fa``) share one handler
name. Voters key their custom operations by handler name and reject a second
token that collapses onto an existing one.

Fixed points:
    handler_name_to_operation(operation_to_handler_name(t)) == t
        for lowercase kebab tokens without digits or doubled separators.
    operation_to_handler_name(handler_name_to_operation(h)) == h
        for capitalized handler names without digits or acronyms.
"""

import re

from resource_voter.core.enums import NamingConvention

_SEPARATORS = re.compile(r"[-_\s]+")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_HANDLER_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def operation_to_handler_name(operation: str) -> str:
    """Convert an operation token to its handler name.

    Example:
        >>> operation_to_handler_name("publish-article")
        'PublishArticle'
        >>> operation_to_handler_name("publishArticle")
        'PublishArticle'
    """
    words = [w for w in _SEPARATORS.split(operation) if w]
    return "".join(w[:1].upper() + w[1:] for w in words)


def handler_name_to_operation(handler_name: str) -> str:
    """Convert a handler name back to a kebab-case operation token.

    Example:
        >>> handler_name_to_operation("PublishArticle")
        'publish-article'
    """
    return _HANDLER_BOUNDARY.sub("-", handler_name).lower()


def to_snake_case(name: str) -> str:
    """publish-article / publishArticle -> publish_article."""
    name = name.replace("-", "_")
    return _CAMEL_BOUNDARY.sub(r"\1_\2", name).lower()


def to_kebab_case(name: str) -> str:
    """publish_article / publishArticle -> publish-article."""
    name = name.replace("_", "-")
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def to_camel_case(name: str) -> str:
    """publish_article / publish-article -> publishArticle."""
    pascal = operation_to_handler_name(name)
    return pascal[:1].lower() + pascal[1:]


def apply_naming_convention(
    name: str,
    convention: NamingConvention,
    *,
    lowercase: bool = False,
) -> str:
    """Normalize a custom operation token.

    Args:
        name: Raw token.
        convention: Target convention.
        lowercase: Lowercase the token before converting.

    Returns:
        str: Normalized token.
    """
    if lowercase:
        name = name.lower()

    match convention:
        case NamingConvention.SNAKE_CASE:
            return to_snake_case(name)
        case NamingConvention.CAMEL_CASE:
            return to_camel_case(name)
        case NamingConvention.KEBAB_CASE:
            return to_kebab_case(name)
        case _:
            return name
