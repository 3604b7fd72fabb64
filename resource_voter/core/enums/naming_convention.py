"""Naming conventions applied to custom operation tokens.

Used by OperationAttributeMapper when an operation token comes from an
explicit operation name or a URI template segment. CRUD tokens are fixed
and never transformed.
"""

from enum import Enum


class NamingConvention(str, Enum):
    """Operation token naming conventions."""

    PRESERVE = "preserve"
    """Use the token verbatim."""

    SNAKE_CASE = "snake_case"
    """publishArticle / publish-article -> publish_article."""

    CAMEL_CASE = "camel_case"
    """publish_article / publish-article -> publishArticle."""

    KEBAB_CASE = "kebab_case"
    """publishArticle / publish_article -> publish-article."""
