"""Permission attribute value object.

A permission attribute has the fixed shape ``"<prefix>:<operation>"``:

- prefix: non-empty, contains no ``:`` (usually the lowercase resource name)
- operation: non-empty, not whitespace-only, contains no ``:``

Usage:
    >>> str(PermissionAttribute(prefix="article", operation="list"))
    'article:list'
    >>> PermissionAttribute.parse("article:publish").operation
    'publish'
"""

from dataclasses import dataclass

from resource_voter.core.enums import ErrorCode
from resource_voter.core.errors import ConfigurationError

ATTRIBUTE_DELIMITER = ":"


def validate_prefix(prefix: str | None) -> str:
    """Validate an attribute prefix.

    Args:
        prefix: Candidate prefix.

    Returns:
        str: The prefix unchanged.

    Raises:
        ConfigurationError: If the prefix is empty, blank or contains ':'.
    """
    if not prefix or not prefix.strip() or ATTRIBUTE_DELIMITER in prefix:
        raise ConfigurationError(
            f"Invalid attribute prefix {prefix!r}: must be non-empty and "
            f"must not contain '{ATTRIBUTE_DELIMITER}'",
            code=ErrorCode.INVALID_PREFIX,
            details={"prefix": prefix},
        )
    return prefix


def is_valid_token(token: str | None) -> bool:
    """Check an operation token can form a well-shaped attribute."""
    return bool(token) and bool(token.strip()) and ATTRIBUTE_DELIMITER not in token


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionAttribute:
    """Parsed ``prefix:operation`` permission attribute.

    Attributes:
        prefix: Namespace segment.
        operation: Operation token.

    Raises:
        ConfigurationError: If the prefix is invalid.
        ValueError: If the operation token is invalid.
    """

    prefix: str
    operation: str

    def __post_init__(self) -> None:
        validate_prefix(self.prefix)
        if not is_valid_token(self.operation):
            raise ValueError(f"Invalid operation token {self.operation!r}")

    def __str__(self) -> str:
        return f"{self.prefix}{ATTRIBUTE_DELIMITER}{self.operation}"

    @classmethod
    def parse(cls, attribute: str) -> "PermissionAttribute | None":
        """Split an attribute string on its first delimiter.

        Args:
            attribute: Raw attribute (e.g. "article:update").

        Returns:
            PermissionAttribute | None: Parsed attribute, or None if the
            string is not a well-shaped attribute.
        """
        prefix, sep, operation = attribute.partition(ATTRIBUTE_DELIMITER)
        if not sep or not prefix.strip() or not is_valid_token(operation):
            return None
        return cls(prefix=prefix, operation=operation)
