"""CRUD voter base class.

A CrudVoter decides ``prefix:operation`` attributes for one or more resource
types. The five CRUD tokens dispatch to overridable hooks; custom tokens
dispatch to handlers registered by token.

Supports(attribute, subject):
    1. TargetedSubject for another voter -> False
    2. Attribute must start with "prefix:"
    3. Operation must be a CRUD token or a registered custom operation
    4. The subject's main object (or the subject itself, when it is a class)
       must be one of the bound resource types

Custom operations are keyed by handler name, so ``publish-article``,
``publish_article`` and ``publishArticle`` all reach the same handler, and
registering two tokens that share a handler name is rejected.

Usage:
    class ArticleVoter(CrudVoter):
        def __init__(self, current_user_id: int) -> None:
            super().__init__(resource_types=Article)
            self.current_user_id = current_user_id
            self.register_operation("publish", self.can_publish)

        def can_update(self, obj, previous) -> bool:
            return previous is not None and previous.author_id == self.current_user_id

        def can_publish(self, obj, previous) -> bool:
            return obj.author_id == self.current_user_id
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from resource_voter.application.security.naming import operation_to_handler_name
from resource_voter.core.enums import ErrorCode
from resource_voter.core.errors import ConfigurationError
from resource_voter.domain.enums import CRUD_TOKENS, Decision
from resource_voter.domain.protocols import LoggerProtocol
from resource_voter.domain.value_objects import (
    ATTRIBUTE_DELIMITER,
    TargetedSubject,
    describe_subject,
    is_valid_token,
    main_object,
    split_subject,
    validate_prefix,
    voter_identity,
)

type OperationHandler = Callable[[Any, Any], bool]
"""Custom operation handler: (obj, previous) -> granted."""


class CrudVoter:
    """Voter for CRUD and custom operations on bound resource types.

    Override can_list/can_create/can_read/can_update/can_delete to restrict
    access; every CRUD hook grants by default. Custom operations deny unless
    a handler is registered and returns True.
    """

    def __init__(
        self,
        *,
        prefix: str | None = None,
        resource_types: type | Iterable[type] | None = None,
        operations: Mapping[str, OperationHandler] | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._prefix: str | None = None
        self._resource_types: tuple[type, ...] = ()
        self._operations: dict[str, tuple[str, OperationHandler]] = {}
        self._logger = logger

        if prefix is not None:
            self.set_prefix(prefix)
        if resource_types is not None:
            self.set_resource_types(resource_types)
        for token, handler in (operations or {}).items():
            self.register_operation(token, handler)

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def identity(self) -> str:
        """Voter identity (class attribute ``identity`` or module.qualname)."""
        return voter_identity(type(self))

    @property
    def prefix(self) -> str:
        """Attribute prefix.

        Defaults to the lowercase name of the first bound resource type.

        Raises:
            ConfigurationError: If no prefix is set and no type is bound.
        """
        if self._prefix is None:
            if not self._resource_types:
                raise ConfigurationError(
                    f"Voter {self.identity} has no prefix and no resource types",
                    details={"voter": self.identity},
                )
            self._prefix = self._resource_types[0].__name__.lower()
        return self._prefix

    def set_prefix(self, prefix: str) -> None:
        self._prefix = validate_prefix(prefix)

    @property
    def resource_types(self) -> tuple[type, ...]:
        return self._resource_types

    def set_resource_types(self, resource_types: type | Iterable[type]) -> None:
        """Bind the resource types this voter decides for.

        Raises:
            ConfigurationError: If any entry is not a class.
        """
        if isinstance(resource_types, type):
            resource_types = (resource_types,)
        types = tuple(resource_types)
        for resource_type in types:
            if not isinstance(resource_type, type):
                raise ConfigurationError(
                    f"Voter {self.identity}: resource type must be a class, "
                    f"got {resource_type!r}",
                    code=ErrorCode.INVALID_RESOURCE_TYPE,
                    details={"voter": self.identity},
                )
        self._resource_types = types

    def register_operation(self, token: str, handler: OperationHandler) -> None:
        """Register a custom operation handler.

        Args:
            token: Operation token (e.g. "publish", "publish-article").
            handler: Callable (obj, previous) -> bool.

        Raises:
            ConfigurationError: If the token is invalid, is a CRUD token, or
                shares its handler name with a different registered token.
        """
        key = operation_to_handler_name(token)
        if not key or not is_valid_token(token) or token in CRUD_TOKENS:
            raise ConfigurationError(
                f"Voter {self.identity}: invalid custom operation {token!r}",
                code=ErrorCode.OPERATION_NAME_COLLISION,
                details={"voter": self.identity, "operation": token},
            )

        existing = self._operations.get(key)
        if existing is not None and existing != (token, handler):
            raise ConfigurationError(
                f"Voter {self.identity}: operation {token!r} collides with "
                f"{existing[0]!r} (both map to handler {key})",
                code=ErrorCode.OPERATION_NAME_COLLISION,
                details={
                    "voter": self.identity,
                    "operation": token,
                    "existing": existing[0],
                    "handler": key,
                },
            )
        self._operations[key] = (token, handler)

    @property
    def custom_operations(self) -> tuple[str, ...]:
        """Registered custom operation tokens."""
        return tuple(token for token, _ in self._operations.values())

    def has_operation(self, operation: str) -> bool:
        """Whether the operation is a CRUD token or a registered custom one."""
        if operation in CRUD_TOKENS:
            return True
        key = operation_to_handler_name(operation)
        return bool(key) and key in self._operations

    # =========================================================================
    # Voting
    # =========================================================================

    def supports(self, attribute: str, subject: Any) -> bool:
        if isinstance(subject, TargetedSubject):
            if subject.voter != self.identity:
                return False
            subject = subject.subject

        operation = self._operation_of(attribute)
        if operation is None or not self.has_operation(operation):
            return False
        return self._supports_subject(subject)

    def vote(self, attribute: str, subject: Any) -> Decision:
        """Vote on one attribute.

        Returns:
            Decision: ABSTAIN when supports() is False, else GRANT or DENY
            from the matching hook.
        """
        if not self.supports(attribute, subject):
            return Decision.ABSTAIN

        operation = self._operation_of(attribute)
        obj, previous = split_subject(subject)

        match operation:
            case "list":
                granted = self.can_list()
            case "create":
                granted = self.can_create(obj)
            case "read":
                granted = self.can_read(obj)
            case "update":
                granted = self.can_update(obj, previous)
            case "delete":
                granted = self.can_delete(obj)
            case _:
                granted = self.can_custom_operation(operation, obj, previous)

        decision = Decision.from_bool(granted)
        if self._logger is not None:
            self._logger.debug(
                "voter_decision",
                voter=self.identity,
                attribute=attribute,
                subject=describe_subject(subject),
                decision=decision.value,
            )
        return decision

    def _operation_of(self, attribute: str) -> str | None:
        head = self.prefix + ATTRIBUTE_DELIMITER
        if not attribute.startswith(head):
            return None
        operation = attribute[len(head) :]
        return operation if is_valid_token(operation) else None

    def _supports_subject(self, subject: Any) -> bool:
        if not self._resource_types:
            raise ConfigurationError(
                f"Voter {self.identity} has no resource types bound",
                details={"voter": self.identity},
            )
        obj = main_object(subject)
        if isinstance(obj, type):
            return issubclass(obj, self._resource_types)
        return isinstance(obj, self._resource_types)

    # =========================================================================
    # Hooks
    # =========================================================================

    def can_list(self) -> bool:
        return True

    def can_create(self, obj: Any) -> bool:
        return True

    def can_read(self, obj: Any) -> bool:
        return True

    def can_update(self, obj: Any, previous: Any) -> bool:
        return True

    def can_delete(self, obj: Any) -> bool:
        return True

    def can_custom_operation(self, operation: str, obj: Any, previous: Any) -> bool:
        """Dispatch to the registered handler; deny when there is none."""
        entry = self._operations.get(operation_to_handler_name(operation))
        if entry is None:
            return False
        return bool(entry[1](obj, previous))
