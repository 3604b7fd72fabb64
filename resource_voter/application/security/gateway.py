"""Authorization gateway - the pipeline in front of data access.

One check:
    1. Skip when authorization is disabled
    2. Resource type from the operation, else context["resource_class"]
    3. Resolve metadata; skip unprotected types
    4. Map operation -> attribute; skip unmapped operations
    5. Resolve subject; wrap in TargetedSubject when a voter is bound
    6. Ask the decision manager
    7. Emit AuthorizationDecided to every sink
    8. Return the data on grant, raise on deny

Skipped checks never reach the decision manager.

Read path:  on_read()/on_list() load through the provider, then authorize.
Write path: on_write() authorizes, then hands off to the processor.

Usage:
    gateway = build_gateway(markers, decision_manager, voters=voters)
    article = gateway.on_read(
        Operation(kind=OperationKind.READ, resource_type=Article),
        uri_variables={"id": 5},
    )
"""

from collections.abc import Mapping, Sequence
from typing import Any

from resource_voter.application.security.subject_resolver import (
    RESOURCE_CLASS_KEY,
)
from resource_voter.core.errors import (
    AccessDeniedError,
    ConfigurationError,
    NoApplicableVoterError,
)
from resource_voter.domain.enums import Decision
from resource_voter.domain.events import AuthorizationDecided
from resource_voter.domain.protocols import (
    AttributeMapperProtocol,
    DataProcessorProtocol,
    DataProviderProtocol,
    DecisionManagerProtocol,
    DecisionSinkProtocol,
    LoggerProtocol,
    MetadataResolverProtocol,
    SubjectResolverProtocol,
    VoterProtocol,
)
from resource_voter.domain.value_objects import (
    Operation,
    TargetedSubject,
    describe_subject,
    main_object,
)


class AuthorizationGateway:
    """Runs authorization checks around the host's provider and processor.

    Attributes:
        enabled: Global on/off switch. Disabled gateways pass everything through.
        strict_mode: Raise NoApplicableVoterError when a denial happened
            because none of the given voters supports the attribute. Needs a
            non-empty voters sequence.
    """

    def __init__(
        self,
        *,
        mapper: AttributeMapperProtocol,
        metadata_resolver: MetadataResolverProtocol,
        subject_resolver: SubjectResolverProtocol,
        decision_manager: DecisionManagerProtocol,
        logger: LoggerProtocol,
        enabled: bool = True,
        strict_mode: bool = False,
        voters: Sequence[VoterProtocol] = (),
        sinks: Sequence[DecisionSinkProtocol] = (),
        provider: DataProviderProtocol | None = None,
        processor: DataProcessorProtocol | None = None,
    ) -> None:
        """Initialize the gateway.

        Raises:
            ConfigurationError: If strict_mode is on without voters to inspect.
        """
        if strict_mode and not voters:
            raise ConfigurationError(
                "Strict mode needs the voters polled by the decision manager",
                details={"strict_mode": True},
            )
        self._mapper = mapper
        self._metadata_resolver = metadata_resolver
        self._subject_resolver = subject_resolver
        self._decision_manager = decision_manager
        self._logger = logger
        self.enabled = enabled
        self.strict_mode = strict_mode
        self._voters = tuple(voters)
        self._sinks = tuple(sinks)
        self._provider = provider
        self._processor = processor

    # =========================================================================
    # Decorated read/write paths
    # =========================================================================

    def on_read(
        self,
        operation: Operation,
        uri_variables: Mapping[str, Any] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> Any:
        """Load data through the provider and authorize it.

        Raises:
            ConfigurationError: If no provider is configured.
            AccessDeniedError: If access is denied.
        """
        if self._provider is None:
            raise ConfigurationError("AuthorizationGateway has no data provider")
        uri_variables = uri_variables or {}
        context = context or {}
        data = self._provider.provide(operation, uri_variables, context)
        return self.authorize(operation, data, context, uri_variables)

    on_list = on_read

    def on_write(
        self,
        data: Any,
        operation: Operation,
        uri_variables: Mapping[str, Any] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> Any:
        """Authorize a payload, then persist it through the processor.

        Returns:
            Any: Processor result, or the payload when no processor is set.

        Raises:
            AccessDeniedError: If access is denied (the processor is not called).
        """
        uri_variables = uri_variables or {}
        context = context or {}
        data = self.authorize(operation, data, context, uri_variables)
        if self._processor is None:
            return data
        return self._processor.process(data, operation, uri_variables, context)

    # =========================================================================
    # Pipeline
    # =========================================================================

    def authorize(
        self,
        operation: Operation,
        data: Any,
        context: Mapping[str, Any] | None = None,
        uri_variables: Mapping[str, Any] | None = None,
    ) -> Any:
        """Authorize one operation.

        Args:
            operation: Operation descriptor.
            data: Loaded object, collection, or incoming payload.
            context: Request context (previous_object, resource_class, ...).
            uri_variables: Route variables, recorded on the decision event.

        Returns:
            Any: data, unchanged, when granted or skipped.

        Raises:
            AccessDeniedError: If the decision manager denies the attribute.
            NoApplicableVoterError: Strict mode and no voter supports it.
        """
        context = context or {}

        if not self.enabled:
            return data

        resource_type = operation.resource_type or context.get(RESOURCE_CLASS_KEY)
        if not isinstance(resource_type, type):
            return self._skip(data, operation, "resource_type_unknown")

        metadata = self._metadata_resolver.resolve(resource_type)
        if not metadata.protected or not metadata.prefix:
            return self._skip(data, operation, "resource_unprotected", resource_type)

        attribute = self._mapper.map(operation, metadata.prefix)
        if attribute is None:
            return self._skip(data, operation, "operation_unmapped", resource_type)

        subject = self._subject_resolver.resolve(operation, data, context)
        if metadata.voter:
            subject = TargetedSubject(subject, metadata.voter)

        granted = bool(self._decision_manager.is_granted(attribute, subject))
        self._emit(
            AuthorizationDecided(
                attribute=attribute,
                subject_description=describe_subject(subject),
                decision=Decision.from_bool(granted),
                context={
                    "operation_kind": operation.kind.value,
                    "operation": operation.label,
                    "resource_type": resource_type.__qualname__,
                    "uri_variables": dict(uri_variables or {}),
                },
            )
        )

        if granted:
            self._logger.info(
                "authorization_granted",
                attribute=attribute,
                resource_type=resource_type.__qualname__,
                operation_kind=operation.kind.value,
            )
            return data

        self._logger.warning(
            "authorization_denied",
            attribute=attribute,
            resource_type=resource_type.__qualname__,
            operation_kind=operation.kind.value,
            subject=describe_subject(subject),
        )

        if self.strict_mode and not self._has_applicable_voter(attribute, subject):
            raise NoApplicableVoterError(
                attribute=attribute,
                resource_type=resource_type.__qualname__,
                operation_kind=operation.kind.value,
                subject_type=_subject_type_name(subject),
            )
        raise AccessDeniedError(
            attribute=attribute,
            resource_type=resource_type.__qualname__,
            operation_kind=operation.kind.value,
        )

    def _has_applicable_voter(self, attribute: str, subject: Any) -> bool:
        return any(voter.supports(attribute, subject) for voter in self._voters)

    def _emit(self, event: AuthorizationDecided) -> None:
        for sink in self._sinks:
            try:
                sink.record(event)
            except Exception as e:
                self._logger.error(
                    "decision_sink_error",
                    error=e,
                    sink=type(sink).__name__,
                    attribute=event.attribute,
                )

    def _skip(
        self,
        data: Any,
        operation: Operation,
        reason: str,
        resource_type: type | None = None,
    ) -> Any:
        self._logger.debug(
            "authorization_skipped",
            reason=reason,
            operation=operation.label,
            resource_type=resource_type.__qualname__ if resource_type else None,
        )
        return data


def _subject_type_name(subject: Any) -> str:
    obj = main_object(subject)
    if isinstance(obj, type):
        return obj.__qualname__
    return type(obj).__qualname__
