"""Domain protocols (ports) package.

This package contains protocol definitions the authorization engine needs.
Infrastructure adapters and host applications implement these protocols
without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from resource_voter.domain.protocols import (
        DecisionManagerProtocol,
        LoggerProtocol,
        MetadataCacheProtocol,
    )
"""

from resource_voter.domain.protocols.attribute_mapper_protocol import (
    AttributeMapperProtocol,
)
from resource_voter.domain.protocols.cache_protocol import MetadataCacheProtocol
from resource_voter.domain.protocols.decision_manager_protocol import (
    DecisionManagerProtocol,
)
from resource_voter.domain.protocols.decision_sink_protocol import DecisionSinkProtocol
from resource_voter.domain.protocols.logger_protocol import LoggerProtocol
from resource_voter.domain.protocols.metadata_resolver_protocol import (
    MetadataResolverProtocol,
)
from resource_voter.domain.protocols.state_protocol import (
    DataProcessorProtocol,
    DataProviderProtocol,
)
from resource_voter.domain.protocols.subject_resolver_protocol import (
    SubjectResolverProtocol,
    SubjectResolverStrategyProtocol,
)
from resource_voter.domain.protocols.voter_protocol import CrudCapability, VoterProtocol

__all__ = [
    "AttributeMapperProtocol",
    "CrudCapability",
    "DataProcessorProtocol",
    "DataProviderProtocol",
    "DecisionManagerProtocol",
    "DecisionSinkProtocol",
    "LoggerProtocol",
    "MetadataCacheProtocol",
    "MetadataResolverProtocol",
    "SubjectResolverProtocol",
    "SubjectResolverStrategyProtocol",
    "VoterProtocol",
]
