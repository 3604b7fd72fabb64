"""Domain layer - authorization vocabulary.

This layer holds the pure types the dispatch engine works with. It has NO
dependencies on any framework or infrastructure.

Structure:
- enums/: OperationKind, Decision
- value_objects/: Operation, PermissionAttribute, ResourceAccessMetadata, subjects
- resources/: explicit resource marker registry
- protocols/: ports (cache, logger, decision manager, sinks, voters, resolvers)
- events/: decision events emitted after each check
"""
