"""Attribute-based authorization dispatch for typed API resources.

Maps "what action on what resource" to a ``prefix:operation`` permission
attribute, resolves the subject a voter should inspect, and dispatches the
check to CRUD-oriented voters.

Layers:
- core/: settings, errors, Result types, composition root
- domain/: operations, subjects, metadata, markers, protocols, events
- application/: mapper, resolvers, voter registry, voters, gateway
- infrastructure/: cache adapters, logging adapter, decision sinks
- presentation/: FastAPI exception handlers
"""

__version__ = "0.1.0"
