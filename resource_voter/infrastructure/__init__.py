"""Infrastructure layer - adapters implementing domain protocols.

Structure:
- cache/: in-memory and Redis metadata caches
- logging/: structlog console adapter
- audit/: decision sinks
- errors/, enums/: infrastructure error values and codes
"""
