"""Application layer - the authorization dispatch engine.

Structure:
- security/: attribute mapper, metadata resolver, subject resolvers,
  voter registry, authorization gateway
- voters/: CrudVoter and AutoConfiguredVoter base classes
"""
