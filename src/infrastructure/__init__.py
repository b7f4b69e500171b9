"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, repositories, database sessions
- enrichers/: User agent classification and IP geolocation
- security/: bcrypt password hashing, JWT access tokens
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
