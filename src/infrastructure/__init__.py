"""Infrastructure layer - Adapters for the domain protocols.

Structure:
- persistence/: SQLAlchemy models, database engine and repositories
- security/: bcrypt hashing, JWT access tokens, refresh and reset tokens
- events/: In-memory event bus and the notification handler
- logging/: structlog configuration

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
