"""Domain layer - Pure business logic.

This layer contains the core entities, enums, protocols (ports), validators
and domain events. The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (users, games, reviews, lists, notifications)
- protocols/: Domain protocols (repository interfaces, service interfaces)
- events/: Domain events (things that happened in the domain)
- validators/: Shared validation functions used by entities and types

The domain layer defines WHAT the platform does, not HOW it's implemented.
"""
