"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Modules:
    common_schemas: Pagination envelope and shared bodies
    auth_schemas: Registration, login, tokens, password management
    user_schemas: Profiles, user administration, social graph, feed
    game_schemas: Games and catalog entries
    review_schemas: Reviews, likes, comments
    game_list_schemas: Game lists and entries
    notification_schemas: Notifications
"""
