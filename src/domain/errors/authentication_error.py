"""Authentication domain error constants.

These are NOT exceptions. They are error value constants returned inside
``Failure`` by token services and auth handlers.

Usage:
    result = token_service.validate_access_token(token)
    match result:
        case Success(value=payload):
            ...
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants."""

    # Token validation errors
    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    INVALID_TOKEN_TYPE = "Invalid token type"

    # Credential errors
    INVALID_CREDENTIALS = "Invalid credentials"
