"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Cost factor comes from ``settings.bcrypt_rounds`` (default 12)
    - Cost factor is logarithmic: each +1 doubles computation time
    - bcrypt only reads the first 72 bytes of its input
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12). Tests use the
                minimum (4) to stay fast.

        Raises:
            ValueError: If cost_factor is outside bcrypt's range (4-31).
        """
        if cost_factor < 4:
            msg = "Cost factor must be at least 4"
            raise ValueError(msg)
        if cost_factor > 31:
            msg = "Cost factor must be at most 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("Secret1!") != service.hash_password("Secret1!")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes).

        Note:
            bcrypt.checkpw does constant-time comparison.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False
