"""Token pair issuance shared by register, login and refresh.

Creates a refresh-token session row and signs an access token for the same
user. Only the digest and bcrypt hash of the refresh token are persisted.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.dtos.auth_dtos import AuthTokens
from src.domain.entities.user import User
from src.domain.protocols import (
    RefreshTokenServiceProtocol,
    SessionData,
    SessionRepository,
    TokenGenerationProtocol,
)


class AuthTokenIssuer:
    """Issue an access/refresh token pair backed by a new session.

    Usage:
        issuer = AuthTokenIssuer(token_service, refresh_token_service, session_repo)
        tokens, session_id = await issuer.issue(user, ip_address=ip, user_agent=ua)
    """

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        refresh_token_service: RefreshTokenServiceProtocol,
        session_repo: SessionRepository,
    ) -> None:
        self._token_service = token_service
        self._refresh_token_service = refresh_token_service
        self._session_repo = session_repo

    async def issue(
        self,
        user: User,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> tuple[AuthTokens, UUID]:
        """Persist a new session and return the token pair.

        Returns:
            Tuple of (tokens for the client, new session id).
        """
        issued = self._refresh_token_service.generate_token()
        session_id = uuid7()
        await self._session_repo.save(
            SessionData(
                id=session_id,
                user_id=user.id,
                lookup_digest=issued.lookup_digest,
                token_hash=issued.token_hash,
                expires_at=issued.expires_at,
                user_agent=user_agent,
                ip_address=ip_address,
            )
        )

        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            username=user.username,
            roles=[user.role.value],
        )
        tokens = AuthTokens(
            access_token=access_token,
            refresh_token=issued.token,
            user=user,
            expires_in=self._token_service.expiration_seconds,
            refresh_expires_in=self._refresh_token_service.expiration_seconds,
        )
        return tokens, session_id
