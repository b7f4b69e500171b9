"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256. Tokens carry
the whole session context (sub, email, role, uid) so requests are
authorized without a database lookup.
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

REQUIRED_CLAIMS = ("sub", "email", "role", "exp", "iat")


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            uid=user.uid,
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 60) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC-SHA256 signing key, at least 32 characters.
            expiration_minutes: Token lifetime in minutes.

        Raises:
            ValueError: If secret_key is shorter than 32 characters.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        uid: str | None = None,
    ) -> str:
        """Generate a signed access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(), email="a@example.com", role="admin"
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "uid": uid,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate token signature, expiry and required claims.

        Returns:
            Success(payload) or Failure("token_invalid"). Never raises.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except InvalidTokenError:
            return Failure(error=ErrorCode.TOKEN_INVALID.value)

        return Success(value=payload)
