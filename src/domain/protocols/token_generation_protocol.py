"""Token generation protocol for domain layer.

Stateless access tokens carry the session context (account id, email, role,
UID). Validation never touches the database.
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Access token generation and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 signed JWT

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            uid=user.uid,
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = UUID(payload["sub"])
            case Failure(error=error):
                ...  # 401
    """

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        uid: str | None = None,
    ) -> str:
        """Generate signed access token.

        Args:
            user_id: Account identifier (stored in 'sub' claim).
            email: Account email.
            role: Account role value ("admin" or "participant").
            uid: Participant UID, if any.

        Returns:
            Encoded token string.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate token and extract payload.

        Returns:
            Success with payload dict (sub, email, role, uid, iat, exp, jti),
            or Failure with an error description. Never raises.
        """
        ...
