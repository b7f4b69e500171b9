"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating access tokens. The
validated claims become a SessionContext, which routers pass explicitly into
command and query handlers. Role checks live in the handlers.

Usage:
    @router.get("/protected")
    async def protected_route(session: CurrentSession):
        return {"user_id": str(session.user_id)}
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.protocols import TokenGenerationProtocol
from src.domain.value_objects import SessionContext

# HTTP Bearer token extractor. auto_error=False so a missing token is
# reported as 401 (not the 403 HTTPBearer raises by default).
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def session_from_claims(payload: dict[str, Any]) -> SessionContext:
    """Build a SessionContext from validated token claims.

    Args:
        payload: Decoded JWT payload.

    Returns:
        SessionContext for the caller.

    Raises:
        KeyError: If a required claim is missing.
        ValueError: If sub is not a UUID or role is unknown.
    """
    uid_raw = payload.get("uid")
    return SessionContext(
        user_id=UUID(str(payload["sub"])),
        email=str(payload["email"]),
        role=UserRole(str(payload["role"])),
        uid=str(uid_raw) if uid_raw else None,
    )


async def get_current_session(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> SessionContext:
    """Get the caller's session from the bearer token.

    Args:
        credentials: Bearer token from Authorization header.
        token_service: JWT token service (injected).

    Returns:
        SessionContext with identity from a valid JWT.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    result = token_service.validate_access_token(credentials.credentials)

    match result:
        case Success(value=payload):
            try:
                return session_from_claims(payload)
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e
        case Failure(error=error):
            raise _unauthorized(error)

    raise _unauthorized("Invalid token")  # Explicit for exhaustiveness


# Type alias for cleaner route signatures
CurrentSession = Annotated[SessionContext, Depends(get_current_session)]
