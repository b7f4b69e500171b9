"""Sessions resource router.

Endpoints:
    POST   /api/v1/sessions   - Create session (login)

Every attempt, successful or not, is recorded as a login log row by the
authenticate handler before the response is built.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import AuthenticateUser
from src.application.commands.handlers.authenticate_user_handler import (
    AuthenticateUserHandler,
)
from src.core.config import settings
from src.core.container import get_authenticate_user_handler, get_token_service
from src.core.result import Failure, Success
from src.domain.protocols import TokenGenerationProtocol
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import SessionCreateRequest, SessionCreateResponse

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def _client_ip(request: Request) -> str:
    """Best-effort client address ("unknown" when unavailable).

    Honors the first X-Forwarded-For hop when running behind a proxy.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionCreateResponse,
    responses={
        401: {"description": "Invalid credentials", "model": ProblemDetails},
        422: {"description": "Malformed request", "model": ProblemDetails},
    },
    summary="Create session",
    description="Authenticate by role-specific identifier and return an access token.",
)
async def create_session(
    request: Request,
    data: SessionCreateRequest,
    auth_handler: AuthenticateUserHandler = Depends(get_authenticate_user_handler),
    token_service: TokenGenerationProtocol = Depends(get_token_service),
) -> SessionCreateResponse | JSONResponse:
    """Create a new session (login).

    POST /api/v1/sessions → 201 Created

    Args:
        request: FastAPI request object.
        data: Login request (role, email or uid, password).
        auth_handler: Authentication handler (injected).
        token_service: JWT token service (injected).

    Returns:
        SessionCreateResponse on success.
        JSONResponse with Problem Details on failure (401).
    """
    command = AuthenticateUser(
        role=data.role,
        password=data.password,
        email=data.email,
        uid=data.uid,
        ip_address=_client_ip(request),
        user_agent=request.headers.get("user-agent", ""),
    )
    result = await auth_handler.handle(command)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success(value=authenticated):
            token = token_service.generate_access_token(
                user_id=authenticated.user_id,
                email=authenticated.email,
                role=authenticated.role.value,
                uid=authenticated.uid,
            )
            return SessionCreateResponse(
                access_token=token,
                expires_in=settings.access_token_expire_minutes * 60,
                user_id=authenticated.user_id,
                role=authenticated.role,
            )
