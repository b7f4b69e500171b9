"""Profile resource router (caller's own account).

Endpoints:
    GET    /api/v1/profile          - Get profile
    PATCH  /api/v1/profile          - Update name/college/password
    PUT    /api/v1/profile          - Same as PATCH
    PATCH  /api/v1/profile/avatar   - Update avatar URL and gender
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.update_avatar_handler import (
    UpdateAvatarHandler,
)
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.commands.user_commands import UpdateAvatar, UpdateProfile
from src.application.queries.handlers.get_profile_handler import GetProfileHandler
from src.application.queries.user_queries import GetProfile
from src.core.container import (
    get_get_profile_handler,
    get_update_avatar_handler,
    get_update_profile_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import CurrentSession
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.user_schemas import (
    AvatarUpdateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
)

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get(
    "",
    response_model=ProfileResponse,
    responses={404: {"description": "Profile not found", "model": ProblemDetails}},
    summary="Get profile",
)
async def get_profile(
    request: Request,
    session: CurrentSession,
    handler: GetProfileHandler = Depends(get_get_profile_handler),
) -> ProfileResponse | JSONResponse:
    """Get the caller's account and profile.

    GET /api/v1/profile → 200 OK
    """
    result = await handler.handle(GetProfile(context=session))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success(value=user):
            return ProfileResponse.from_entity(user)


@router.api_route(
    "",
    methods=["PATCH", "PUT"],
    response_model=ProfileResponse,
    responses={
        400: {"description": "Invalid password change", "model": ProblemDetails},
        401: {"description": "Current password incorrect", "model": ProblemDetails},
        404: {"description": "Profile not found", "model": ProblemDetails},
    },
    summary="Update profile",
)
async def update_profile(
    request: Request,
    session: CurrentSession,
    data: ProfileUpdateRequest,
    handler: UpdateProfileHandler = Depends(get_update_profile_handler),
) -> ProfileResponse | JSONResponse:
    """Update the caller's name, college and/or password.

    PATCH /api/v1/profile → 200 OK

    Args:
        request: FastAPI request object.
        session: Caller session.
        data: Fields to change; blank fields are left alone.
        handler: Update profile handler (injected).

    Returns:
        ProfileResponse with the updated account.
        JSONResponse with Problem Details on failure (400/401/404).
    """
    command = UpdateProfile(
        context=session,
        name=data.name,
        college=data.college,
        current_password=data.current_password,
        new_password=data.new_password,
    )
    result = await handler.handle(command)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success(value=user):
            return ProfileResponse.from_entity(user)


@router.patch(
    "/avatar",
    response_model=ProfileResponse,
    responses={
        400: {"description": "Avatar URL missing", "model": ProblemDetails},
        404: {"description": "Profile not found", "model": ProblemDetails},
    },
    summary="Update avatar",
)
async def update_avatar(
    request: Request,
    session: CurrentSession,
    data: AvatarUpdateRequest,
    handler: UpdateAvatarHandler = Depends(get_update_avatar_handler),
) -> ProfileResponse | JSONResponse:
    """Store a new avatar URL (and optional gender) on the caller's profile.

    PATCH /api/v1/profile/avatar → 200 OK
    """
    command = UpdateAvatar(
        context=session,
        avatar_url=data.avatar_url,
        gender=data.gender,
    )
    result = await handler.handle(command)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success(value=user):
            return ProfileResponse.from_entity(user)
