"""Users resource router (administration).

Endpoints:
    GET    /api/v1/users              - List accounts
    POST   /api/v1/users              - Create account
    DELETE /api/v1/users/{user_id}    - Delete account

Admin checks happen in the handlers; non-admin callers get 403.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.user_commands import CreateUser, DeleteUser
from src.application.queries.handlers.list_users_handler import ListUsersHandler
from src.application.queries.user_queries import ListUsers
from src.core.container import (
    get_create_user_handler,
    get_delete_user_handler,
    get_list_users_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import CurrentSession
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.common_schemas import MessageResponse
from src.schemas.user_schemas import (
    UserCreateRequest,
    UserCreateResponse,
    UserListResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])

_ADMIN_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Missing or invalid token", "model": ProblemDetails},
    403: {"description": "Administrator role required", "model": ProblemDetails},
}


@router.get(
    "",
    response_model=UserListResponse,
    responses=_ADMIN_RESPONSES,
    summary="List users",
)
async def list_users(
    request: Request,
    session: CurrentSession,
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> UserListResponse | JSONResponse:
    """List all accounts with profiles, newest first.

    GET /api/v1/users → 200 OK
    """
    result = await handler.handle(ListUsers(context=session))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success(value=users):
            return UserListResponse.from_entities(users)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreateResponse,
    responses={
        **_ADMIN_RESPONSES,
        400: {"description": "Missing participant field", "model": ProblemDetails},
        409: {"description": "Email or UID already exists", "model": ProblemDetails},
    },
    summary="Create user",
)
async def create_user(
    request: Request,
    session: CurrentSession,
    data: UserCreateRequest,
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> UserCreateResponse | JSONResponse:
    """Create an administrator or participant account.

    POST /api/v1/users → 201 Created

    Args:
        request: FastAPI request object.
        session: Caller session (must be an administrator).
        data: Account fields.
        handler: Create user handler (injected).

    Returns:
        UserCreateResponse with the new account ID.
        JSONResponse with Problem Details on failure (400/403/409/500).
    """
    command = CreateUser(
        context=session,
        email=data.email,
        password=data.password,
        role=data.role,
        name=data.name,
        uid=data.uid,
        college=data.college,
        hostel_name=data.hostel_name,
        wifi_username=data.wifi_username,
        wifi_password=data.wifi_password,
        contact_number=data.contact_number,
        hostel_location=data.hostel_location,
    )
    result = await handler.handle(command)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success(value=user_id):
            return UserCreateResponse(id=user_id)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={
        **_ADMIN_RESPONSES,
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Delete user",
    description="Delete a participant account. Administrator accounts cannot be deleted.",
)
async def delete_user(
    request: Request,
    session: CurrentSession,
    user_id: Annotated[UUID, Path(description="Account UUID")],
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> MessageResponse | JSONResponse:
    """Delete an account.

    DELETE /api/v1/users/{user_id} → 200 OK
    """
    result = await handler.handle(DeleteUser(context=session, user_id=user_id))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success():
            return MessageResponse(message="User deleted")
