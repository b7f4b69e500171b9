"""Login audit view router.

Endpoints:
    GET    /api/v1/logs   - Enriched login log list with stats (admin)

Query parameters keep the camelCase names the dashboard sends.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.list_login_logs_handler import (
    ListLoginLogsHandler,
)
from src.application.queries.login_log_queries import ListLoginLogs
from src.core.container import get_list_login_logs_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import CurrentSession
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.login_log_schemas import LoginLogListResponse

router = APIRouter(prefix="/logs", tags=["Login Logs"])


@router.get(
    "",
    response_model=LoginLogListResponse,
    responses={
        401: {"description": "Missing or invalid token", "model": ProblemDetails},
        403: {"description": "Administrator role required", "model": ProblemDetails},
        500: {"description": "Login logs could not be loaded", "model": ProblemDetails},
    },
    summary="List login logs",
    description=(
        "Newest login attempts (up to the configured batch size) with device "
        "classification, resolved location and success/failure counts."
    ),
)
async def list_login_logs(
    request: Request,
    session: CurrentSession,
    start_date: Annotated[
        str | None,
        Query(alias="startDate", description="Earliest date (YYYY-MM-DD or ISO 8601)"),
    ] = None,
    end_date: Annotated[
        str | None,
        Query(alias="endDate", description="Latest date, inclusive"),
    ] = None,
    email: Annotated[
        str | None, Query(description="Email substring (case-insensitive)")
    ] = None,
    ip_address: Annotated[
        str | None, Query(alias="ipAddress", description="IP address substring")
    ] = None,
    device_type: Annotated[
        str | None, Query(alias="deviceType", description="Device class substring")
    ] = None,
    country: Annotated[str | None, Query(description="Country substring")] = None,
    handler: ListLoginLogsHandler = Depends(get_list_login_logs_handler),
) -> LoginLogListResponse | JSONResponse:
    """List enriched login logs.

    GET /api/v1/logs → 200 OK

    Returns:
        LoginLogListResponse with rows and stats.
        JSONResponse with Problem Details on failure (403/500).
    """
    query = ListLoginLogs(
        context=session,
        start_date=start_date,
        end_date=end_date,
        email=email,
        ip_address=ip_address,
        device_type=device_type,
        country=country,
    )
    result = await handler.handle(query)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
        case Success(value=listing):
            return LoginLogListResponse.from_result(listing)
