"""Participants directory router.

Endpoints:
    GET    /api/v1/participants   - Participant names and colleges
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.list_users_handler import (
    ListParticipantsHandler,
)
from src.application.queries.user_queries import ListParticipants
from src.core.container import get_list_participants_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import CurrentSession
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.user_schemas import ParticipantListResponse

router = APIRouter(prefix="/participants", tags=["Participants"])


@router.get("", response_model=ParticipantListResponse, summary="List participants")
async def list_participants(
    request: Request,
    session: CurrentSession,
    handler: ListParticipantsHandler = Depends(get_list_participants_handler),
) -> ParticipantListResponse | JSONResponse:
    """List participants ordered by name.

    GET /api/v1/participants → 200 OK
    """
    result = await handler.handle(ListParticipants(context=session))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
        case Success(value=items):
            return ParticipantListResponse.from_items(items)
