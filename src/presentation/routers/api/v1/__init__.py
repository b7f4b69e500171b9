"""API v1 routers.

RESTful resource-based endpoints.

Resources:
    /api/v1/sessions       - Login
    /api/v1/logs           - Login audit view (admin)
    /api/v1/users          - Account administration (admin)
    /api/v1/profile        - Caller's profile
    /api/v1/participants   - Participant directory
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.login_logs import router as login_logs_router
from src.presentation.routers.api.v1.participants import (
    router as participants_router,
)
from src.presentation.routers.api.v1.profile import router as profile_router
from src.presentation.routers.api.v1.sessions import router as sessions_router
from src.presentation.routers.api.v1.users import router as users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(sessions_router)
v1_router.include_router(login_logs_router)
v1_router.include_router(users_router)
v1_router.include_router(profile_router)
v1_router.include_router(participants_router)

__all__ = [
    "v1_router",
]
