"""Application services shared by handlers."""

from src.application.services.login_log_location_resolver import (
    LoginLogLocationResolver,
)

__all__ = ["LoginLogLocationResolver"]
