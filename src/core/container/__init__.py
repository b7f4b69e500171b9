"""Container module - Centralized dependency injection.

Re-exports all factory functions so callers import from one place:

    from src.core.container import get_logger, get_list_login_logs_handler

Modules:
- infrastructure: Database, security services, enrichers, logging
- repositories: Repository factories
- auth_handlers: Login handler factory
- login_log_handlers: Login audit view handler factory
- user_handlers: Account and profile handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_device_enricher,
    get_location_resolver,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_login_log_repository,
    get_user_repository,
)

# Handlers
from src.core.container.auth_handlers import get_authenticate_user_handler
from src.core.container.login_log_handlers import get_list_login_logs_handler
from src.core.container.user_handlers import (
    get_create_user_handler,
    get_delete_user_handler,
    get_get_profile_handler,
    get_list_participants_handler,
    get_list_users_handler,
    get_update_avatar_handler,
    get_update_profile_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_device_enricher",
    "get_location_resolver",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_login_log_repository",
    "get_user_repository",
    # Handlers
    "get_authenticate_user_handler",
    "get_list_login_logs_handler",
    "get_create_user_handler",
    "get_delete_user_handler",
    "get_get_profile_handler",
    "get_list_participants_handler",
    "get_list_users_handler",
    "get_update_avatar_handler",
    "get_update_profile_handler",
]
