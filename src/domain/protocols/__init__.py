"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LoginLogRepository, UserRepository
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.login_log_enricher_protocol import (
    DeviceEnricher,
    DeviceEnrichmentResult,
    LocationEnricher,
    LocationEnrichmentResult,
)
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.login_log_repository import (
    LoginLogFilter,
    LoginLogRecord,
    LoginLogRepository,
)
from src.domain.protocols.user_repository import (
    DuplicateAccountError,
    UserRepository,
)

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Enrichment
    "DeviceEnricher",
    "DeviceEnrichmentResult",
    "LocationEnricher",
    "LocationEnrichmentResult",
    # Repository protocols
    "LoginLogFilter",
    "LoginLogRecord",
    "LoginLogRepository",
    "UserRepository",
    "DuplicateAccountError",
]
