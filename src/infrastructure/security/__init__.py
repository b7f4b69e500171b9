"""Security adapters: password hashing and access tokens."""

from src.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from src.infrastructure.security.jwt_service import JWTService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
]
