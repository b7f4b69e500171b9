"""Password hashing protocol for domain layer.

Infrastructure provides the concrete adapter (BcryptPasswordService).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self._password_service = password_service

        password_hash = self._password_service.hash_password("secret1")
        ok = self._password_service.verify_password("secret1", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$10$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash. False otherwise, including for
            malformed hashes (never raises).
        """
        ...
