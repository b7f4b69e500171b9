"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with bcrypt. The cost factor comes from
settings.bcrypt_rounds (default 10: account creation happens in bulk
before the event, and every login verifies once).

Cost factor is logarithmic: each +1 doubles computation time.
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("secret1")
        password_service.verify_password("secret1", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 10) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor, 10 to 20.

        Raises:
            ValueError: If cost_factor is outside 10..20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            60-character bcrypt hash ($2b$<cost>$<salt><hash>). Each call
            uses a fresh salt.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True on match. False on mismatch or a malformed hash (never raises).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
