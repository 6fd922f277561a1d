"""
Password hashing.

A thin wrapper over bcrypt so the rest of the code treats hashing as an
opaque one-way function. bcrypt is used directly (passlib is incompatible
with bcrypt >= 4.0).
"""

import bcrypt

from shared.exceptions import ValidationError

# bcrypt only looks at the first 72 bytes; newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Hash and verify passwords with a fixed bcrypt cost factor."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            ValidationError: If the password is longer than bcrypt accepts
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
                code="PASSWORD_TOO_LONG",
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Compare a plaintext password against a stored hash."""
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False
