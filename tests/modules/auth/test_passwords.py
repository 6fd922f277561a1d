import pytest

from modules.auth.passwords import MAX_PASSWORD_BYTES, PasswordHasher
from shared.exceptions import ValidationError


class TestPasswordHasher:
    @pytest.fixture
    def hasher(self):
        return PasswordHasher(rounds=4)

    def test_hash_is_not_plaintext(self, hasher):
        hashed = hasher.hash("secret")
        assert hashed != "secret"
        assert hashed.startswith("$2b$04$")

    def test_verify(self, hasher):
        hashed = hasher.hash("secret")
        assert hasher.verify("secret", hashed) is True
        assert hasher.verify("Secret", hashed) is False

    def test_salted(self, hasher):
        assert hasher.hash("secret") != hasher.hash("secret")

    def test_verify_accepts_seed_hashes(self, hasher):
        """Hashes produced with a different cost factor still verify."""
        stored = PasswordHasher(rounds=5).hash("secret")
        assert hasher.verify("secret", stored) is True

    def test_malformed_hash_does_not_verify(self, hasher):
        assert hasher.verify("secret", "not-a-bcrypt-hash") is False

    def test_too_long_password_rejected(self, hasher):
        with pytest.raises(ValidationError) as exc_info:
            hasher.hash("x" * (MAX_PASSWORD_BYTES + 1))
        assert exc_info.value.code == "PASSWORD_TOO_LONG"

    def test_too_long_password_never_verifies(self, hasher):
        hashed = hasher.hash("x" * MAX_PASSWORD_BYTES)
        assert hasher.verify("x" * (MAX_PASSWORD_BYTES + 1), hashed) is False
