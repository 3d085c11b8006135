"""Unit tests for infrastructure settings."""

import pytest
from pydantic import SecretStr, ValidationError

from infrastructure.settings import DatabaseSettings, SecuritySettings, Settings


class TestDatabaseSettings:
    """Tests for database settings."""

    def test_defaults(self):
        """Should have development defaults."""
        settings = DatabaseSettings(_env_file=None)

        assert settings.host == "localhost"
        assert settings.port == 5432
        assert settings.pool_size == 5
        assert settings.echo is False

    def test_reads_prefixed_environment(self, monkeypatch):
        """Should read USERHUB_DB_* variables."""
        monkeypatch.setenv("USERHUB_DB_HOST", "db.internal")
        monkeypatch.setenv("USERHUB_DB_PORT", "6543")
        monkeypatch.setenv("USERHUB_DB_PASSWORD", "s3cret")

        settings = DatabaseSettings(_env_file=None)

        assert settings.host == "db.internal"
        assert settings.port == 6543
        assert settings.password.get_secret_value() == "s3cret"

    def test_connection_string_omits_password(self):
        """Connection string is for logging and must not leak the password."""
        settings = DatabaseSettings(
            username="app", password=SecretStr("s3cret"), database="users"
        )

        assert settings.connection_string == "postgresql://app@localhost:5432/users"
        assert "s3cret" not in settings.connection_string

    @pytest.mark.parametrize("pool_size", [0, 101])
    def test_pool_size_bounds(self, pool_size):
        """Pool size must stay within 1-100."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_size=pool_size)


class TestSecuritySettings:
    """Tests for password hashing settings."""

    def test_default_rounds(self):
        """Should default to 12 bcrypt rounds."""
        assert SecuritySettings(_env_file=None).bcrypt_rounds == 12

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_rounds_bounds(self, rounds):
        """Rounds must be within bcrypt's supported range."""
        with pytest.raises(ValidationError):
            SecuritySettings(bcrypt_rounds=rounds)

    def test_reads_prefixed_environment(self, monkeypatch):
        """Should read USERHUB_SECURITY_BCRYPT_ROUNDS."""
        monkeypatch.setenv("USERHUB_SECURITY_BCRYPT_ROUNDS", "10")

        assert SecuritySettings(_env_file=None).bcrypt_rounds == 10


class TestSettings:
    """Tests for the main settings."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", "Warning"])
    def test_accepts_known_log_levels(self, level):
        """Log level should be case-insensitive."""
        assert Settings(log_level=level).log_level == level

    def test_rejects_unknown_log_level(self):
        """Should reject unknown level names."""
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")
