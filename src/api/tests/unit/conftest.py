"""Unit test fixtures with mocked dependencies."""

from datetime import UTC, datetime
from unittest.mock import create_autospec

import pytest

from users.ports.repositories import IUserRepository, UserRecord


@pytest.fixture(autouse=True, scope="session")
def fast_password_hashing():
    """Use the minimum bcrypt work factor so hashing tests stay fast."""
    from users.domain.security import get_bcrypt_rounds, set_bcrypt_rounds

    previous = get_bcrypt_rounds()
    set_bcrypt_rounds(4)
    yield
    set_bcrypt_rounds(previous)


@pytest.fixture
def make_record():
    """Factory for stored user records."""

    def _make(
        id: int = 1,
        name: str = "Jane Doe",
        email: str = "jane@acme.io",
        password_hash: str = "$2b$04$abcdefghijklmnopqrstuuZ4oV2c5e0aWvJ3T7d1bM9Xq8y6Yk1a",
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> UserRecord:
        stamp = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
        return UserRecord(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=created_at or stamp,
            updated_at=updated_at or stamp,
        )

    return _make


@pytest.fixture
def mock_user_repository():
    """Create mock user repository."""
    return create_autospec(IUserRepository, instance=True)
