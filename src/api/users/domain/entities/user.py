"""User entity for the users context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from users.domain.value_objects import Email, HashedPassword, UserId, UserName


@dataclass(eq=False)
class UserEntity:
    """Mutable state holder for a user.

    The entity trusts its value objects and performs no validation of its
    own. It is owned by exactly one UserAggregate, which is the only code
    allowed to call the underscore-prefixed mutators; nothing outside
    ``users.domain`` imports this module.
    """

    id: UserId | None
    name: UserName
    email: Email
    password: HashedPassword
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls, name: UserName, email: Email, password: HashedPassword
    ) -> UserEntity:
        """Create a new, not yet persisted entity."""
        now = datetime.now(UTC)
        return cls(
            id=None,
            name=name,
            email=email,
            password=password,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_persistence(
        cls,
        id: UserId,
        name: UserName,
        email: Email,
        password: HashedPassword,
        created_at: datetime,
        updated_at: datetime,
    ) -> UserEntity:
        """Rebuild an entity from stored state."""
        return cls(
            id=id,
            name=name,
            email=email,
            password=password,
            created_at=created_at,
            updated_at=updated_at,
        )

    def _change_name(self, new_name: UserName) -> None:
        self.name = new_name
        self._touch()

    def _change_email(self, new_email: Email) -> None:
        self.email = new_email
        self._touch()

    def _change_password(self, new_password: HashedPassword) -> None:
        self.password = new_password
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def verify_password(self, plain_password: str) -> bool:
        """Check a plaintext password against the stored hash."""
        return self.password.verify(plain_password)

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable view of the entity, without the password."""
        return {
            "id": self.id.value if self.id is not None else None,
            "name": self.name.value,
            "email": self.email.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def __eq__(self, other: object) -> bool:
        """Persisted entities are equal if they have the same id."""
        if not isinstance(other, UserEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on id; unsaved entities hash by identity."""
        if self.id is None:
            return id(self)
        return hash(self.id)
