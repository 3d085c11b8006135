"""Repository protocol (port) for the users bounded context.

The core only talks to storage through IUserRepository. Records are plain
snapshots of a stored row; the repository never hands out ORM objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, TypedDict, runtime_checkable


@dataclass(frozen=True)
class UserRecord:
    """A persisted user as stored.

    Attributes:
        id: Positive integer primary key
        name: Stored name
        email: Stored email address
        password_hash: Stored bcrypt hash
        created_at: Insert timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        """Return string representation without the password hash."""
        return f"UserRecord(id={self.id}, email={self.email!r})"


class UserFields(TypedDict, total=False):
    """Column values for create and partial update."""

    name: str
    email: str
    password_hash: str


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for user persistence.

    Every call is atomic from the caller's point of view. There are no
    transactions spanning several calls and no optimistic locking: two
    concurrent updates of the same user are last-write-wins.
    """

    async def find_by_id(self, user_id: int) -> UserRecord | None:
        """Retrieve a user by id.

        Returns:
            The stored record, or None if not found
        """
        ...

    async def find_by_email(self, email: str) -> UserRecord | None:
        """Retrieve a user by exact email address.

        Returns:
            The stored record, or None if not found
        """
        ...

    async def get_all(self) -> list[UserRecord]:
        """List all users ordered by id."""
        ...

    async def create(self, fields: UserFields) -> UserRecord:
        """Insert a new user.

        Args:
            fields: name, email and password_hash

        Returns:
            The stored record including its generated id and timestamps
        """
        ...

    async def update(self, record: UserRecord, fields: UserFields) -> UserRecord:
        """Apply a partial update to an existing user.

        Args:
            record: The record to update
            fields: Only the columns that change

        Returns:
            The refreshed record
        """
        ...

    async def delete(self, record: UserRecord) -> bool:
        """Delete a user.

        Returns:
            True if deleted, False if the row no longer existed
        """
        ...
