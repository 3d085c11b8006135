"""PostgreSQL implementation of IUserRepository.

Each write commits on its own and rolls the session back if the commit
fails, so the session stays usable for later calls. Rows are mapped to
immutable UserRecord snapshots so ORM state never leaves this module.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from users.infrastructure.models import UserModel
from users.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from users.ports.exceptions import UserNotFoundError
from users.ports.repositories import IUserRepository, UserFields, UserRecord

# Maps port field names to UserModel attributes
_COLUMN_FOR_FIELD = {
    "name": "name",
    "email": "email",
    "password_hash": "password",
}


def _to_record(model: UserModel) -> UserRecord:
    return UserRecord(
        id=model.id,
        name=model.name,
        email=model.email,
        password_hash=model.password,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for users."""

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession owned by the caller
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def find_by_id(self, user_id: int) -> UserRecord | None:
        """Retrieve a user by id.

        Args:
            user_id: The user's primary key

        Returns:
            The stored record, or None if not found
        """
        model = await self._session.get(UserModel, user_id)
        if model is None:
            self._probe.user_not_found(user_id)
            return None

        self._probe.user_retrieved(user_id)
        return _to_record(model)

    async def find_by_email(self, email: str) -> UserRecord | None:
        """Retrieve a user by exact email address.

        Args:
            email: The address to look up

        Returns:
            The stored record, or None if not found
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.email_not_found(email)
            return None

        self._probe.user_retrieved(model.id)
        return _to_record(model)

    async def get_all(self) -> list[UserRecord]:
        """List all users ordered by id."""
        stmt = select(UserModel).order_by(UserModel.id)
        result = await self._session.execute(stmt)
        return [_to_record(model) for model in result.scalars().all()]

    async def create(self, fields: UserFields) -> UserRecord:
        """Insert a new user and return it with its generated id and timestamps.

        Args:
            fields: name, email and password_hash
        """
        model = UserModel(
            name=fields["name"],
            email=fields["email"],
            password=fields["password_hash"],
        )
        self._session.add(model)
        await self._commit()
        await self._session.refresh(model)

        self._probe.user_saved(model.id, created=True)
        return _to_record(model)

    async def update(self, record: UserRecord, fields: UserFields) -> UserRecord:
        """Apply a partial update and return the refreshed record.

        Args:
            record: The record to update
            fields: Only the columns that change

        Raises:
            UserNotFoundError: If the row was deleted since it was read
        """
        model = await self._session.get(UserModel, record.id)
        if model is None:
            raise UserNotFoundError(f"User {record.id} no longer exists")

        for field_name, value in fields.items():
            setattr(model, _COLUMN_FOR_FIELD[field_name], value)

        await self._commit()
        await self._session.refresh(model)

        self._probe.user_saved(model.id, created=False)
        return _to_record(model)

    async def delete(self, record: UserRecord) -> bool:
        """Delete a user.

        Returns:
            True if deleted, False if the row no longer existed
        """
        model = await self._session.get(UserModel, record.id)
        if model is None:
            self._probe.user_not_found(record.id)
            return False

        await self._session.delete(model)
        await self._commit()

        self._probe.user_deleted(record.id)
        return True

    async def _commit(self) -> None:
        """Commit the session, rolling back if the commit fails.

        Raises:
            Exception: The original commit error, after the rollback
        """
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
