"""Query handlers for the users context."""

from __future__ import annotations

from users.application.queries import GetUserQuery, ListUsersQuery
from users.ports.repositories import IUserRepository, UserRecord


class GetUserQueryHandler:
    """Return one user record, or None."""

    def __init__(self, user_repository: IUserRepository):
        self._user_repository = user_repository

    async def __call__(self, query: GetUserQuery) -> UserRecord | None:
        return await self._user_repository.find_by_id(query.id)


class ListUsersQueryHandler:
    """Return all user records ordered by id."""

    def __init__(self, user_repository: IUserRepository):
        self._user_repository = user_repository

    async def __call__(self, query: ListUsersQuery) -> list[UserRecord]:
        return await self._user_repository.get_all()
