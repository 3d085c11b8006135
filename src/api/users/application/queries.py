"""Queries for the users context."""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.bus import Query


@dataclass(frozen=True)
class GetUserQuery(Query):
    """Fetch one user by id."""

    id: int


@dataclass(frozen=True)
class ListUsersQuery(Query):
    """Fetch all users ordered by id."""
