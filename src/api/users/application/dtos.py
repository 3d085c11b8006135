"""Transfer objects at the application service boundary.

These are immutable data carriers without business logic. They keep the
domain model from leaking into callers and callers' formats from leaking
into the domain.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from users.ports.repositories import UserRecord


@dataclass(frozen=True)
class CreateUserDTO:
    """Input for creating a user. All fields are required."""

    name: str
    email: str
    password: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CreateUserDTO:
        """Build from already parsed request data.

        Raises:
            KeyError: If a required field is missing
        """
        return cls(name=data["name"], email=data["email"], password=data["password"])

    def __repr__(self) -> str:
        """Return string representation without the password."""
        return f"CreateUserDTO(name={self.name!r}, email={self.email!r})"


@dataclass(frozen=True)
class UpdateUserDTO:
    """Input for updating a user.

    A field left as None means "leave unchanged".
    """

    id: int
    name: str | None = None
    email: str | None = None
    password: str | None = None

    @classmethod
    def from_mapping(cls, user_id: int, data: Mapping[str, Any]) -> UpdateUserDTO:
        """Build from already parsed request data; absent keys become None."""
        return cls(
            id=user_id,
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
        )

    def has_changes(self) -> bool:
        """Check whether any field is set."""
        return (
            self.name is not None or self.email is not None or self.password is not None
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the id plus every field that is set."""
        result: dict[str, Any] = {"id": self.id}
        if self.name is not None:
            result["name"] = self.name
        if self.email is not None:
            result["email"] = self.email
        if self.password is not None:
            result["password"] = self.password
        return result

    def __repr__(self) -> str:
        """Return string representation without the password."""
        password = "***" if self.password is not None else None
        return (
            f"UpdateUserDTO(id={self.id}, name={self.name!r}, "
            f"email={self.email!r}, password={password!r})"
        )


@dataclass(frozen=True)
class UserDTO:
    """Read projection of a stored user. Timestamps are ISO-8601 strings."""

    id: int
    name: str
    email: str
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_record(cls, record: UserRecord) -> UserDTO:
        """Project a stored record."""
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            created_at=record.created_at.isoformat() if record.created_at else None,
            updated_at=record.updated_at.isoformat() if record.updated_at else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
