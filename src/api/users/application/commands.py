"""Commands for the users context.

Commands are immutable field-only messages. Their values are not validated
here; handlers decide what, if anything, to check.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.bus import Command


@dataclass(frozen=True)
class CreateUserCommand(Command):
    """Create a user from a name, email and plaintext password."""

    name: str
    email: str
    password: str

    def __repr__(self) -> str:
        """Return string representation without the password."""
        return f"CreateUserCommand(name={self.name!r}, email={self.email!r})"


@dataclass(frozen=True)
class UpdateUserCommand(Command):
    """Update a user. Fields left as None are not changed."""

    id: int
    name: str | None = None
    email: str | None = None
    password: str | None = None

    def __repr__(self) -> str:
        """Return string representation without the password."""
        password = "***" if self.password is not None else None
        return (
            f"UpdateUserCommand(id={self.id}, name={self.name!r}, "
            f"email={self.email!r}, password={password!r})"
        )


@dataclass(frozen=True)
class DeleteUserCommand(Command):
    """Delete a user by id."""

    id: int
