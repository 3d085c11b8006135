"""User domain events.

Events are recorded by the UserAggregate as its state changes. The
password event carries no old or new value.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any


class _UserEvent:
    """Shared behaviour for user events: a type tag and a payload view."""

    __slots__ = ()

    @property
    def event_type(self) -> str:
        """Name of the event type, e.g. "UserCreated"."""
        return type(self).__name__

    def payload(self) -> dict[str, Any]:
        """Return the event's fields other than its timestamp."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.name != "occurred_at"
        }


@dataclass(frozen=True)
class UserCreated(_UserEvent):
    """Event raised when a new user aggregate is created.

    The user has no id yet at this point; it is assigned on persistence.

    Attributes:
        name: The name the user was created with
        email: The email the user was created with
        occurred_at: When the event occurred (UTC)
    """

    name: str
    email: str
    occurred_at: datetime


@dataclass(frozen=True)
class UserNameChanged(_UserEvent):
    """Event raised when a user's name changes.

    Attributes:
        user_id: The user's id, or None if not yet persisted
        old_name: The previous name
        new_name: The new name
        occurred_at: When the event occurred (UTC)
    """

    user_id: int | None
    old_name: str
    new_name: str
    occurred_at: datetime


@dataclass(frozen=True)
class UserEmailChanged(_UserEvent):
    """Event raised when a user's email changes.

    Attributes:
        user_id: The user's id, or None if not yet persisted
        old_email: The previous email
        new_email: The new email
        occurred_at: When the event occurred (UTC)
    """

    user_id: int | None
    old_email: str
    new_email: str
    occurred_at: datetime


@dataclass(frozen=True)
class UserPasswordChanged(_UserEvent):
    """Event raised when a user's password changes.

    Attributes:
        user_id: The user's id, or None if not yet persisted
        occurred_at: When the event occurred (UTC)
    """

    user_id: int | None
    occurred_at: datetime
