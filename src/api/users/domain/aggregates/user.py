"""User aggregate for the users context."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from users.domain.entities import UserEntity
from users.domain.events import (
    UserCreated,
    UserEmailChanged,
    UserNameChanged,
    UserPasswordChanged,
)
from users.domain.value_objects import Email, HashedPassword, UserId, UserName

if TYPE_CHECKING:
    from users.domain.events import DomainEvent


class UserAggregate:
    """Consistency boundary around a single user.

    The aggregate owns its UserEntity exclusively and is the only way to
    change it. Every change is validated by building a new value object
    first; state is mutated and an event recorded only after that succeeds,
    so a failed update leaves both the entity and the event list untouched.

    Event collection:
    - create() records UserCreated; from_persistence() records nothing
    - each successful update_* call records exactly one event
    - events accumulate until clear_domain_events() or collect_events()
    """

    def __init__(self, entity: UserEntity):
        self._entity = entity
        self._pending_events: list[DomainEvent] = []

    @classmethod
    def create(cls, name: str, email: str, password: str) -> UserAggregate:
        """Factory method for a brand new user.

        Args:
            name: The user's name
            email: The user's email address
            password: The plaintext password, hashed before it is stored

        Returns:
            A new UserAggregate with a UserCreated event recorded

        Raises:
            InvalidValueError: If any field breaks its value object rules
        """
        entity = UserEntity.create(
            name=UserName(name),
            email=Email(email),
            password=HashedPassword.from_plain_text(password),
        )
        aggregate = cls(entity)
        aggregate._record(
            UserCreated(
                name=entity.name.value,
                email=entity.email.value,
                occurred_at=datetime.now(UTC),
            )
        )
        return aggregate

    @classmethod
    def from_persistence(
        cls,
        id: int,
        name: str,
        email: str,
        hashed_password: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> UserAggregate:
        """Rehydrate an aggregate from stored state without recording events.

        Raises:
            InvalidValueError: If the stored data breaks a value object rule,
                which means the persisted state is corrupt
        """
        entity = UserEntity.from_persistence(
            id=UserId(id),
            name=UserName(name),
            email=Email(email),
            password=HashedPassword.from_hash(hashed_password),
            created_at=created_at,
            updated_at=updated_at,
        )
        return cls(entity)

    def update_name(self, new_name: str) -> None:
        """Change the user's name and record UserNameChanged.

        Raises:
            InvalidValueError: If the new name is invalid; nothing changes
        """
        name = UserName(new_name)
        old_name = self._entity.name.value
        self._entity._change_name(name)
        self._record(
            UserNameChanged(
                user_id=self._id_value(),
                old_name=old_name,
                new_name=name.value,
                occurred_at=datetime.now(UTC),
            )
        )

    def update_email(self, new_email: str) -> None:
        """Change the user's email and record UserEmailChanged.

        Raises:
            InvalidValueError: If the new email is invalid; nothing changes
        """
        email = Email(new_email)
        old_email = self._entity.email.value
        self._entity._change_email(email)
        self._record(
            UserEmailChanged(
                user_id=self._id_value(),
                old_email=old_email,
                new_email=email.value,
                occurred_at=datetime.now(UTC),
            )
        )

    def update_password(self, new_password: str) -> None:
        """Change the user's password and record UserPasswordChanged.

        Raises:
            InvalidValueError: If the new password is invalid; nothing changes
        """
        password = HashedPassword.from_plain_text(new_password)
        self._entity._change_password(password)
        self._record(
            UserPasswordChanged(
                user_id=self._id_value(),
                occurred_at=datetime.now(UTC),
            )
        )

    def verify_password(self, plain_password: str) -> bool:
        """Check a plaintext password against the stored hash."""
        return self._entity.verify_password(plain_password)

    @property
    def id(self) -> UserId | None:
        """The user's id, or None until the user is persisted."""
        return self._entity.id

    @property
    def name(self) -> UserName:
        return self._entity.name

    @property
    def email(self) -> Email:
        return self._entity.email

    @property
    def password(self) -> HashedPassword:
        return self._entity.password

    @property
    def created_at(self) -> datetime:
        return self._entity.created_at

    @property
    def updated_at(self) -> datetime:
        return self._entity.updated_at

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable view of the user, without the password."""
        return self._entity.to_dict()

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Read-only view of the recorded events, oldest first."""
        return tuple(self._pending_events)

    def clear_domain_events(self) -> None:
        """Discard all recorded events."""
        self._pending_events.clear()

    def collect_events(self) -> list[DomainEvent]:
        """Return and clear pending domain events.

        Subsequent calls return an empty list until new events are recorded.
        """
        events = self._pending_events.copy()
        self._pending_events.clear()
        return events

    def _record(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def _id_value(self) -> int | None:
        return self._entity.id.value if self._entity.id is not None else None

    def __repr__(self) -> str:
        """Return string representation."""
        return f"UserAggregate(id={self._id_value()}, email={self.email.value!r})"
