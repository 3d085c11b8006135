"""Domain events for the users bounded context.

Domain events capture facts about things that have happened to a user.
They are immutable value objects accumulated on the aggregate until a
caller collects them.
"""

from users.domain.events.user import (
    UserCreated,
    UserEmailChanged,
    UserNameChanged,
    UserPasswordChanged,
)

# Type alias for all domain events in the users context
DomainEvent = UserCreated | UserNameChanged | UserEmailChanged | UserPasswordChanged

__all__ = [
    "UserCreated",
    "UserNameChanged",
    "UserEmailChanged",
    "UserPasswordChanged",
    "DomainEvent",
]
