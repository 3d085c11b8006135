"""Ports for the users bounded context."""

from users.ports.events import IDomainEventPublisher
from users.ports.exceptions import UserNotFoundError
from users.ports.repositories import IUserRepository, UserFields, UserRecord

__all__ = [
    "IDomainEventPublisher",
    "IUserRepository",
    "UserFields",
    "UserNotFoundError",
    "UserRecord",
]
