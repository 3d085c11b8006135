"""Composition root for the users context.

Builds the application service and the command/query buses for a database
session. Each bus registration maps one message type to the factory that
builds its handler.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.settings import SecuritySettings, get_security_settings
from shared_kernel.bus import CommandBus, QueryBus
from shared_kernel.observability_context import ObservationContext
from users.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from users.application.handlers import (
    CreateUserCommandHandler,
    DeleteUserCommandHandler,
    GetUserQueryHandler,
    ListUsersQueryHandler,
    UpdateUserCommandHandler,
)
from users.application.observability import (
    DefaultUserHandlerProbe,
    DefaultUserServiceProbe,
)
from users.application.queries import GetUserQuery, ListUsersQuery
from users.application.services import UserApplicationService
from users.domain.security import set_bcrypt_rounds
from users.infrastructure.user_repository import UserRepository
from users.ports.events import IDomainEventPublisher
from users.ports.repositories import IUserRepository


def configure_password_hashing(settings: SecuritySettings | None = None) -> None:
    """Apply the configured bcrypt work factor."""
    settings = settings or get_security_settings()
    set_bcrypt_rounds(settings.bcrypt_rounds)


def build_user_application_service(
    session: AsyncSession,
    event_publisher: IDomainEventPublisher | None = None,
    context: ObservationContext | None = None,
) -> UserApplicationService:
    """Build the application service for one session."""
    context = context or ObservationContext()
    return UserApplicationService(
        user_repository=UserRepository(session),
        event_publisher=event_publisher,
        probe=DefaultUserServiceProbe().with_context(context.with_pipeline("ddd")),
    )


def register_command_handlers(
    bus: CommandBus,
    user_repository: IUserRepository,
    context: ObservationContext | None = None,
) -> None:
    """Register one handler factory per user command."""
    probe = DefaultUserHandlerProbe().with_context(
        (context or ObservationContext()).with_pipeline("cqrs")
    )
    bus.register(
        CreateUserCommand,
        lambda: CreateUserCommandHandler(user_repository, probe=probe),
    )
    bus.register(
        UpdateUserCommand,
        lambda: UpdateUserCommandHandler(user_repository, probe=probe),
    )
    bus.register(
        DeleteUserCommand,
        lambda: DeleteUserCommandHandler(user_repository, probe=probe),
    )


def register_query_handlers(bus: QueryBus, user_repository: IUserRepository) -> None:
    """Register one handler factory per user query."""
    bus.register(GetUserQuery, lambda: GetUserQueryHandler(user_repository))
    bus.register(ListUsersQuery, lambda: ListUsersQueryHandler(user_repository))


def build_command_bus(
    session: AsyncSession, context: ObservationContext | None = None
) -> CommandBus:
    """Build a command bus whose handlers share ``session``."""
    bus = CommandBus()
    register_command_handlers(bus, UserRepository(session), context=context)
    return bus


def build_query_bus(session: AsyncSession) -> QueryBus:
    """Build a query bus whose handlers share ``session``."""
    bus = QueryBus()
    register_query_handlers(bus, UserRepository(session))
    return bus
