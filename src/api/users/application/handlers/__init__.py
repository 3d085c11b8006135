"""Command and query handlers for the users context.

One handler per command or query, each registered on the matching bus by
``users.bootstrap``.
"""

from users.application.handlers.command_handlers import (
    CreateUserCommandHandler,
    DeleteUserCommandHandler,
    UpdateUserCommandHandler,
)
from users.application.handlers.query_handlers import (
    GetUserQueryHandler,
    ListUsersQueryHandler,
)

__all__ = [
    "CreateUserCommandHandler",
    "UpdateUserCommandHandler",
    "DeleteUserCommandHandler",
    "GetUserQueryHandler",
    "ListUsersQueryHandler",
]
