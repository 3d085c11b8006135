"""Command handlers for the users context.

Handlers work directly against the repository and bypass the aggregate and
its value objects. In particular the password is hashed without the 8-255
character rule that the application service enforces. The two write paths
differ here and the application service is the canonical one.
"""

from __future__ import annotations

from users.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from users.application.observability import (
    DefaultUserHandlerProbe,
    UserHandlerProbe,
)
from users.domain.security import hash_password
from users.ports.repositories import IUserRepository, UserFields, UserRecord


class CreateUserCommandHandler:
    """Insert a user straight from a CreateUserCommand."""

    def __init__(
        self,
        user_repository: IUserRepository,
        probe: UserHandlerProbe | None = None,
    ):
        self._user_repository = user_repository
        self._probe = probe or DefaultUserHandlerProbe()

    async def __call__(self, command: CreateUserCommand) -> UserRecord:
        record = await self._user_repository.create(
            UserFields(
                name=command.name,
                email=command.email,
                password_hash=hash_password(command.password),
            )
        )
        self._probe.command_handled(command="CreateUserCommand", user_id=record.id)
        return record


class UpdateUserCommandHandler:
    """Apply the fields set on an UpdateUserCommand.

    Returns the current record untouched when no field is set, and None when
    the user does not exist.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        probe: UserHandlerProbe | None = None,
    ):
        self._user_repository = user_repository
        self._probe = probe or DefaultUserHandlerProbe()

    async def __call__(self, command: UpdateUserCommand) -> UserRecord | None:
        record = await self._user_repository.find_by_id(command.id)
        if record is None:
            self._probe.command_target_missing(
                command="UpdateUserCommand", user_id=command.id
            )
            return None

        changes = UserFields()
        if command.name is not None:
            changes["name"] = command.name
        if command.email is not None:
            changes["email"] = command.email
        if command.password is not None:
            changes["password_hash"] = hash_password(command.password)

        if not changes:
            return record

        updated = await self._user_repository.update(record, changes)
        self._probe.command_handled(command="UpdateUserCommand", user_id=updated.id)
        return updated


class DeleteUserCommandHandler:
    """Delete the user named by a DeleteUserCommand."""

    def __init__(
        self,
        user_repository: IUserRepository,
        probe: UserHandlerProbe | None = None,
    ):
        self._user_repository = user_repository
        self._probe = probe or DefaultUserHandlerProbe()

    async def __call__(self, command: DeleteUserCommand) -> bool:
        record = await self._user_repository.find_by_id(command.id)
        if record is None:
            self._probe.command_target_missing(
                command="DeleteUserCommand", user_id=command.id
            )
            return False

        deleted = await self._user_repository.delete(record)
        self._probe.command_handled(command="DeleteUserCommand", user_id=command.id)
        return deleted
