"""User application service for the users bounded context.

Orchestrates the domain model for each use case: domain validation,
aggregate creation or rehydration, persistence and hand-over of the
recorded domain events.
"""

from __future__ import annotations

from users.application.dtos import CreateUserDTO, UpdateUserDTO, UserDTO
from users.application.exceptions import UserValidationError
from users.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from users.domain.aggregates import UserAggregate
from users.domain.services import UserDomainService
from users.ports.events import IDomainEventPublisher
from users.ports.repositories import IUserRepository, UserFields


class UserApplicationService:
    """Application service for user management.

    Value object and uniqueness failures are gathered by the domain service
    and raised together as a single UserValidationError. Repository errors
    propagate unchanged. A missing user is reported as None (or False for
    deletes), never as an exception.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        domain_service: UserDomainService | None = None,
        event_publisher: IDomainEventPublisher | None = None,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserApplicationService with dependencies.

        Args:
            user_repository: Repository for user persistence
            domain_service: Cross-aggregate validation; built from the
                repository when omitted
            event_publisher: Optional receiver for collected domain events.
                Without one, events are collected and dropped.
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._domain_service = domain_service or UserDomainService(user_repository)
        self._event_publisher = event_publisher
        self._probe = probe or DefaultUserServiceProbe()

    async def create_user(self, dto: CreateUserDTO) -> UserDTO:
        """Create a new user.

        Args:
            dto: Name, email and plaintext password

        Returns:
            The stored user

        Raises:
            UserValidationError: If any field is invalid or the email is taken
        """
        errors = await self._domain_service.validate_user_for_creation(
            dto.name, dto.email, dto.password
        )
        if errors:
            self._probe.user_validation_failed(operation="create", errors=errors)
            raise UserValidationError(errors)

        aggregate = UserAggregate.create(dto.name, dto.email, dto.password)

        try:
            record = await self._user_repository.create(
                UserFields(
                    name=aggregate.name.value,
                    email=aggregate.email.value,
                    password_hash=aggregate.password.value,
                )
            )
        except Exception as e:
            self._probe.user_operation_failed(operation="create", error=str(e))
            raise

        self._probe.user_created(user_id=record.id, email=record.email)
        await self._forward_events(record.id, aggregate)
        return UserDTO.from_record(record)

    async def update_user(self, dto: UpdateUserDTO) -> UserDTO | None:
        """Apply a partial update to a user.

        An update without any field set is a plain read: no validation runs
        and no events are recorded.

        Args:
            dto: The user id plus the fields to change

        Returns:
            The updated user, or None if the user does not exist

        Raises:
            UserValidationError: If any provided field is invalid or the new
                email belongs to another user
        """
        if not dto.has_changes():
            return await self.get_user_by_id(dto.id)

        errors = await self._domain_service.validate_user_for_update(
            dto.id, name=dto.name, email=dto.email, password=dto.password
        )
        if errors:
            self._probe.user_validation_failed(
                operation="update", errors=errors, user_id=dto.id
            )
            raise UserValidationError(errors)

        record = await self._user_repository.find_by_id(dto.id)
        if record is None:
            self._probe.user_not_found(user_id=dto.id)
            return None

        aggregate = UserAggregate.from_persistence(
            id=record.id,
            name=record.name,
            email=record.email,
            hashed_password=record.password_hash,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

        changes = UserFields()
        if dto.name is not None:
            aggregate.update_name(dto.name)
            changes["name"] = aggregate.name.value
        if dto.email is not None:
            aggregate.update_email(dto.email)
            changes["email"] = aggregate.email.value
        if dto.password is not None:
            aggregate.update_password(dto.password)
            changes["password_hash"] = aggregate.password.value

        try:
            updated = await self._user_repository.update(record, changes)
        except Exception as e:
            self._probe.user_operation_failed(
                operation="update", error=str(e), user_id=dto.id
            )
            raise

        self._probe.user_updated(user_id=updated.id, changed_fields=sorted(changes))
        await self._forward_events(updated.id, aggregate)
        return UserDTO.from_record(updated)

    async def get_user_by_id(self, user_id: int) -> UserDTO | None:
        """Get a user by id.

        Returns:
            The user, or None if not found
        """
        record = await self._user_repository.find_by_id(user_id)
        return UserDTO.from_record(record) if record is not None else None

    async def get_all_users(self) -> list[UserDTO]:
        """List all users ordered by id."""
        records = await self._user_repository.get_all()
        return [UserDTO.from_record(record) for record in records]

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user.

        Returns:
            True if deleted, False if the user does not exist
        """
        record = await self._user_repository.find_by_id(user_id)
        if record is None:
            self._probe.user_not_found(user_id=user_id)
            return False

        deleted = await self._user_repository.delete(record)
        if deleted:
            self._probe.user_deleted(user_id=user_id)
        return deleted

    async def _forward_events(self, user_id: int, aggregate: UserAggregate) -> None:
        """Hand collected events to the publisher, if one is configured."""
        events = aggregate.collect_events()
        self._probe.domain_events_collected(
            user_id=user_id,
            event_types=[event.event_type for event in events],
            published=self._event_publisher is not None,
        )
        if self._event_publisher is not None and events:
            await self._event_publisher.publish(events)
