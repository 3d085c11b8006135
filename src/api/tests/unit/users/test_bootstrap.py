"""Unit tests for the users composition root."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from infrastructure.settings import SecuritySettings
from shared_kernel.bus import CommandBus, QueryBus
from shared_kernel.observability_context import ObservationContext
from users.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from users.application.queries import GetUserQuery, ListUsersQuery
from users.application.services import UserApplicationService
from users.bootstrap import (
    build_command_bus,
    build_query_bus,
    build_user_application_service,
    configure_password_hashing,
    register_command_handlers,
    register_query_handlers,
)
from users.domain.security import get_bcrypt_rounds, set_bcrypt_rounds
from users.infrastructure.user_repository import UserRepository


@pytest.fixture
def mock_session():
    """Create mock async session."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


class TestConfigurePasswordHashing:
    """Tests for configure_password_hashing()."""

    def test_applies_configured_rounds(self):
        """Should set the bcrypt work factor from settings."""
        previous = get_bcrypt_rounds()
        try:
            configure_password_hashing(SecuritySettings(bcrypt_rounds=5))
            assert get_bcrypt_rounds() == 5
        finally:
            set_bcrypt_rounds(previous)


class TestBuildUserApplicationService:
    """Tests for build_user_application_service()."""

    def test_wires_repository_over_session(self, mock_session):
        """Should build a service backed by a UserRepository on the session."""
        service = build_user_application_service(mock_session)

        assert isinstance(service, UserApplicationService)
        assert isinstance(service._user_repository, UserRepository)
        assert service._user_repository._session is mock_session

    def test_tags_probe_with_ddd_pipeline(self, mock_session):
        """Should bind the caller's context tagged with the ddd pipeline."""
        service = build_user_application_service(
            mock_session, context=ObservationContext(request_id="req-1")
        )

        assert service._probe._context.as_dict() == {
            "request_id": "req-1",
            "pipeline": "ddd",
        }


class TestBusRegistration:
    """Tests for handler registration on the buses."""

    def test_registers_every_command(self, mock_user_repository):
        """Each user command should have a handler."""
        bus = CommandBus()

        register_command_handlers(bus, mock_user_repository)

        for command_type in (CreateUserCommand, UpdateUserCommand, DeleteUserCommand):
            assert bus.is_registered(command_type)

    def test_registers_every_query(self, mock_user_repository):
        """Each user query should have a handler."""
        bus = QueryBus()

        register_query_handlers(bus, mock_user_repository)

        assert bus.is_registered(GetUserQuery)
        assert bus.is_registered(ListUsersQuery)

    @pytest.mark.asyncio
    async def test_command_bus_routes_to_repository(
        self, mock_user_repository, make_record
    ):
        """A dispatched command should reach the repository through its handler."""
        record = make_record(id=2)
        mock_user_repository.find_by_id = AsyncMock(return_value=record)
        mock_user_repository.delete = AsyncMock(return_value=True)
        bus = CommandBus()
        register_command_handlers(bus, mock_user_repository)

        assert await bus.dispatch(DeleteUserCommand(id=2)) is True
        mock_user_repository.delete.assert_called_once_with(record)

    @pytest.mark.asyncio
    async def test_query_bus_routes_to_repository(
        self, mock_user_repository, make_record
    ):
        """A dispatched query should return the repository result."""
        records = [make_record(id=1)]
        mock_user_repository.get_all = AsyncMock(return_value=records)
        bus = QueryBus()
        register_query_handlers(bus, mock_user_repository)

        assert await bus.dispatch(ListUsersQuery()) == records


class TestBuildBuses:
    """Tests for build_command_bus() and build_query_bus()."""

    @pytest.mark.asyncio
    async def test_query_bus_uses_session(self, mock_session):
        """Handlers built by the query bus should read through the session."""
        mock_session.get.return_value = None
        bus = build_query_bus(mock_session)

        assert await bus.dispatch(GetUserQuery(id=1)) is None
        mock_session.get.assert_awaited_once()

    def test_command_bus_has_all_commands(self, mock_session):
        """The built command bus should route every user command."""
        bus = build_command_bus(mock_session)

        assert bus.is_registered(CreateUserCommand)
        assert bus.is_registered(UpdateUserCommand)
        assert bus.is_registered(DeleteUserCommand)
