"""In-process command and query buses.

Each bus keeps an explicit registration table mapping a message type to a
factory that builds its handler. Dispatch looks up the exact type of the
message, builds a fresh handler, awaits it and hands back whatever the
handler returned.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from shared_kernel.bus.exceptions import (
    HandlerAlreadyRegisteredError,
    HandlerNotRegisteredError,
)
from shared_kernel.bus.messages import Command, MessageHandler, Query
from shared_kernel.bus.observability import DefaultMessageBusProbe, MessageBusProbe

HandlerFactory = Callable[[], MessageHandler[Any]]

_SEGMENT_TO_HANDLERS = {"commands": "handlers", "queries": "handlers"}


def handler_name_for(message_type: type) -> str:
    """Derive the conventional handler path for a message type.

    ``users.application.commands.CreateUserCommand`` maps to
    ``users.application.handlers.CreateUserCommandHandler``. Only used to
    make resolution failures readable; routing goes through the registry.
    """
    segments = [
        _SEGMENT_TO_HANDLERS.get(segment, segment)
        for segment in message_type.__module__.split(".")
    ]
    return ".".join([*segments, f"{message_type.__qualname__}Handler"])


class MessageBus:
    """Registry-backed dispatcher shared by the command and query buses."""

    message_kind: ClassVar[type] = object
    name: ClassVar[str] = "message_bus"

    def __init__(self, probe: MessageBusProbe | None = None) -> None:
        self._factories: dict[type, HandlerFactory] = {}
        self._probe = probe or DefaultMessageBusProbe()

    def register(self, message_type: type, factory: HandlerFactory) -> None:
        """Register the factory that builds the handler for ``message_type``.

        Raises:
            TypeError: If ``message_type`` is not a message of this bus' kind
            HandlerAlreadyRegisteredError: If the type already has a handler
        """
        if not isinstance(message_type, type) or not issubclass(
            message_type, self.message_kind
        ):
            raise TypeError(
                f"{self.name} only accepts {self.message_kind.__name__} types, "
                f"got {message_type!r}"
            )
        if message_type in self._factories:
            raise HandlerAlreadyRegisteredError(message_type)
        self._factories[message_type] = factory

    def is_registered(self, message_type: type) -> bool:
        """Check whether a handler is registered for ``message_type``."""
        return message_type in self._factories

    async def dispatch(self, message: Any) -> Any:
        """Route ``message`` to its handler and return the handler's result.

        Raises:
            HandlerNotRegisteredError: If no handler is registered for the
                exact type of ``message``
        """
        message_type = type(message)
        factory = self._factories.get(message_type)
        if factory is None:
            self._probe.handler_not_registered(
                bus=self.name, message_type=message_type.__qualname__
            )
            raise HandlerNotRegisteredError(
                message_type, expected_handler=handler_name_for(message_type)
            )

        handler = factory()
        self._probe.message_dispatched(
            bus=self.name,
            message_type=message_type.__qualname__,
            handler=type(handler).__qualname__,
        )
        return await handler(message)


class CommandBus(MessageBus):
    """Bus for commands. Each command type has exactly one handler."""

    message_kind: ClassVar[type] = Command
    name: ClassVar[str] = "command_bus"

    async def dispatch(self, message: Command) -> Any:
        """Dispatch a command to its handler."""
        return await super().dispatch(message)


class QueryBus(MessageBus):
    """Bus for queries. Each query type has exactly one handler."""

    message_kind: ClassVar[type] = Query
    name: ClassVar[str] = "query_bus"

    async def dispatch(self, message: Query) -> Any:
        """Dispatch a query to its handler."""
        return await super().dispatch(message)
