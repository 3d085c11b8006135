"""Domain probe for command and query dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class MessageBusProbe(Protocol):
    """Domain probe for message bus operations."""

    def message_dispatched(self, bus: str, message_type: str, handler: str) -> None:
        """Record that a message was routed to its handler."""
        ...

    def handler_not_registered(self, bus: str, message_type: str) -> None:
        """Record that a message had no registered handler."""
        ...

    def with_context(self, context: ObservationContext) -> MessageBusProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultMessageBusProbe:
    """Default implementation of MessageBusProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultMessageBusProbe:
        """Create a new probe with observation context bound."""
        return DefaultMessageBusProbe(logger=self._logger, context=context)

    def message_dispatched(self, bus: str, message_type: str, handler: str) -> None:
        """Record that a message was routed to its handler."""
        self._logger.debug(
            "message_dispatched",
            bus=bus,
            message_type=message_type,
            handler=handler,
            **self._get_context_kwargs(),
        )

    def handler_not_registered(self, bus: str, message_type: str) -> None:
        """Record that a message had no registered handler."""
        self._logger.error(
            "handler_not_registered",
            bus=bus,
            message_type=message_type,
            **self._get_context_kwargs(),
        )
