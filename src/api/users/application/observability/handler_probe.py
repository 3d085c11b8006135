"""Domain probe for the command handlers of the users context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserHandlerProbe(Protocol):
    """Domain probe for user command handlers."""

    def command_handled(self, command: str, user_id: int | None) -> None:
        """Record that a command changed (or tried to change) a user."""
        ...

    def command_target_missing(self, command: str, user_id: int) -> None:
        """Record that a command referenced a user that does not exist."""
        ...

    def with_context(self, context: ObservationContext) -> UserHandlerProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserHandlerProbe:
    """Default implementation of UserHandlerProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserHandlerProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserHandlerProbe(logger=self._logger, context=context)

    def command_handled(self, command: str, user_id: int | None) -> None:
        """Record that a command changed (or tried to change) a user."""
        self._logger.info(
            "user_command_handled",
            command=command,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def command_target_missing(self, command: str, user_id: int) -> None:
        """Record that a command referenced a user that does not exist."""
        self._logger.debug(
            "user_command_target_missing",
            command=command,
            user_id=user_id,
            **self._get_context_kwargs(),
        )
