"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_created(self, user_id: int, email: str) -> None:
        """Record that a user was created."""
        ...

    def user_updated(self, user_id: int, changed_fields: list[str]) -> None:
        """Record that a user was updated."""
        ...

    def user_deleted(self, user_id: int) -> None:
        """Record that a user was deleted."""
        ...

    def user_not_found(self, user_id: int) -> None:
        """Record that an operation targeted a missing user."""
        ...

    def user_validation_failed(
        self, operation: str, errors: dict[str, str], user_id: int | None = None
    ) -> None:
        """Record that domain validation rejected a request."""
        ...

    def user_operation_failed(
        self, operation: str, error: str, user_id: int | None = None
    ) -> None:
        """Record that an operation failed unexpectedly."""
        ...

    def domain_events_collected(
        self, user_id: int, event_types: list[str], published: bool
    ) -> None:
        """Record the events collected from an aggregate after a write."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def user_created(self, user_id: int, email: str) -> None:
        """Record that a user was created."""
        self._logger.info(
            "user_created",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def user_updated(self, user_id: int, changed_fields: list[str]) -> None:
        """Record that a user was updated."""
        self._logger.info(
            "user_updated",
            user_id=user_id,
            changed_fields=changed_fields,
            **self._get_context_kwargs(),
        )

    def user_deleted(self, user_id: int) -> None:
        """Record that a user was deleted."""
        self._logger.info(
            "user_deleted",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, user_id: int) -> None:
        """Record that an operation targeted a missing user."""
        self._logger.debug(
            "user_not_found",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_validation_failed(
        self, operation: str, errors: dict[str, str], user_id: int | None = None
    ) -> None:
        """Record that domain validation rejected a request."""
        self._logger.warning(
            "user_validation_failed",
            operation=operation,
            user_id=user_id,
            fields=sorted(errors),
            errors=errors,
            **self._get_context_kwargs(),
        )

    def user_operation_failed(
        self, operation: str, error: str, user_id: int | None = None
    ) -> None:
        """Record that an operation failed unexpectedly."""
        self._logger.error(
            "user_operation_failed",
            operation=operation,
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def domain_events_collected(
        self, user_id: int, event_types: list[str], published: bool
    ) -> None:
        """Record the events collected from an aggregate after a write."""
        self._logger.debug(
            "domain_events_collected",
            user_id=user_id,
            event_types=event_types,
            event_count=len(event_types),
            published=published,
            **self._get_context_kwargs(),
        )
