"""Domain probe for user repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to user persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserRepositoryProbe(Protocol):
    """Domain probe for user repository operations."""

    def user_saved(self, user_id: int, created: bool) -> None:
        """Record that a user row was inserted or updated."""
        ...

    def user_retrieved(self, user_id: int) -> None:
        """Record that a user was retrieved."""
        ...

    def user_not_found(self, user_id: int) -> None:
        """Record that a user was not found by id."""
        ...

    def email_not_found(self, email: str) -> None:
        """Record that no user owns an email address."""
        ...

    def user_deleted(self, user_id: int) -> None:
        """Record that a user row was deleted."""
        ...

    def with_context(self, context: ObservationContext) -> UserRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserRepositoryProbe:
    """Default implementation of UserRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserRepositoryProbe(logger=self._logger, context=context)

    def user_saved(self, user_id: int, created: bool) -> None:
        """Record that a user row was inserted or updated."""
        self._logger.info(
            "user_saved",
            user_id=user_id,
            created=created,
            **self._get_context_kwargs(),
        )

    def user_retrieved(self, user_id: int) -> None:
        """Record that a user was retrieved."""
        self._logger.debug(
            "user_retrieved",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, user_id: int) -> None:
        """Record that a user was not found by id."""
        self._logger.debug(
            "user_not_found",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def email_not_found(self, email: str) -> None:
        """Record that no user owns an email address."""
        self._logger.debug(
            "email_not_found",
            email=email,
            **self._get_context_kwargs(),
        )

    def user_deleted(self, user_id: int) -> None:
        """Record that a user row was deleted."""
        self._logger.info(
            "user_deleted",
            user_id=user_id,
            **self._get_context_kwargs(),
        )
