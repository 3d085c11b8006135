"""Event publication port for the users bounded context."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from users.domain.events import DomainEvent


@runtime_checkable
class IDomainEventPublisher(Protocol):
    """Receives the domain events collected from an aggregate after a write.

    The application service hands events over once the write has been
    persisted. What happens to them afterwards is up to the implementation.
    """

    async def publish(self, events: Sequence[DomainEvent]) -> None:
        """Publish a batch of events, oldest first."""
        ...
