"""Marker base classes and handler protocol for bus messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable


@dataclass(frozen=True)
class Command:
    """Base class for commands: an intent to change state.

    Concrete commands are frozen dataclasses holding primitive fields only.
    """


@dataclass(frozen=True)
class Query:
    """Base class for queries: an intent to read state."""


MessageT = TypeVar("MessageT", contravariant=True)


@runtime_checkable
class MessageHandler(Protocol[MessageT]):
    """A callable object that handles exactly one message type."""

    async def __call__(self, message: MessageT) -> Any:
        """Handle the message and return its result."""
        ...
