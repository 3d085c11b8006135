"""Command and query buses.

Commands and queries are routed to exactly one handler through an explicit
registration table populated at startup.
"""

from shared_kernel.bus.bus import CommandBus, MessageBus, QueryBus, handler_name_for
from shared_kernel.bus.exceptions import (
    HandlerAlreadyRegisteredError,
    HandlerNotRegisteredError,
    MessageBusError,
)
from shared_kernel.bus.messages import Command, MessageHandler, Query
from shared_kernel.bus.observability import DefaultMessageBusProbe, MessageBusProbe

__all__ = [
    "Command",
    "CommandBus",
    "DefaultMessageBusProbe",
    "HandlerAlreadyRegisteredError",
    "HandlerNotRegisteredError",
    "MessageBus",
    "MessageBusError",
    "MessageBusProbe",
    "MessageHandler",
    "Query",
    "QueryBus",
    "handler_name_for",
]
