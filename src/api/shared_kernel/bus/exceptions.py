"""Exceptions raised by the command and query buses.

Both represent wiring mistakes rather than user errors. Request-handling
code is not expected to catch them.
"""


class MessageBusError(Exception):
    """Base exception for message bus configuration faults."""

    pass


class HandlerNotRegisteredError(MessageBusError):
    """Raised when a message is dispatched with no handler registered for its type."""

    def __init__(self, message_type: type, expected_handler: str):
        self.message_type = message_type
        self.expected_handler = expected_handler
        super().__init__(
            f"No handler registered for {message_type.__qualname__} "
            f"(expected {expected_handler})"
        )


class HandlerAlreadyRegisteredError(MessageBusError):
    """Raised when a second handler is registered for the same message type.

    Every command and query maps to exactly one handler.
    """

    def __init__(self, message_type: type):
        self.message_type = message_type
        super().__init__(
            f"A handler is already registered for {message_type.__qualname__}"
        )
