"""Domain-Oriented Observability for the users application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from users.application.observability.handler_probe import (
    DefaultUserHandlerProbe,
    UserHandlerProbe,
)
from users.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "UserServiceProbe",
    "DefaultUserServiceProbe",
    "UserHandlerProbe",
    "DefaultUserHandlerProbe",
]
