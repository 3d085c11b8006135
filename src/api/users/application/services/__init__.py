"""Application services for the users bounded context.

Application services orchestrate domain operations and coordinate
between the domain layer and infrastructure.
"""

from users.application.services.user_application_service import (
    UserApplicationService,
)

__all__ = ["UserApplicationService"]
