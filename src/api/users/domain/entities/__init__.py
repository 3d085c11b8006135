"""Entities for the users context.

Only the domain layer may import this package; application code goes
through the UserAggregate.
"""

from users.domain.entities.user import UserEntity

__all__ = ["UserEntity"]
