"""Domain aggregates for the users context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from users.domain.aggregates.user import UserAggregate

__all__ = ["UserAggregate"]
