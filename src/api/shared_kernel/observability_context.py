"""Observation context for domain-oriented observability.

Observation contexts carry request-scoped metadata that every probe attaches
to the events it records, so log lines from the application service, the
message bus and the repository can be correlated.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        actor_id: Identifier of the caller performing the operation, if known.
        pipeline: Which write path is in use ("ddd" or "cqrs").
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123", pipeline="ddd")
        probe = DefaultUserServiceProbe().with_context(context)
    """

    request_id: str | None = None
    actor_id: str | None = None
    pipeline: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.actor_id is not None:
            result["actor_id"] = self.actor_id
        if self.pipeline is not None:
            result["pipeline"] = self.pipeline
        result.update(self.extra)
        return result

    def with_pipeline(self, pipeline: str) -> ObservationContext:
        """Create a new context tagged with the given pipeline."""
        return ObservationContext(
            request_id=self.request_id,
            actor_id=self.actor_id,
            pipeline=pipeline,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            actor_id=self.actor_id,
            pipeline=self.pipeline,
            extra={**self.extra, **kwargs},
        )
