"""Domain exceptions for the users context."""


class InvalidValueError(ValueError):
    """Raised when a value object invariant is violated.

    Carries the name of the offending field so callers validating several
    fields at once can report each failure under its own key.

    Attributes:
        field: Name of the field whose rule was broken (e.g. "email")
        message: Human-readable description of the violated rule
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)
