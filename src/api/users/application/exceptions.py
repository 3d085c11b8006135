"""Application-level exceptions for the users context."""

from __future__ import annotations

import json
from collections.abc import Mapping


class UserValidationError(ValueError):
    """Raised when a create or update request fails domain validation.

    Carries every field error found, keyed by field name. Transport layers
    are expected to turn this into a client error response.

    Attributes:
        errors: Mapping of field name to error message (never empty)
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        super().__init__(f"Validation failed: {json.dumps(self.errors)}")
