"""Exceptions raised through the users ports."""


class UserNotFoundError(Exception):
    """Raised when a write targets a user row that no longer exists.

    Reads report a missing user as None instead; this only surfaces when a
    row disappears between a read and the following update.
    """

    pass
