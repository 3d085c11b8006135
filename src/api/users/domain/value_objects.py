"""Value objects for the users domain.

Value objects are immutable, self-validating wrappers around primitive
fields. Construction is the only validation point: an instance either
satisfies all of its invariants or is never created.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

import email_validator
from email_validator import EmailNotValidError, validate_email

from users.domain.exceptions import InvalidValueError
from users.domain.security import hash_password, verify_password

MAX_EMAIL_LENGTH = 255
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 255
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 255

_NAME_PUNCTUATION = frozenset("-'.")

# Only address syntax is checked: special-use and reserved domains (.local,
# .test, .invalid, ...) are valid addresses for user accounts.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _is_allowed_name_char(char: str) -> bool:
    """Letters, combining marks, whitespace and - ' . are allowed in names."""
    if char.isspace() or char in _NAME_PUNCTUATION:
        return True
    return unicodedata.category(char)[0] in ("L", "M")


@dataclass(frozen=True)
class UserId:
    """Identifier of a persisted user.

    Users get their id from the database on insert, so a user that has
    not been persisted yet has no UserId at all.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not pass as id 1
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or self.value <= 0
        ):
            raise InvalidValueError("id", "User ID must be a positive integer")

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """A syntactically valid email address of at most 255 characters.

    Length is checked before syntax so overlong input reports the length
    rule. Reserved domains such as ``.local`` or ``.test`` are accepted.
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) > MAX_EMAIL_LENGTH:
            raise InvalidValueError(
                "email",
                f"Email is too long. Maximum {MAX_EMAIL_LENGTH} characters allowed.",
            )

        try:
            validate_email(self.value, check_deliverability=False)
        except (EmailNotValidError, TypeError) as e:
            raise InvalidValueError(
                "email", f"Invalid email format: {self.value}"
            ) from e

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class UserName:
    """A person's display name.

    Rules apply to the trimmed value: 2-255 characters made of letters,
    combining marks, whitespace, hyphens, apostrophes and periods. The value
    is stored exactly as given.
    """

    value: str

    def __post_init__(self) -> None:
        trimmed = self.value.strip()

        if not trimmed:
            raise InvalidValueError("name", "Name cannot be empty")

        if len(trimmed) < MIN_NAME_LENGTH:
            raise InvalidValueError(
                "name", f"Name must be at least {MIN_NAME_LENGTH} characters long"
            )

        if len(trimmed) > MAX_NAME_LENGTH:
            raise InvalidValueError(
                "name",
                f"Name is too long. Maximum {MAX_NAME_LENGTH} characters allowed.",
            )

        if not all(_is_allowed_name_char(char) for char in trimmed):
            raise InvalidValueError("name", "Name contains invalid characters")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class HashedPassword:
    """A one-way password hash.

    Build from plaintext with from_plain_text() (enforces the length rules
    and hashes) or from a stored hash with from_hash(). The plaintext is
    never kept.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidValueError("password", "Hashed password cannot be empty")

    def __repr__(self) -> str:
        """Hide the hash from reprs and logs."""
        return "HashedPassword(value='***')"

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def from_plain_text(cls, plain_password: str) -> HashedPassword:
        """Validate a plaintext password and hash it.

        Args:
            plain_password: The plaintext password (8-255 characters)

        Returns:
            HashedPassword holding the bcrypt hash

        Raises:
            InvalidValueError: If the password is too short or too long
        """
        if len(plain_password) < MIN_PASSWORD_LENGTH:
            raise InvalidValueError(
                "password",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )

        if len(plain_password) > MAX_PASSWORD_LENGTH:
            raise InvalidValueError(
                "password",
                f"Password is too long. Maximum {MAX_PASSWORD_LENGTH} characters allowed.",
            )

        return cls(value=hash_password(plain_password))

    @classmethod
    def from_hash(cls, password_hash: str) -> HashedPassword:
        """Wrap an already-hashed password, e.g. one loaded from storage."""
        return cls(value=password_hash)

    def verify(self, plain_password: str) -> bool:
        """Check a plaintext password against this hash in constant time."""
        return verify_password(plain_password, self.value)
