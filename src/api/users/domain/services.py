"""Domain service for rules that span more than one user.

Email uniqueness cannot be decided by a single aggregate, so it lives here
together with the per-field validation used before creating or updating a
user.
"""

from __future__ import annotations

from users.domain.exceptions import InvalidValueError
from users.domain.value_objects import Email, HashedPassword, UserName
from users.ports.repositories import IUserRepository

EMAIL_TAKEN_MESSAGE = "Email address is already taken"


class UserDomainService:
    """Cross-aggregate validation for users.

    Validation methods check every field independently and return a mapping
    of field name to error message, so one call can report several problems
    at once. An empty mapping means the input is valid.
    """

    def __init__(self, user_repository: IUserRepository):
        """Initialize the service.

        Args:
            user_repository: Repository used for uniqueness lookups
        """
        self._user_repository = user_repository

    async def is_email_unique(
        self, email: Email, exclude_user_id: int | None = None
    ) -> bool:
        """Check that no other user owns ``email``.

        Args:
            email: The address to check
            exclude_user_id: A user allowed to already own the address,
                used when a user keeps their own email during an update

        Returns:
            True if the address is free or owned by ``exclude_user_id``
        """
        existing = await self._user_repository.find_by_email(email.value)
        if existing is None:
            return True
        return exclude_user_id is not None and existing.id == exclude_user_id

    async def validate_user_for_creation(
        self, name: str, email: str, password: str
    ) -> dict[str, str]:
        """Validate all fields of a new user.

        Returns:
            Mapping of field name to error message; empty when valid
        """
        errors: dict[str, str] = {}

        self._check_name(name, errors)
        await self._check_email(email, errors, exclude_user_id=None)
        self._check_password(password, errors)

        return errors

    async def validate_user_for_update(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> dict[str, str]:
        """Validate the fields present in an update.

        Fields left as None are not checked. The uniqueness check ignores
        the user being updated.

        Returns:
            Mapping of field name to error message; empty when valid
        """
        errors: dict[str, str] = {}

        if name is not None:
            self._check_name(name, errors)
        if email is not None:
            await self._check_email(email, errors, exclude_user_id=user_id)
        if password is not None:
            self._check_password(password, errors)

        return errors

    def _check_name(self, name: str, errors: dict[str, str]) -> None:
        try:
            UserName(name)
        except InvalidValueError as e:
            errors["name"] = e.message

    async def _check_email(
        self, email: str, errors: dict[str, str], exclude_user_id: int | None
    ) -> None:
        try:
            email_vo = Email(email)
        except InvalidValueError as e:
            errors["email"] = e.message
            return

        if not await self.is_email_unique(email_vo, exclude_user_id):
            errors["email"] = EMAIL_TAKEN_MESSAGE

    def _check_password(self, password: str, errors: dict[str, str]) -> None:
        try:
            HashedPassword.from_plain_text(password)
        except InvalidValueError as e:
            errors["password"] = e.message
