"""Unit tests for UserAggregate.

The aggregate is the only way to change a user: every update validates
through a new value object before touching state or recording an event.
"""

from datetime import UTC, datetime, timedelta

import pytest

from users.domain.aggregates import UserAggregate
from users.domain.events import (
    UserCreated,
    UserEmailChanged,
    UserNameChanged,
    UserPasswordChanged,
)
from users.domain.exceptions import InvalidValueError
from users.domain.value_objects import HashedPassword, UserId


@pytest.fixture
def new_user() -> UserAggregate:
    return UserAggregate.create("Jane Doe", "jane@x.com", "password1")


@pytest.fixture
def stored_user() -> UserAggregate:
    """A user rehydrated from storage with timestamps in the past."""
    stamp = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
    return UserAggregate.from_persistence(
        id=7,
        name="Jane Doe",
        email="jane@x.com",
        hashed_password=HashedPassword.from_plain_text("password1").value,
        created_at=stamp,
        updated_at=stamp,
    )


class TestCreate:
    """Tests for UserAggregate.create()."""

    def test_records_exactly_one_user_created_event(self, new_user):
        """Test that create() records a single UserCreated event."""
        events = new_user.domain_events

        assert len(events) == 1
        assert isinstance(events[0], UserCreated)
        assert events[0].event_type == "UserCreated"
        assert events[0].payload() == {"name": "Jane Doe", "email": "jane@x.com"}

    def test_id_is_unset_until_persisted(self, new_user):
        """Test that a new aggregate has no id."""
        assert new_user.id is None

    def test_exposes_field_values(self, new_user):
        """Test field accessors."""
        assert new_user.name.value == "Jane Doe"
        assert new_user.email.value == "jane@x.com"
        assert new_user.created_at == new_user.updated_at
        assert new_user.created_at.tzinfo is not None

    def test_hashes_password(self, new_user):
        """Test that the plaintext password is not kept."""
        assert new_user.password.value != "password1"
        assert new_user.verify_password("password1") is True
        assert new_user.verify_password("password2") is False

    @pytest.mark.parametrize(
        ("name", "email", "password", "field"),
        [
            ("J", "jane@x.com", "password1", "name"),
            ("Jane Doe", "not-an-email", "password1", "email"),
            ("Jane Doe", "jane@x.com", "short", "password"),
        ],
    )
    def test_propagates_value_object_errors(self, name, email, password, field):
        """Test that an invalid field aborts creation with its error."""
        with pytest.raises(InvalidValueError) as exc_info:
            UserAggregate.create(name, email, password)

        assert exc_info.value.field == field

    def test_to_dict_excludes_password(self, new_user):
        """Test the serializable view."""
        data = new_user.to_dict()

        assert data["id"] is None
        assert data["name"] == "Jane Doe"
        assert data["email"] == "jane@x.com"
        assert "password" not in data


class TestFromPersistence:
    """Tests for UserAggregate.from_persistence()."""

    def test_records_no_events(self, stored_user):
        """Test that rehydration does not record events."""
        assert stored_user.domain_events == ()

    def test_restores_state(self, stored_user):
        """Test that stored values are restored."""
        assert stored_user.id == UserId(7)
        assert stored_user.name.value == "Jane Doe"
        assert stored_user.verify_password("password1") is True

    def test_rejects_corrupted_state(self):
        """Test that invalid stored data raises the value object error."""
        stamp = datetime.now(UTC)

        with pytest.raises(InvalidValueError) as exc_info:
            UserAggregate.from_persistence(
                id=1,
                name="Jane Doe",
                email="broken",
                hashed_password="$2b$04$hash",
                created_at=stamp,
                updated_at=stamp,
            )

        assert exc_info.value.field == "email"

    def test_rejects_non_positive_id(self):
        """Test that a stored id of zero is treated as corrupt."""
        stamp = datetime.now(UTC)

        with pytest.raises(InvalidValueError):
            UserAggregate.from_persistence(
                id=0,
                name="Jane Doe",
                email="jane@x.com",
                hashed_password="$2b$04$hash",
                created_at=stamp,
                updated_at=stamp,
            )


class TestUpdateName:
    """Tests for UserAggregate.update_name()."""

    def test_changes_name_and_records_event(self, stored_user):
        """Test that a valid name is applied and one event is recorded."""
        stored_user.update_name("Janet Doe")

        assert stored_user.name.value == "Janet Doe"
        events = stored_user.domain_events
        assert len(events) == 1
        assert isinstance(events[0], UserNameChanged)
        assert events[0].user_id == 7
        assert events[0].old_name == "Jane Doe"
        assert events[0].new_name == "Janet Doe"

    def test_refreshes_updated_at(self, stored_user):
        """Test that updated_at moves forward and created_at stays."""
        created_at = stored_user.created_at

        stored_user.update_name("Janet Doe")

        assert stored_user.updated_at > created_at
        assert stored_user.created_at == created_at

    def test_invalid_name_leaves_state_unchanged(self, stored_user):
        """Test that a rejected name changes nothing."""
        updated_at = stored_user.updated_at

        with pytest.raises(InvalidValueError):
            stored_user.update_name("Jane 2")

        assert stored_user.name.value == "Jane Doe"
        assert stored_user.updated_at == updated_at
        assert stored_user.domain_events == ()


class TestUpdateEmail:
    """Tests for UserAggregate.update_email()."""

    def test_changes_email_and_records_event(self, stored_user):
        """Test that a valid email is applied and one event is recorded."""
        stored_user.update_email("janet@x.com")

        assert stored_user.email.value == "janet@x.com"
        (event,) = stored_user.domain_events
        assert isinstance(event, UserEmailChanged)
        assert event.payload() == {
            "user_id": 7,
            "old_email": "jane@x.com",
            "new_email": "janet@x.com",
        }

    def test_invalid_email_leaves_state_and_events_unchanged(self, new_user):
        """Test that a malformed address raises and changes nothing."""
        events_before = new_user.domain_events

        with pytest.raises(InvalidValueError) as exc_info:
            new_user.update_email("jane-at-x.com")

        assert exc_info.value.field == "email"
        assert new_user.email.value == "jane@x.com"
        assert new_user.domain_events == events_before

    def test_event_has_no_user_id_before_persistence(self, new_user):
        """Test that events from an unsaved aggregate carry user_id None."""
        new_user.update_email("janet@x.com")

        assert new_user.domain_events[-1].user_id is None


class TestUpdatePassword:
    """Tests for UserAggregate.update_password()."""

    def test_changes_password_and_records_event(self, stored_user):
        """Test that the new password verifies and the old one does not."""
        stored_user.update_password("new-password")

        assert stored_user.verify_password("new-password") is True
        assert stored_user.verify_password("password1") is False
        (event,) = stored_user.domain_events
        assert isinstance(event, UserPasswordChanged)

    def test_event_carries_no_password_values(self, stored_user):
        """Test that the event payload has only the user id."""
        stored_user.update_password("new-password")

        assert stored_user.domain_events[0].payload() == {"user_id": 7}

    def test_invalid_password_leaves_state_unchanged(self, stored_user):
        """Test that a too short password changes nothing."""
        previous = stored_user.password

        with pytest.raises(InvalidValueError):
            stored_user.update_password("short")

        assert stored_user.password == previous
        assert stored_user.domain_events == ()


class TestDomainEvents:
    """Tests for event accumulation and clearing."""

    def test_events_accumulate_in_order(self, new_user):
        """Test that each update appends one event after the previous ones."""
        new_user.update_name("Janet Doe")
        new_user.update_email("janet@x.com")
        new_user.update_password("new-password")

        assert [e.event_type for e in new_user.domain_events] == [
            "UserCreated",
            "UserNameChanged",
            "UserEmailChanged",
            "UserPasswordChanged",
        ]

    def test_domain_events_is_read_only_view(self, new_user):
        """Test that the returned view cannot alter the aggregate."""
        events = new_user.domain_events

        assert isinstance(events, tuple)
        new_user.update_name("Janet Doe")
        assert len(events) == 1
        assert len(new_user.domain_events) == 2

    def test_clear_domain_events(self, new_user):
        """Test that clearing empties the event list."""
        new_user.clear_domain_events()

        assert new_user.domain_events == ()

    def test_collect_events_returns_and_clears(self, new_user):
        """Test that collect_events() hands over events exactly once."""
        first = new_user.collect_events()
        second = new_user.collect_events()

        assert len(first) == 1
        assert isinstance(first[0], UserCreated)
        assert second == []

    def test_events_are_timestamped(self, new_user):
        """Test that events carry a recent UTC timestamp."""
        event = new_user.domain_events[0]

        assert datetime.now(UTC) - event.occurred_at < timedelta(minutes=1)
