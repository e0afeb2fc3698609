"""Unit tests for check-in admission."""
import pytest

from event_checkin.core.exceptions import (
    CheckinsClosed,
    DuplicateCheckin,
    EventNotFound,
    ValidationError,
)
from event_checkin.services.checkins import admit_checkin, list_checkins


@pytest.mark.unit
class TestAdmitCheckin:
    """Test check-in admission rules."""

    def test_first_checkin_succeeds(self, store, event_factory):
        event = event_factory()

        checkin = admit_checkin(store, event.id, "123456")

        assert checkin.event_id == event.id
        assert checkin.employee_id == "123456"
        assert checkin.id
        assert checkin.timestamp.tzinfo is not None
        assert store.get_checkin_by_event_and_employee(event.id, "123456") is not None

    def test_second_checkin_same_employee_is_conflict(self, store, event_factory):
        event = event_factory()
        admit_checkin(store, event.id, "123456")

        with pytest.raises(DuplicateCheckin) as exc_info:
            admit_checkin(store, event.id, "123456")

        assert exc_info.value.status_code == 409
        assert len(store.get_checkins_by_event(event.id)) == 1

    def test_same_employee_different_events(self, store, event_factory):
        first = event_factory(name="Morning Session")
        second = event_factory(name="Afternoon Session")

        admit_checkin(store, first.id, "123456")
        admit_checkin(store, second.id, "123456")

        assert len(store.get_checkins_by_event(first.id)) == 1
        assert len(store.get_checkins_by_event(second.id)) == 1

    def test_unknown_event(self, store):
        with pytest.raises(EventNotFound) as exc_info:
            admit_checkin(store, "does-not-exist", "123456")
        assert exc_info.value.status_code == 404

    def test_archived_event_rejects_new_employee(self, store, event_factory):
        event = event_factory()
        store.update_event_archive_status(event.id, True)

        with pytest.raises(CheckinsClosed) as exc_info:
            admit_checkin(store, event.id, "654321")

        assert exc_info.value.status_code == 403
        assert store.get_checkins_by_event(event.id) == []

    def test_archived_checked_before_duplicate(self, store, event_factory):
        """A returning attendee at an archived event is told check-ins are closed."""
        event = event_factory()
        admit_checkin(store, event.id, "123456")
        store.update_event_archive_status(event.id, True)

        with pytest.raises(CheckinsClosed):
            admit_checkin(store, event.id, "123456")

    def test_unarchived_event_accepts_checkins_again(self, store, event_factory):
        event = event_factory()
        store.update_event_archive_status(event.id, True)
        store.update_event_archive_status(event.id, False)

        checkin = admit_checkin(store, event.id, "111111")
        assert checkin.employee_id == "111111"

    @pytest.mark.parametrize("employee_id", ["12345", "1234567", "abcdef", "000000", "12 456", ""])
    def test_invalid_employee_ids_rejected(self, store, event_factory, employee_id):
        event = event_factory()

        with pytest.raises(ValidationError) as exc_info:
            admit_checkin(store, event.id, employee_id)

        assert exc_info.value.status_code == 400
        assert store.get_checkins_by_event(event.id) == []


@pytest.mark.unit
class TestListCheckins:

    def test_newest_first_with_event_joined(self, store, event_factory):
        event = event_factory(name="Town Hall")
        for employee_id in ("100001", "100002", "100003"):
            admit_checkin(store, event.id, employee_id)

        checkins = list_checkins(store, event.id)

        assert len(checkins) == 3
        assert all(c.event.id == event.id for c in checkins)
        assert all(c.event.name == "Town Hall" for c in checkins)
        timestamps = [c.timestamp for c in checkins]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_unknown_event_is_empty(self, store):
        assert list_checkins(store, "missing") == []
