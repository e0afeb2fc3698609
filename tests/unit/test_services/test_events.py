"""Unit tests for event lifecycle logic."""
import time
from datetime import timedelta

import pytest

from event_checkin.core.exceptions import EventNotFound, ValidationError
from event_checkin.core.utils import today
from event_checkin.schemas import EventCreate
from event_checkin.services.checkins import admit_checkin
from event_checkin.services.events import (
    create_event,
    delete_event,
    get_event,
    get_event_by_name,
    get_event_stats,
    get_event_summary,
    list_events,
    set_archived,
    update_event,
    verify_admin_password,
)


def make_data(name="Quarterly All-Hands", days_ahead=0, **kwargs):
    return EventCreate(name=name, date=today() + timedelta(days=days_ahead), **kwargs)


@pytest.mark.unit
class TestCreateEvent:

    def test_create_event_today_accepted(self, store):
        event = create_event(store, make_data())

        assert event.id
        assert event.name == "Quarterly All-Hands"
        assert event.date == today()
        assert event.archived is False
        assert event.password_protected is False
        assert event.admin_password is None
        assert event.created_at.tzinfo is not None

    def test_create_event_future_accepted(self, store):
        event = create_event(store, make_data(days_ahead=30))
        assert event.date == today() + timedelta(days=30)

    def test_create_event_in_past_rejected(self, store):
        with pytest.raises(ValidationError, match="today or in the future"):
            create_event(store, make_data(days_ahead=-1))
        assert store.get_all_events() == []

    def test_name_is_trimmed(self, store):
        event = create_event(store, make_data(name="   Onboarding Day  "))
        assert event.name == "Onboarding Day"

    def test_blank_name_rejected(self, store):
        data = make_data().model_copy(update={"name": "   "})
        with pytest.raises(ValidationError, match="blank"):
            create_event(store, data)

    def test_password_is_hashed(self, store):
        event = create_event(store, make_data(password_protected=True, admin_password="s3cret"))

        assert event.password_protected is True
        assert event.admin_password != "s3cret"
        assert event.admin_password.startswith("$argon2")

    def test_password_required_when_protected(self, store):
        data = make_data().model_copy(update={"password_protected": True, "admin_password": ""})
        with pytest.raises(ValidationError, match="Admin password is required"):
            create_event(store, data)

    def test_password_discarded_when_not_protected(self, store):
        event = create_event(store, make_data(admin_password="ignored"))
        assert event.admin_password is None


@pytest.mark.unit
class TestLookup:

    def test_get_event(self, store):
        created = create_event(store, make_data())
        assert get_event(store, created.id).id == created.id

    def test_get_event_missing(self, store):
        with pytest.raises(EventNotFound):
            get_event(store, "missing")

    def test_get_event_by_exact_name(self, store):
        created = create_event(store, make_data(name="Safety Training"))

        assert get_event_by_name(store, "Safety Training").id == created.id
        with pytest.raises(EventNotFound):
            get_event_by_name(store, "safety training")

    def test_list_events_newest_first(self, store):
        names = ["First", "Second", "Third"]
        for name in names:
            create_event(store, make_data(name=name))
            time.sleep(0.002)  # distinct created_at values

        events = list_events(store)

        assert [e.name for e in events] == list(reversed(names))


@pytest.mark.unit
class TestUpdateEvent:

    def test_update_name_and_date(self, store):
        event = create_event(store, make_data())
        new_date = today() + timedelta(days=5)

        updated = update_event(store, event.id, {"name": "Renamed", "date": new_date})

        assert updated.name == "Renamed"
        assert updated.date == new_date
        assert updated.created_at == event.created_at
        assert get_event(store, event.id).name == "Renamed"

    def test_partial_update_keeps_other_fields(self, store):
        event = create_event(store, make_data(days_ahead=2))
        updated = update_event(store, event.id, {"name": "Only Name"})
        assert updated.date == event.date

    def test_update_date_in_past_rejected(self, store):
        event = create_event(store, make_data())
        with pytest.raises(ValidationError):
            update_event(store, event.id, {"date": today() - timedelta(days=3)})

    def test_update_blank_name_rejected(self, store):
        event = create_event(store, make_data())
        with pytest.raises(ValidationError):
            update_event(store, event.id, {"name": "  "})

    def test_update_missing_event(self, store):
        with pytest.raises(EventNotFound):
            update_event(store, "missing", {"name": "Whatever"})

    def test_empty_update_returns_event(self, store):
        event = create_event(store, make_data())
        assert update_event(store, event.id, {}).name == event.name


@pytest.mark.unit
class TestArchiveAndDelete:

    def test_archive_is_idempotent(self, store):
        event = create_event(store, make_data())

        assert set_archived(store, event.id, True).archived is True
        assert set_archived(store, event.id, True).archived is True
        assert set_archived(store, event.id, False).archived is False

    def test_archive_keeps_checkins(self, store):
        event = create_event(store, make_data())
        admit_checkin(store, event.id, "123456")

        set_archived(store, event.id, True)

        assert len(store.get_checkins_by_event(event.id)) == 1

    def test_archive_missing_event(self, store):
        with pytest.raises(EventNotFound):
            set_archived(store, "missing", True)

    def test_delete_cascades_to_checkins(self, store):
        event = create_event(store, make_data())
        other = create_event(store, make_data(name="Other"))
        for employee_id in ("100001", "100002", "100003"):
            admit_checkin(store, event.id, employee_id)
        admit_checkin(store, other.id, "100001")

        delete_event(store, event.id)

        assert store.get_event(event.id) is None
        assert store.get_checkins_by_event(event.id) == []
        assert store.get_checkins_with_event(event.id) == []
        assert len(store.get_checkins_by_event(other.id)) == 1

    def test_delete_missing_event(self, store):
        with pytest.raises(EventNotFound):
            delete_event(store, "missing")


@pytest.mark.unit
class TestVerifyAdminPassword:

    @pytest.mark.parametrize("candidate", ["", "anything", "s3cret"])
    def test_unprotected_event_always_valid(self, store, candidate):
        event = create_event(store, make_data())
        assert verify_admin_password(store, event.id, candidate) is True

    def test_protected_event_correct_password(self, store):
        event = create_event(store, make_data(password_protected=True, admin_password="s3cret"))
        assert verify_admin_password(store, event.id, "s3cret") is True

    @pytest.mark.parametrize("candidate", ["", "S3CRET", "s3cret ", "wrong"])
    def test_protected_event_wrong_password(self, store, candidate):
        event = create_event(store, make_data(password_protected=True, admin_password="s3cret"))
        assert verify_admin_password(store, event.id, candidate) is False

    def test_missing_event(self, store):
        with pytest.raises(EventNotFound):
            verify_admin_password(store, "missing", "x")


@pytest.mark.unit
class TestStatsAndSummary:

    def test_event_stats(self, store, event_factory):
        event_factory(name="Protected", password_protected=True, admin_password="pw")
        archived = event_factory(name="Archived")
        store.update_event_archive_status(archived.id, True)
        event_factory(name="Old", date=today() - timedelta(days=30))
        event_factory(name="Last Week", date=today() - timedelta(days=7))

        stats = get_event_stats(store)

        assert stats.total_events == 4
        assert stats.password_protected == 1
        assert stats.archived == 1
        assert stats.recent == 3

    def test_event_stats_empty(self, store):
        stats = get_event_stats(store)
        assert stats.total_events == 0
        assert stats.recent == 0

    def test_summary_without_checkins(self, store, event_factory):
        event = event_factory()
        summary = get_event_summary(store, event.id)

        assert summary.event_id == event.id
        assert summary.total_checkins == 0
        assert summary.last_checkin_at is None

    def test_summary_with_checkins(self, store, event_factory):
        event = event_factory()
        admit_checkin(store, event.id, "100001")
        latest = admit_checkin(store, event.id, "100002")

        summary = get_event_summary(store, event.id)

        assert summary.total_checkins == 2
        assert summary.last_checkin_at == latest.timestamp

    def test_summary_missing_event(self, store):
        with pytest.raises(EventNotFound):
            get_event_summary(store, "missing")
