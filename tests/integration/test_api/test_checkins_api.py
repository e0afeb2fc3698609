"""Integration tests for check-in submission and listing."""
import pytest

from event_checkin.core.config import settings
from event_checkin.core.utils import today


@pytest.fixture
def event(client):
    response = client.post("/api/events", json={
        "name": "Town Hall",
        "date": today(settings.tz).isoformat(),
    })
    assert response.status_code == 200
    return response.json()


def submit(client, event_id, employee_id):
    return client.post("/api/checkins", json={"eventId": event_id, "employeeId": employee_id})


@pytest.mark.integration
class TestCheckinSubmission:

    def test_checkin_success(self, client, event):
        response = submit(client, event["id"], "123456")

        assert response.status_code == 200
        data = response.json()
        assert data["eventId"] == event["id"]
        assert data["employeeId"] == "123456"
        assert "id" in data
        assert "timestamp" in data

    def test_duplicate_checkin_conflict(self, client, event):
        assert submit(client, event["id"], "123456").status_code == 200

        response = submit(client, event["id"], "123456")

        assert response.status_code == 409
        assert response.json()["detail"] == "You've already checked in for this event."

    def test_unknown_event(self, client):
        response = submit(client, "does-not-exist", "123456")

        assert response.status_code == 404
        assert response.json()["detail"] == "Event not found"

    def test_unknown_event_with_long_id(self, client):
        response = submit(client, "x" * 80, "123456")

        assert response.status_code == 404
        assert response.json()["detail"] == "Event not found"

    def test_archived_event_forbidden(self, client, event):
        client.patch(f"/api/events/{event['id']}/archive", json={"archived": True})

        response = submit(client, event["id"], "654321")

        assert response.status_code == 403
        assert response.json()["detail"] == "Check-ins are closed for this event"

    def test_archived_event_forbidden_for_returning_attendee(self, client, event):
        submit(client, event["id"], "123456")
        client.patch(f"/api/events/{event['id']}/archive", json={"archived": True})

        assert submit(client, event["id"], "123456").status_code == 403

    @pytest.mark.parametrize("employee_id", ["12345", "1234567", "abcdef", "000000"])
    def test_invalid_employee_id(self, client, event, employee_id):
        response = submit(client, event["id"], employee_id)

        assert response.status_code == 400
        assert client.get(f"/api/events/{event['id']}/checkins").json() == []

    def test_missing_fields(self, client):
        assert client.post("/api/checkins", json={}).status_code == 400
        assert client.post("/api/checkins", json={"eventId": "x"}).status_code == 400


@pytest.mark.integration
class TestCheckinListing:

    def test_list_checkins_with_event(self, client, event):
        for employee_id in ("100001", "100002", "100003"):
            submit(client, event["id"], employee_id)

        response = client.get(f"/api/events/{event['id']}/checkins")

        assert response.status_code == 200
        checkins = response.json()
        assert {c["employeeId"] for c in checkins} == {"100001", "100002", "100003"}
        assert all(c["event"]["id"] == event["id"] for c in checkins)
        assert all(c["event"]["name"] == "Town Hall" for c in checkins)
        assert all("adminPassword" not in c["event"] for c in checkins)
        timestamps = [c["timestamp"] for c in checkins]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_list_checkins_unknown_event(self, client):
        response = client.get("/api/events/missing/checkins")

        assert response.status_code == 200
        assert response.json() == []

    def test_summary(self, client, event):
        empty = client.get(f"/api/events/{event['id']}/summary").json()
        assert empty == {"eventId": event["id"], "totalCheckins": 0, "lastCheckinAt": None}

        submit(client, event["id"], "100001")
        latest = submit(client, event["id"], "100002").json()

        summary = client.get(f"/api/events/{event['id']}/summary").json()
        assert summary["totalCheckins"] == 2
        assert summary["lastCheckinAt"] == latest["timestamp"]

    def test_summary_unknown_event(self, client):
        assert client.get("/api/events/missing/summary").status_code == 404
