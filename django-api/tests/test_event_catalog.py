"""Integration tests for the event registration HTTP API.

Run with: pytest tests/test_event_catalog.py -v
"""

from http.cookies import SimpleCookie

from rest_framework.test import APIClient


def register(client: APIClient, event_id=1, email="ann@example.com", name="Ann Lee"):
    return client.post(
        "/api/registrations",
        {"name": name, "email": email, "event_id": event_id},
        format="json",
    )


class TestEventList:
    """Tests for GET/POST /api/events"""

    def test_list_events_returns_sample_events(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        body = response.json()
        assert [e["id"] for e in body] == [1, 2, 3, 4]
        assert body[0]["name"] == "Tech Conference 2026"
        assert body[0]["available_seats"] == 50
        assert body[0]["attendee_count"] == 0
        assert body[0]["is_full"] is False

    def test_add_event_assigns_next_id(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {
                "name": "New",
                "location": "Annex",
                "date": "2026-08-01T18:00:00Z",
                "total_seats": 5,
            },
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["id"] == 5
        assert response.json()["available_seats"] == 5
        assert len(api_client.get("/api/events").json()) == 5

    def test_add_event_rejects_negative_seats(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"name": "New", "location": "Annex", "date": "2026-08-01T18:00:00Z", "total_seats": -1},
            format="json",
        )
        assert response.status_code == 400
        assert "total_seats" in response.json()


class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        response = api_client.get("/api/events/3")
        assert response.status_code == 200
        assert response.json()["location"] == "Business Plaza"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/999")
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-number")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EVENT_ID"


class TestRegistration:
    """Tests for POST /api/registrations"""

    def test_register_takes_a_seat(self, api_client: APIClient):
        response = register(api_client, event_id=2)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["event_id"] == 2
        assert body["registration_date"]
        event = api_client.get("/api/events/2").json()
        assert event["available_seats"] == 29
        assert event["attendee_count"] == 1

    def test_register_duplicate_email_is_refused(self, api_client: APIClient):
        register(api_client, email="ann@example.com")
        response = register(api_client, email="ANN@example.com")
        assert response.status_code == 409
        assert response.json()["code"] == "ALREADY_REGISTERED"
        assert api_client.get("/api/events/1").json()["available_seats"] == 49

    def test_register_unknown_event(self, api_client: APIClient):
        response = register(api_client, event_id=999)
        assert response.status_code == 404
        assert api_client.get("/api/registrations").json() == []

    def test_register_full_event(self, api_client: APIClient):
        api_client.post(
            "/api/events",
            {"name": "Tiny", "location": "Closet", "date": "2026-08-01T18:00:00Z", "total_seats": 1},
            format="json",
        )
        assert register(api_client, event_id=5, email="one@example.com").status_code == 201
        response = register(api_client, event_id=5, email="two@example.com")
        assert response.status_code == 409
        assert response.json()["code"] == "EVENT_FULL"

    def test_register_validates_name_length(self, api_client: APIClient):
        response = register(api_client, name="A")
        assert response.status_code == 400
        assert response.json()["name"] == ["Name must be between 2 and 100 characters"]
        response = register(api_client, name="x" * 101)
        assert response.status_code == 400

    def test_register_validates_email(self, api_client: APIClient):
        response = register(api_client, email="not-an-email")
        assert response.status_code == 400
        assert response.json()["email"] == ["Invalid email address"]

    def test_register_requires_fields(self, api_client: APIClient):
        response = api_client.post("/api/registrations", {}, format="json")
        assert response.status_code == 400
        body = response.json()
        assert body["name"] == ["Name is required"]
        assert body["email"] == ["Email is required"]
        assert body["event_id"] == ["Please select an event"]

    def test_register_rejects_non_positive_event_id(self, api_client: APIClient):
        response = register(api_client, event_id=0)
        assert response.status_code == 400
        assert response.json()["event_id"] == ["Please select a valid event"]


class TestRegistrationLists:
    """Tests for GET /api/registrations and /api/events/{id}/registrations"""

    def test_lists_registrations_in_order(self, api_client: APIClient):
        register(api_client, event_id=1, email="a@example.com")
        register(api_client, event_id=2, email="b@example.com")
        register(api_client, event_id=1, email="c@example.com")
        all_emails = [r["email"] for r in api_client.get("/api/registrations").json()]
        assert all_emails == ["a@example.com", "b@example.com", "c@example.com"]
        event_emails = [
            r["email"] for r in api_client.get("/api/events/1/registrations").json()
        ]
        assert event_emails == ["a@example.com", "c@example.com"]

    def test_event_registrations_unknown_event(self, api_client: APIClient):
        response = api_client.get("/api/events/42/registrations")
        assert response.status_code == 404


class TestSessionIsolation:
    """Each session sees its own catalog and ledger."""

    def test_same_session_keeps_state_across_requests(self, api_client: APIClient):
        register(api_client, event_id=1)
        register(api_client, event_id=1, email="bob@example.com")
        assert api_client.get("/api/events/1").json()["available_seats"] == 48

    def test_sessions_do_not_share_state(self, api_client: APIClient):
        register(api_client, event_id=1)
        first_session = api_client.cookies
        api_client.cookies = SimpleCookie()
        assert api_client.get("/api/events/1").json()["available_seats"] == 50
        assert api_client.get("/api/registrations").json() == []
        api_client.cookies = first_session
        assert api_client.get("/api/events/1").json()["available_seats"] == 49
