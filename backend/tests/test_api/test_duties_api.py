"""
Unit tests for astronaut duty API endpoints.

Tests include:
- Duty assignment and read-after-write
- Supersession of the current duty
- Error mapping for validation, not-found and conflict
"""

import pytest
from fastapi import status


@pytest.fixture
def grace_client(client):
    client.post("/api/people", json={"name": "Grace"})
    return client


def _assign(client, **overrides):
    payload = {
        "name": "Grace",
        "rank": "Major",
        "duty_title": "Commander",
        "duty_start_date": "2024-01-10",
    }
    payload.update(overrides)
    return client.post("/api/duties", json=payload)


class TestAssignDutyEndpoint:
    """Test POST /api/duties."""

    def test_read_after_write(self, grace_client):
        response = _assign(grace_client)

        assert response.status_code == status.HTTP_201_CREATED
        duty_id = response.json()["id"]

        data = grace_client.get("/api/duties/Grace").json()
        assert data["person"]["current_rank"] == "Major"
        assert data["person"]["current_duty_title"] == "Commander"
        assert data["person"]["career_start_date"] == "2024-01-10"
        assert data["person"]["career_end_date"] is None
        assert len(data["astronaut_duties"]) == 1
        duty = data["astronaut_duties"][0]
        assert duty["id"] == duty_id
        assert duty["rank"] == "Major"
        assert duty["duty_title"] == "Commander"
        assert duty["duty_status"] == "ACTIVE"
        assert duty["duty_start_date"] == "2024-01-10"
        assert duty["duty_end_date"] is None

    def test_timestamp_is_truncated(self, grace_client):
        response = _assign(grace_client, duty_start_date="2024-01-10T17:30:00Z")

        assert response.status_code == status.HTTP_201_CREATED
        duty = grace_client.get("/api/duties/Grace").json()["astronaut_duties"][0]
        assert duty["duty_start_date"] == "2024-01-10"

    def test_supersession(self, grace_client):
        _assign(grace_client)

        response = _assign(
            grace_client, rank="Colonel", duty_title="Flight Director",
            duty_start_date="2024-06-01"
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = grace_client.get("/api/duties/Grace").json()
        latest, first = data["astronaut_duties"]
        assert latest["duty_start_date"] == "2024-06-01"
        assert latest["duty_end_date"] is None
        assert first["duty_end_date"] == "2024-05-31"
        assert data["person"]["current_rank"] == "Colonel"
        assert data["person"]["career_start_date"] == "2024-01-10"

    def test_retirement(self, grace_client):
        _assign(grace_client)

        _assign(grace_client, duty_title="RETIRED", duty_start_date="2025-01-01")

        person = grace_client.get("/api/people/Grace").json()
        assert person["current_duty_status"] == "RETIRED"
        assert person["career_end_date"] == "2024-12-31"

    def test_duplicate_request_conflicts(self, grace_client):
        _assign(grace_client)
        first = _assign(grace_client, rank="Colonel", duty_title="Pilot", duty_start_date="2024-07-01")

        second = _assign(grace_client, rank="Colonel", duty_title="Pilot", duty_start_date="2024-07-01")

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_409_CONFLICT
        duties = grace_client.get("/api/duties/Grace").json()["astronaut_duties"]
        assert sum(1 for d in duties if d["duty_end_date"] is None) == 1

    def test_unknown_person(self, client):
        response = _assign(client, name="Unknown Person")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["kind"] == "NotFound"

    def test_blank_rank(self, grace_client):
        response = _assign(grace_client, rank="")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["kind"] == "Validation"

    def test_invalid_date(self, grace_client):
        response = _assign(grace_client, duty_start_date="tomorrow")

        assert response.status_code == 422

    def test_invalid_status(self, grace_client):
        response = _assign(grace_client, duty_status="ON_LEAVE")

        assert response.status_code == 422


class TestDutiesByNameEndpoint:
    """Test GET /api/duties/{name}."""

    def test_unknown_person(self, client):
        response = client.get("/api/duties/Nobody")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_person_without_duties(self, grace_client):
        data = grace_client.get("/api/duties/Grace").json()

        assert data["person"]["name"] == "Grace"
        assert data["astronaut_duties"] == []
