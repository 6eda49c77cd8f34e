"""Integration tests for the calendar HTTP endpoints."""

from typing import Any

from fastapi.testclient import TestClient

from tripcal.main import app

client = TestClient(app)


def test_root() -> None:
    """Test root endpoint."""
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Trip Calendar API", "version": "0.1.0"}


def test_health() -> None:
    """Test health endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_calendar_days(sample_document: dict[str, Any]) -> None:
    """Test projection over HTTP with camelCase output."""
    response = client.post("/calendar/days", json=sample_document, params={"today": "2026-02-02"})

    assert response.status_code == 200
    data = response.json()
    assert data["tripName"] == "Winter in Japan"
    assert data["dateRange"] == "Jan 30, 2026 – Feb 6, 2026"
    assert len(data["digest"]) == 64

    days = {d["dateKey"]: d for d in data["days"]}
    assert list(days) == sorted(days)
    assert days["2026-01-30"]["dateDisplay"] == "Fri, Jan 30, 2026"
    assert days["2026-01-30"]["travel"][0]["isDeparture"] is True
    assert days["2026-01-30"]["travel"][0]["backupPlan"]["options"][0]["id"] == "bp-f-out-1"
    assert days["2026-01-31"]["isInFlight"] is True
    assert days["2026-01-31"]["shelter"] == {}
    assert days["2026-02-01"]["shelter"]["name"] == "Hotel Gracery"
    assert days["2026-02-01"]["shelter"]["checkIn"] == "15:00"
    assert days["2026-02-02"]["isToday"] is True
    assert days["2026-02-03"]["isToday"] is False
    assert days["2026-02-04"]["metadata"]["unbootedCount"] == 2
    assert days["2026-02-04"]["metadata"]["hasUnbooked"] is True


def test_calendar_days_without_today(sample_document: dict[str, Any]) -> None:
    """Test that no day is flagged when today is not supplied."""
    response = client.post("/calendar/days", json=sample_document)

    assert response.status_code == 200
    assert not any(d["isToday"] for d in response.json()["days"])


def test_calendar_days_missing_trips() -> None:
    """Test that a document without trips is rejected."""
    response = client.post("/calendar/days", json={"tripName": "Nothing"})

    assert response.status_code == 422


def test_calendar_days_empty_document() -> None:
    """Test the empty calendar."""
    response = client.post("/calendar/days", json={"trips": []})

    assert response.status_code == 200
    data = response.json()
    assert data["tripName"] == "Travel Itinerary"
    assert data["dateRange"] == ""
    assert data["days"] == []


def test_calendar_budget(sample_document: dict[str, Any]) -> None:
    """Test budget roll-up over HTTP with overlays."""
    response = client.post(
        "/calendar/budget",
        json={
            "document": sample_document,
            "userActivities": {
                "2026-02-03": [{"id": "manual-1", "name": "Karaoke", "estimatedCost": 100, "currency": "USD"}]
            },
            "deletedActivities": {"2026-02-02": ["explore-1-Skytree"]},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["currency"] == "USD"
    assert data["budget"] == 5000
    assert data["costByCurrency"] == {"USD": 1300, "JPY": 65000}
    assert data["totalUnbooked"] == 2
    assert data["health"] == "on_track"
    assert abs(data["total"] - (1300 + 65000 * 0.0067)) < 1e-6


def test_calendar_budget_requires_document() -> None:
    """Test request validation."""
    response = client.post("/calendar/budget", json={"userActivities": {}})

    assert response.status_code == 422
