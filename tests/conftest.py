"""Shared pytest fixtures for all test suites."""

from typing import Any

import pytest


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Two-trip itinerary: transpacific flight, Tokyo stay, ski weekend, flight home."""
    return {
        "tripName": "Winter in Japan",
        "budget": {"total": 5000, "currency": "USD"},
        "travelers": [{"name": "Sam"}],
        "trips": [
            {
                "name": "Tokyo",
                "region": "Kanto",
                "segments": [
                    {
                        "id": "f-out",
                        "type": "flight",
                        "date": "2026-01-30",
                        "dateEnd": "2026-02-01",
                        "route": "SFO → NRT",
                        "details": "JL1 San Francisco to Tokyo",
                        "status": "BOOKED",
                        "timeStart": "11:00",
                        "timeEnd": "16:00",
                        "tzFrom": "America/Los_Angeles",
                        "location": "SFO",
                        "estimatedCost": 1200,
                        "currency": "USD",
                    },
                    {
                        "id": "stay-tokyo",
                        "type": "stay",
                        "date": "2026-02-01",
                        "dateEnd": "2026-02-04",
                        "location": "Tokyo Shinjuku",
                        "tz": "Asia/Tokyo",
                        "timeStart": "15:00",
                        "shelter": {
                            "name": "Hotel Gracery",
                            "address": "1-19-1 Kabukicho",
                            "type": "hotel",
                        },
                        "estimatedCost": 60000,
                        "currency": "JPY",
                        "status": "BOOKED",
                    },
                    {
                        "id": "dinner-1",
                        "type": "meal",
                        "date": "2026-02-01",
                        "details": "Ramen dinner",
                        "location": "Tokyo Shinjuku",
                        "timeStart": "19:00",
                    },
                    {
                        "id": "explore-1",
                        "type": "explore",
                        "date": "2026-02-02",
                        "location": "Tokyo Asakusa",
                        "activities": [
                            {"name": "Senso-ji", "timeStart": "09:00", "category": "temple"},
                            {
                                "name": "Skytree",
                                "timeStart": "14:00",
                                "timeEnd": "16:00",
                                "estimatedCost": 3100,
                                "currency": "JPY",
                            },
                        ],
                    },
                ],
            },
            {
                "name": "Myoko ski weekend",
                "segments": [
                    {
                        "id": "bus-1",
                        "type": "bus",
                        "date": "2026-02-04",
                        "route": "Tokyo → Myoko",
                        "details": "Highway bus",
                        "status": "TO_BOOK",
                        "estimatedCost": 5000,
                        "currency": "JPY",
                    },
                    {
                        "id": "stay-myoko",
                        "type": "check-in",
                        "date": "2026-02-04",
                        "dateEnd": "2026-02-06",
                        "location": "Myoko Kogen Lodge",
                        "details": "Lodge — 2457 Taguchi, Myoko",
                        "note": "Onsen on site",
                        "status": "TO_BOOK",
                    },
                ],
            },
        ],
    }
