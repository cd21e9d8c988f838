"""
Tests for event endpoints and the event write path.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_event(client: AsyncClient, event_payload):
    """Slug is derived and date/time are normalized on create."""
    event_payload.update(date="May 13, 2026", time="9:00", venue="  Long Beach CC  ")
    response = await client.post("/api/v1/events/", json=event_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["slug"] == "pycon-us-2026"
    assert data["date"] == "2026-05-13"
    assert data["time"] == "09:00"
    assert data["venue"] == "Long Beach CC"
    assert data["agenda"] == event_payload["agenda"]
    assert data["created_at"] is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["agenda", "tags"])
async def test_create_event_empty_list(client: AsyncClient, event_payload, field):
    """Empty agenda or tags returns 422 naming the field."""
    event_payload[field] = []
    response = await client.post("/api/v1/events/", json=event_payload)

    assert response.status_code == 422
    assert response.json()["field"] == field


@pytest.mark.asyncio
async def test_create_event_blank_required_field(client: AsyncClient, event_payload):
    event_payload["organizer"] = "   "
    response = await client.post("/api/v1/events/", json=event_payload)

    assert response.status_code == 422
    assert response.json() == {
        "detail": 'Field "organizer" is required and cannot be empty',
        "field": "organizer",
    }


@pytest.mark.asyncio
async def test_create_event_invalid_date(client: AsyncClient, event_payload):
    event_payload["date"] = "sometime next spring"
    response = await client.post("/api/v1/events/", json=event_payload)

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid event date provided"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "time, detail",
    [
        ("24:00", "Time must be a valid 24-hour time"),
        ("10:60", "Time must be a valid 24-hour time"),
        ("9am", "Time must be in HH:MM format"),
    ],
)
async def test_create_event_invalid_time(client: AsyncClient, event_payload, time, detail):
    event_payload["time"] = time
    response = await client.post("/api/v1/events/", json=event_payload)

    assert response.status_code == 422
    assert response.json()["detail"] == detail


@pytest.mark.asyncio
async def test_create_event_missing_field(client: AsyncClient, event_payload):
    """Missing keys are rejected by the request schema."""
    del event_payload["venue"]
    response = await client.post("/api/v1/events/", json=event_payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_duplicate_slug_conflict(client: AsyncClient, event_payload):
    """Titles that normalize to the same slug cannot both be stored."""
    first = await client.post("/api/v1/events/", json=event_payload)
    assert first.status_code == 201

    event_payload["title"] = "  PyCon   US 2026!! "
    second = await client.post("/api/v1/events/", json=event_payload)
    assert second.status_code == 409

    listing = await client.get("/api/v1/events/")
    assert listing.json()["total"] == 1


@pytest.mark.asyncio
async def test_list_events_sorted_by_date(client: AsyncClient, event_payload):
    for title, date, time in [
        ("Late Meetup", "2026-09-01", "18:00"),
        ("Early Hackathon", "2026-02-01", "10:00"),
        ("Early Breakfast", "2026-02-01", "8:00"),
    ]:
        event_payload.update(title=title, date=date, time=time)
        response = await client.post("/api/v1/events/", json=event_payload)
        assert response.status_code == 201

    response = await client.get("/api/v1/events/")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [e["slug"] for e in data["events"]] == [
        "early-breakfast",
        "early-hackathon",
        "late-meetup",
    ]


@pytest.mark.asyncio
async def test_get_event_by_id_and_slug(client: AsyncClient, test_event):
    by_id = await client.get(f"/api/v1/events/id/{test_event.id}")
    by_slug = await client.get(f"/api/v1/events/{test_event.slug}")

    assert by_id.status_code == 200
    assert by_slug.status_code == 200
    assert by_id.json() == by_slug.json()
    assert by_slug.json()["title"] == "PyCon US 2026"


@pytest.mark.asyncio
async def test_get_event_not_found(client: AsyncClient):
    assert (await client.get("/api/v1/events/id/99999")).status_code == 404
    assert (await client.get("/api/v1/events/no-such-event")).status_code == 404


@pytest.mark.asyncio
async def test_update_keeps_slug_when_title_unchanged(client: AsyncClient, test_event):
    response = await client.patch(
        f"/api/v1/events/{test_event.slug}",
        json={"venue": "Hall B", "time": "7:30", "title": "PyCon US 2026"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["slug"] == "pycon-us-2026"
    assert data["venue"] == "Hall B"
    assert data["time"] == "07:30"


@pytest.mark.asyncio
async def test_update_title_regenerates_slug(client: AsyncClient, test_event):
    response = await client.patch(
        f"/api/v1/events/{test_event.slug}",
        json={"title": "PyCon US 2026: Sprints"},
    )

    assert response.status_code == 200
    assert response.json()["slug"] == "pycon-us-2026-sprints"
    assert (await client.get("/api/v1/events/pycon-us-2026")).status_code == 404
    assert (await client.get("/api/v1/events/pycon-us-2026-sprints")).status_code == 200


@pytest.mark.asyncio
async def test_update_invalid_time_leaves_event_unchanged(client: AsyncClient, test_event):
    response = await client.patch(
        f"/api/v1/events/{test_event.slug}",
        json={"time": "25:00"},
    )
    assert response.status_code == 422

    current = await client.get(f"/api/v1/events/{test_event.slug}")
    assert current.json()["time"] == "09:00"


@pytest.mark.asyncio
async def test_update_title_to_existing_slug_conflicts(client: AsyncClient, event_payload, test_event):
    event_payload["title"] = "DjangoCon Europe"
    created = await client.post("/api/v1/events/", json=event_payload)
    assert created.status_code == 201

    response = await client.patch(
        "/api/v1/events/djangocon-europe",
        json={"title": "PyCon US 2026"},
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_unknown_event(client: AsyncClient):
    response = await client.patch("/api/v1/events/ghost", json={"venue": "Nowhere"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_event_overlong_mode(client: AsyncClient, event_payload):
    """Values longer than their column are rejected before reaching the database."""
    event_payload["mode"] = "Hybrid (in person in Lisbon and live-streamed on YouTube)"
    response = await client.post("/api/v1/events/", json=event_payload)

    assert response.status_code == 422
    assert response.json() == {
        "detail": 'Field "mode" must be at most 50 characters',
        "field": "mode",
    }


@pytest.mark.asyncio
async def test_create_event_date_out_of_range(client: AsyncClient, event_payload):
    event_payload["date"] = "9999-12-31T23:00:00-05:00"
    response = await client.post("/api/v1/events/", json=event_payload)

    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid event date provided"
