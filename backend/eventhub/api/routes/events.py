"""
Event endpoints: create, update, and read by id or slug.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.db.session import get_db
from eventhub.schemas.event import EventCreate, EventListResponse, EventResponse, EventUpdate
from eventhub.services.event_service import (
    create_event,
    get_event,
    get_event_by_slug,
    list_events,
    update_event,
)

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(event_data: EventCreate, db: AsyncSession = Depends(get_db)):
    """
    Create an event. The slug is derived from the title; date and time are
    normalized to YYYY-MM-DD and HH:MM. Returns 409 if the slug is taken.
    """
    return await create_event(db, event_data)


@router.get("/", response_model=EventListResponse)
async def list_events_endpoint(db: AsyncSession = Depends(get_db)):
    events, total = await list_events(db)
    return EventListResponse(
        events=[EventResponse.model_validate(e) for e in events],
        total=total,
    )


@router.get("/id/{event_id}", response_model=EventResponse)
async def get_event_endpoint(event_id: int, db: AsyncSession = Depends(get_db)):
    return await get_event(db, event_id)


@router.get("/{slug}", response_model=EventResponse)
async def get_event_by_slug_endpoint(slug: str, db: AsyncSession = Depends(get_db)):
    return await get_event_by_slug(db, slug)


@router.patch("/{slug}", response_model=EventResponse)
async def update_event_endpoint(
    slug: str,
    changes: EventUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partially update an event. Changing the title re-derives the slug."""
    return await update_event(db, slug, changes)
