"""
Event service handling create/update/read operations.

Writes go through `prepare_event` first; the unique index on `slug` is the
final guard against two titles that normalize to the same slug.
"""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.core.exceptions import DuplicateSlugError, EventHubError, NotFoundError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_event_write
from eventhub.models.event import Event
from eventhub.schemas.event import EventCreate, EventUpdate
from eventhub.services.validation import REQUIRED_LIST_FIELDS, REQUIRED_STRING_FIELDS, prepare_event

logger = get_logger(__name__)

EVENT_FIELDS = REQUIRED_STRING_FIELDS + REQUIRED_LIST_FIELDS


async def _commit_event(db: AsyncSession, event: Event, operation: str) -> Event:
    # Read before commit: a rollback expires the instance
    slug = event.slug
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        record_event_write(operation, "conflict")
        logger.warning("event_slug_conflict", slug=slug, operation=operation)
        raise DuplicateSlugError(slug)

    await db.refresh(event)
    record_event_write(operation, "success")
    return event


async def create_event(db: AsyncSession, event_data: EventCreate) -> Event:
    """Validate, normalize and insert a new event."""
    try:
        values = prepare_event(event_data.model_dump(), title_changed=True)
    except EventHubError:
        record_event_write("create", "invalid")
        raise

    event = Event(**values)
    db.add(event)
    event = await _commit_event(db, event, "create")

    logger.info("event_created", event_id=event.id, slug=event.slug, date=event.date)
    return event


async def update_event(db: AsyncSession, slug: str, changes: EventUpdate) -> Event:
    """
    Apply a partial update and re-run the full validation chain.
    The slug is only re-derived when the title actually changes.
    """
    event = await get_event_by_slug(db, slug)

    merged = {field: getattr(event, field) for field in EVENT_FIELDS}
    merged.update(changes.model_dump(exclude_unset=True))
    new_title = merged["title"]
    title_changed = not isinstance(new_title, str) or new_title.strip() != event.title

    try:
        values = prepare_event(merged, title_changed=title_changed)
    except EventHubError:
        record_event_write("update", "invalid")
        raise

    for field, value in values.items():
        setattr(event, field, value)
    event = await _commit_event(db, event, "update")

    logger.info(
        "event_updated",
        event_id=event.id,
        slug=event.slug,
        slug_regenerated=title_changed,
    )
    return event


async def get_event(db: AsyncSession, event_id: int) -> Event:
    """Get a single event by ID."""
    event = await db.get(Event, event_id)
    if not event:
        raise NotFoundError(f"Event {event_id} not found")
    return event


async def get_event_by_slug(db: AsyncSession, slug: str) -> Event:
    result = await db.execute(select(Event).where(Event.slug == slug))
    event = result.scalar_one_or_none()
    if not event:
        raise NotFoundError(f'Event "{slug}" not found')
    return event


async def list_events(db: AsyncSession) -> tuple[list[Event], int]:
    """All events, soonest first. Uses the ix_events_date index."""
    total = (await db.execute(select(func.count()).select_from(Event))).scalar()
    result = await db.execute(select(Event).order_by(Event.date.asc(), Event.time.asc(), Event.id.asc()))
    return list(result.scalars().all()), total
