"""
Booking service: email sign-ups for events.

Before a booking is written the email is normalized and validated, then the
referenced event is looked up. The lookup and the insert are not atomic; on
databases that enforce foreign keys the `bookings.event_id` constraint closes
that window.
"""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.core.exceptions import ReferentialIntegrityError, ValidationError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_booking_attempt
from eventhub.models.booking import Booking
from eventhub.models.event import Event
from eventhub.schemas.booking import BookingCreate
from eventhub.services.event_service import get_event
from eventhub.services.validation import check_email

logger = get_logger(__name__)


async def event_exists(db: AsyncSession, event_id: int) -> bool:
    result = await db.execute(select(exists().where(Event.id == event_id)))
    return bool(result.scalar())


async def create_booking(db: AsyncSession, booking_data: BookingCreate) -> Booking:
    """
    Create a booking for an existing event.
    Storage errors raised by the existence check propagate unchanged.
    """
    try:
        email = check_email(booking_data.email).raise_for_error()
    except ValidationError:
        record_booking_attempt("invalid")
        raise

    if not await event_exists(db, booking_data.event_id):
        record_booking_attempt("missing_event")
        logger.warning("booking_rejected_missing_event", event_id=booking_data.event_id)
        raise ReferentialIntegrityError(
            "Cannot create booking: referenced event does not exist"
        )

    booking = Booking(event_id=booking_data.event_id, email=email)
    db.add(booking)
    await db.commit()
    await db.refresh(booking)

    record_booking_attempt("success")
    logger.info("booking_created", booking_id=booking.id, event_id=booking.event_id)
    return booking


async def list_event_bookings(db: AsyncSession, event_id: int) -> list[Booking]:
    """Bookings for one event, newest first. Uses the ix_bookings_event_id index."""
    await get_event(db, event_id)

    result = await db.execute(
        select(Booking)
        .where(Booking.event_id == event_id)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
    )
    return list(result.scalars().all())
