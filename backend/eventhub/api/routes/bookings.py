"""
Booking endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.db.session import get_db
from eventhub.schemas.booking import BookingCreate, BookingResponse
from eventhub.services.booking_service import create_booking, list_event_bookings

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(booking_data: BookingCreate, db: AsyncSession = Depends(get_db)):
    """
    Sign up for an event by email.
    Returns 422 if the email is malformed or the event does not exist.
    """
    return await create_booking(db, booking_data)


@router.get("/", response_model=list[BookingResponse])
async def list_bookings_endpoint(
    event_id: int = Query(..., description="Event to list bookings for"),
    db: AsyncSession = Depends(get_db),
):
    return await list_event_bookings(db, event_id)
