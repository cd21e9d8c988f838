from eventhub.schemas.event import EventCreate, EventUpdate, EventResponse, EventListResponse
from eventhub.schemas.booking import BookingCreate, BookingResponse
from eventhub.schemas.landing import FeaturedEvent, LandingResponse

__all__ = [
    "EventCreate", "EventUpdate", "EventResponse", "EventListResponse",
    "BookingCreate", "BookingResponse",
    "FeaturedEvent", "LandingResponse",
]
