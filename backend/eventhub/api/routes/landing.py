"""
Landing page: featured events from the curated constant list.
"""

from fastapi import APIRouter

from eventhub.core.constants import FEATURED_EVENTS, LANDING_HEADLINE, LANDING_SUBHEADLINE
from eventhub.schemas.landing import FeaturedEvent, LandingResponse

router = APIRouter(tags=["Landing"])


@router.get("/", response_model=LandingResponse)
async def landing_page():
    return LandingResponse(
        headline=LANDING_HEADLINE,
        subheadline=LANDING_SUBHEADLINE,
        featured_events=[FeaturedEvent(**event) for event in FEATURED_EVENTS],
    )
