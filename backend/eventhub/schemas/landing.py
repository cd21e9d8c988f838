from pydantic import BaseModel


class FeaturedEvent(BaseModel):
    title: str
    image: str
    slug: str
    location: str
    date: str
    time: str


class LandingResponse(BaseModel):
    headline: str
    subheadline: str
    featured_events: list[FeaturedEvent]
