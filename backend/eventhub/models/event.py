"""
Event model: a conference, hackathon or meetup listing.

Key design decisions:
- `slug` is derived from the title by the write path and carries a unique index
- `date` and `time` are stored as normalized strings (YYYY-MM-DD, HH:MM) so
  they sort lexically and round-trip without timezone surprises
- `agenda` and `tags` are ordered string lists stored as JSON
"""

from sqlalchemy import JSON, Column, Index, Integer, String, Text

from eventhub.db.base import Base, TimestampMixin


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    overview = Column(Text, nullable=False)
    image = Column(String(512), nullable=False)
    venue = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    date = Column(String(10), nullable=False)
    time = Column(String(5), nullable=False)
    mode = Column(String(50), nullable=False)
    audience = Column(String(255), nullable=False)
    agenda = Column(JSON, nullable=False)
    organizer = Column(String(255), nullable=False)
    tags = Column(JSON, nullable=False)

    __table_args__ = (
        Index("ix_events_slug", "slug", unique=True),
        # Listing is ordered by date
        Index("ix_events_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, slug={self.slug}, date={self.date})>"
