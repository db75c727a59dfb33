# eventgraph/models/event_attendee.py
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from eventgraph.db.base_class import Base


class EventAttendee(Base):
    """
    One row per (event, user) pair in an event's attendee set.

    The unique constraint on the pair keeps the set free of duplicates at the
    storage layer, so two concurrent joins by the same user can't both land.
    `seq` records join order.
    """

    __tablename__ = "event_attendees"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_event_attendees_event_user"),
    )

    seq = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(String, ForeignKey("events.id"), nullable=False)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    joined_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
