# eventgraph/models/event.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from eventgraph.db.base_class import Base


class Event(Base):
    __tablename__ = "events"

    # Insertion order; breaks ties between events that share a date
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(
        String,
        nullable=False,
        unique=True,
        default=lambda: f"evt_{uuid.uuid4().hex[:12]}",
    )
    title = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    created_by_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
