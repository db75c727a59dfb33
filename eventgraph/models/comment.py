# eventgraph/models/comment.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from eventgraph.db.base_class import Base


class Comment(Base):
    __tablename__ = "comments"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(
        String,
        nullable=False,
        unique=True,
        default=lambda: f"cmt_{uuid.uuid4().hex[:12]}",
    )
    text = Column(String, nullable=False)
    # Always assigned by the server, never taken from the client
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    author_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    event_id = Column(String, ForeignKey("events.id"), nullable=False, index=True)
