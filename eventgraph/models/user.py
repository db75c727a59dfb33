# eventgraph/models/user.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from eventgraph.db.base_class import Base


class User(Base):
    __tablename__ = "users"

    # Monotonic insertion counter; the public id is the opaque string below
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(
        String,
        nullable=False,
        unique=True,
        default=lambda: f"usr_{uuid.uuid4().hex[:12]}",
    )
    name = Column(String, nullable=False)
    # Stored trimmed and lowercased; the unique constraint is what makes
    # concurrent registrations with the same address safe.
    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
