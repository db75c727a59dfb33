# eventgraph/crud/crud_event.py
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .base import CRUDBase
from eventgraph.models.event import Event
from eventgraph.models.event_attendee import EventAttendee
from eventgraph.models.user import User
from eventgraph.schemas.event import EventCreate

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def sort_events(events: List[Event]) -> List[Event]:
    """Newest date first; events sharing a date keep insertion order."""
    by_insertion = sorted(events, key=lambda e: e.seq)
    return sorted(by_insertion, key=lambda e: e.date, reverse=True)


class CRUDEvent(CRUDBase[Event, EventCreate]):
    def create_with_creator(
        self, db: Session, *, obj_in: EventCreate, creator_id: str
    ) -> Event:
        db_obj = self.create(db, obj_in=obj_in, created_by_id=creator_id)
        logger.info(f"User {creator_id} created event {db_obj.id}")
        return db_obj

    def _filtered_query(self, db: Session, search: Optional[str]):
        query = db.query(self.model)
        # Blank search text means no filter at all
        if search and search.strip():
            pattern = f"%{_escape_like(search)}%"
            query = query.filter(self.model.title.ilike(pattern, escape="\\"))
        return query

    def get_multi_filtered(
        self,
        db: Session,
        *,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> List[Event]:
        """
        Case-insensitive title search, ordered by date (newest first) with
        ties in insertion order. An offset past the end gives an empty page.
        """
        return (
            self._filtered_query(db, search)
            .order_by(self.model.date.desc(), self.model.seq.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count_filtered(self, db: Session, *, search: Optional[str] = None) -> int:
        return self._filtered_query(db, search).count()

    # --- Attendees ---
    def is_attendee(self, db: Session, *, event_id: str, user_id: str) -> bool:
        return (
            db.query(EventAttendee)
            .filter(
                EventAttendee.event_id == event_id,
                EventAttendee.user_id == user_id,
            )
            .first()
            is not None
        )

    def add_attendee(self, db: Session, *, event: Event, user_id: str) -> Event:
        """
        Add a user to an event's attendee set. Joining twice is a no-op.

        The unique (event_id, user_id) constraint makes the insert itself the
        uniqueness check, so a concurrent duplicate join fails with
        IntegrityError and is treated as already joined.
        """
        if self.is_attendee(db, event_id=event.id, user_id=user_id):
            return event

        db.add(EventAttendee(event_id=event.id, user_id=user_id))
        try:
            db.commit()
            logger.info(f"User {user_id} joined event {event.id}")
        except IntegrityError:
            db.rollback()
            logger.info(f"User {user_id} already attending event {event.id}")
        db.refresh(event)
        return event

    def get_attendee_ids(self, db: Session, *, event_id: str) -> List[str]:
        rows = (
            db.query(EventAttendee.user_id)
            .filter(EventAttendee.event_id == event_id)
            .order_by(EventAttendee.seq.asc())
            .all()
        )
        return [user_id for (user_id,) in rows]

    def get_attendees_by_event_ids(
        self, db: Session, *, event_ids: Sequence[str]
    ) -> Dict[str, List[User]]:
        """Attendees of each event as User records, in join order."""
        rows = (
            db.query(EventAttendee.event_id, User)
            .join(User, User.id == EventAttendee.user_id)
            .filter(EventAttendee.event_id.in_(set(event_ids)))
            .order_by(EventAttendee.seq.asc())
            .all()
        )
        attendees: Dict[str, List[User]] = defaultdict(list)
        for event_id, attendee in rows:
            attendees[event_id].append(attendee)
        return attendees

    # --- Events by user ---
    def get_multi_by_user_ids(
        self, db: Session, *, user_ids: Sequence[str]
    ) -> Dict[str, List[Event]]:
        """
        For each user, the union of events they created and events they
        attend, without duplicates.
        """
        user_ids = set(user_ids)
        events: Dict[str, Dict[str, Event]] = defaultdict(dict)

        created = (
            db.query(self.model).filter(self.model.created_by_id.in_(user_ids)).all()
        )
        for event in created:
            events[event.created_by_id][event.id] = event

        attending = (
            db.query(EventAttendee.user_id, self.model)
            .join(self.model, self.model.id == EventAttendee.event_id)
            .filter(EventAttendee.user_id.in_(user_ids))
            .all()
        )
        for user_id, event in attending:
            events[user_id][event.id] = event

        return {
            user_id: sort_events(list(by_id.values()))
            for user_id, by_id in events.items()
        }

    def get_multi_by_user(self, db: Session, *, user_id: str) -> List[Event]:
        return self.get_multi_by_user_ids(db, user_ids=[user_id]).get(user_id, [])


event = CRUDEvent(Event)
