# eventgraph/crud/crud_comment.py
import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from sqlalchemy.orm import Session

from .base import CRUDBase
from eventgraph.models.comment import Comment
from eventgraph.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)


class CRUDComment(CRUDBase[Comment, CommentCreate]):
    def create_for_event(
        self, db: Session, *, obj_in: CommentCreate, author_id: str, event_id: str
    ) -> Comment:
        db_obj = self.model(text=obj_in.text, author_id=author_id, event_id=event_id)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"User {author_id} commented on event {event_id}")
        return db_obj

    def _group_by(
        self, db: Session, column, keys: Sequence[str]
    ) -> Dict[str, List[Comment]]:
        comments = (
            db.query(self.model)
            .filter(column.in_(set(keys)))
            .order_by(self.model.seq.asc())
            .all()
        )
        grouped: Dict[str, List[Comment]] = defaultdict(list)
        for comment in comments:
            grouped[getattr(comment, column.key)].append(comment)
        return grouped

    def get_multi_by_event_ids(
        self, db: Session, *, event_ids: Sequence[str]
    ) -> Dict[str, List[Comment]]:
        return self._group_by(db, self.model.event_id, event_ids)

    def get_multi_by_author_ids(
        self, db: Session, *, author_ids: Sequence[str]
    ) -> Dict[str, List[Comment]]:
        return self._group_by(db, self.model.author_id, author_ids)

    def get_multi_by_event(self, db: Session, *, event_id: str) -> List[Comment]:
        return (
            db.query(self.model)
            .filter(self.model.event_id == event_id)
            .order_by(self.model.seq.asc())
            .all()
        )

    def get_multi_by_author(self, db: Session, *, author_id: str) -> List[Comment]:
        return (
            db.query(self.model)
            .filter(self.model.author_id == author_id)
            .order_by(self.model.seq.asc())
            .all()
        )


comment = CRUDComment(Comment)
