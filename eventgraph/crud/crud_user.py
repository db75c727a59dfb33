# eventgraph/crud/crud_user.py
"""Credential store: user records, registration and password checks."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .base import CRUDBase
from eventgraph.core import security
from eventgraph.core.exceptions import ConflictError
from eventgraph.models.user import User
from eventgraph.schemas.user import UserCreate, normalize_email

logger = logging.getLogger(__name__)


class CRUDUser(CRUDBase[User, UserCreate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return (
            db.query(self.model)
            .filter(self.model.email == normalize_email(email))
            .first()
        )

    def register(self, db: Session, *, obj_in: UserCreate) -> User:
        """
        Persist a new user with a bcrypt hash of their password.

        Raises ConflictError if the (normalized) email is taken. The pre-check
        gives a clean error in the common case; the unique constraint on
        users.email catches the race between two simultaneous registrations.
        """
        if self.get_by_email(db, email=obj_in.email):
            raise ConflictError("Email already registered")

        db_obj = self.model(
            name=obj_in.name,
            email=obj_in.email,
            password_hash=security.hash_password(obj_in.password),
        )
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info(f"Concurrent registration rejected for {obj_in.email}")
            raise ConflictError("Email already registered")
        db.refresh(db_obj)

        logger.info(f"Registered user {db_obj.id}")
        return db_obj

    def verify_password(self, user: User, candidate: str) -> bool:
        return security.verify_password(candidate, user.password_hash)


user = CRUDUser(User)
