# eventgraph/graphql/router.py
import logging
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext, GraphQLRouter

from .. import crud
from ..core import security
from ..db.session import get_db
from ..models.user import User
from .dataloaders import create_dataloaders
from .schema import schema

logger = logging.getLogger(__name__)


class CustomContext(BaseContext):
    def __init__(self, db: Session, user: Optional[User] = None):
        super().__init__()
        self.db = db
        self.user = user
        self.loaders = create_dataloaders(db)


def get_user_from_authorization(
    db: Session, auth_header: Optional[str]
) -> Optional[User]:
    """
    Resolve an `Authorization` header value to a User.

    Only `Bearer <token>` is accepted. Any other shape, a token that fails
    verification, or a token for a user that no longer exists yields None;
    the request then runs anonymously instead of failing.
    """
    if not auth_header:
        return None

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.debug("Ignoring Authorization header without a Bearer token")
        return None

    user_id = security.decode_access_token(parts[1])
    if user_id is None:
        return None

    user = crud.user.get(db, id=user_id)
    if user is None:
        logger.debug(f"Token subject {user_id} does not match any user")
    return user


async def get_context(
    request: Request, db: Session = Depends(get_db)
) -> CustomContext:
    user = get_user_from_authorization(db, request.headers.get("Authorization"))
    return CustomContext(db=db, user=user)


graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
)
