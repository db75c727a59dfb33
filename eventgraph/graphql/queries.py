# eventgraph/graphql/queries.py
import strawberry
import typing
from typing import List, Optional, Tuple
from strawberry.types import Info
from .. import crud
from ..core.config import settings
from ..core.exceptions import ValidationError
from .types import CommentType, EventType, UserType


def resolve_page(limit: Optional[int], offset: Optional[int]) -> Tuple[int, int]:
    """
    Turn optional limit/offset arguments into (skip, limit).

    Missing values fall back to the default page. A limit of 0 means "no
    limit", which like any other limit is capped at MAX_PAGE_SIZE.
    """
    if limit is None:
        limit = settings.DEFAULT_PAGE_SIZE
    if offset is None:
        offset = 0
    if limit < 0:
        raise ValidationError("limit must not be negative", field="limit")
    if offset < 0:
        raise ValidationError("offset must not be negative", field="offset")
    if limit == 0:
        limit = settings.MAX_PAGE_SIZE
    return offset, min(limit, settings.MAX_PAGE_SIZE)


@strawberry.type
class Query:
    @strawberry.field
    def me(self, info: Info) -> Optional[UserType]:
        # None for anonymous requests; never an error
        return info.context.user

    @strawberry.field
    def users(
        self,
        info: Info,
        limit: typing.Optional[int] = None,
        offset: typing.Optional[int] = None,
    ) -> List[UserType]:
        skip, limit = resolve_page(limit, offset)
        return crud.user.get_multi(info.context.db, skip=skip, limit=limit)

    @strawberry.field
    def events(
        self,
        info: Info,
        search: typing.Optional[str] = None,
        limit: typing.Optional[int] = None,
        offset: typing.Optional[int] = None,
    ) -> List[EventType]:
        skip, limit = resolve_page(limit, offset)
        return crud.event.get_multi_filtered(
            info.context.db, search=search, skip=skip, limit=limit
        )

    @strawberry.field
    def totalEventsCount(
        self, info: Info, search: typing.Optional[str] = None
    ) -> int:
        return crud.event.count_filtered(info.context.db, search=search)

    @strawberry.field
    def event(self, id: strawberry.ID, info: Info) -> Optional[EventType]:
        # Unknown or malformed ids simply don't match anything
        return crud.event.get(info.context.db, id=str(id))

    @strawberry.field
    def comments(self, eventId: strawberry.ID, info: Info) -> List[CommentType]:
        return crud.comment.get_multi_by_event(info.context.db, event_id=str(eventId))
