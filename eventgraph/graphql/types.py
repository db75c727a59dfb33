# eventgraph/graphql/types.py
import strawberry
import typing
from datetime import datetime, timezone
from strawberry.types import Info
from ..models.comment import Comment as CommentModel
from ..models.event import Event as EventModel
from ..models.user import User as UserModel


def to_iso(value: datetime) -> str:
    """Serialize an instant as ISO-8601 UTC, e.g. 2025-01-10T00:00:00.000Z"""
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


# password_hash is never exposed on this type
@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: str
    email: str

    @strawberry.field
    async def events(self, info: Info, root: UserModel) -> typing.List["EventType"]:
        """Events the user created or joined."""
        return await info.context.loaders["user_events_loader"].load(root.id)

    @strawberry.field
    async def comments(
        self, info: Info, root: UserModel
    ) -> typing.List["CommentType"]:
        return await info.context.loaders["author_comments_loader"].load(root.id)


@strawberry.type(name="Event")
class EventType:
    id: strawberry.ID
    title: str
    description: typing.Optional[str]

    @strawberry.field
    def date(self, root: EventModel) -> str:
        return to_iso(root.date)

    @strawberry.field
    async def createdBy(self, info: Info, root: EventModel) -> UserType:
        return await info.context.loaders["user_loader"].load(root.created_by_id)

    @strawberry.field
    async def attendees(self, info: Info, root: EventModel) -> typing.List[UserType]:
        return await info.context.loaders["attendees_loader"].load(root.id)

    @strawberry.field
    async def comments(
        self, info: Info, root: EventModel
    ) -> typing.List["CommentType"]:
        return await info.context.loaders["event_comments_loader"].load(root.id)


@strawberry.type(name="Comment")
class CommentType:
    id: strawberry.ID
    text: str

    @strawberry.field
    def createdAt(self, root: CommentModel) -> str:
        return to_iso(root.created_at)

    @strawberry.field
    async def author(self, info: Info, root: CommentModel) -> UserType:
        return await info.context.loaders["user_loader"].load(root.author_id)

    @strawberry.field
    async def event(self, info: Info, root: CommentModel) -> EventType:
        return await info.context.loaders["event_loader"].load(root.event_id)


@strawberry.type
class AuthPayload:
    token: str
    user: UserType
