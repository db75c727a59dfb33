# eventgraph/graphql/mutations.py
import logging
import strawberry
from typing import Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError as PydanticValidationError
from strawberry.types import Info
from .. import crud
from ..core import security
from ..core.exceptions import AuthError, NotFoundError, ValidationError
from ..models.user import User
from ..schemas.comment import CommentCreate
from ..schemas.event import EventCreate
from ..schemas.user import UserCreate, UserLogin
from .types import AuthPayload, CommentType, EventType

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


# --- All Input types defined at the top ---
@strawberry.input
class CreateUserInput:
    name: str
    email: str
    password: str
    confirmPassword: str


@strawberry.input
class CreateEventInput:
    title: str
    date: str  # ISO-8601 date or datetime
    description: Optional[str] = None


@strawberry.input
class CreateCommentInput:
    eventId: strawberry.ID
    text: str


def build_schema(schema: Type[SchemaType], **data) -> SchemaType:
    """Validate resolver input, reporting the first problem as a ValidationError."""
    try:
        return schema(**data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        message = error["msg"].removeprefix("Value error, ")
        field = str(error["loc"][0]) if error["loc"] else None
        raise ValidationError(message, field=field)


def require_user(info: Info) -> User:
    user = info.context.user
    if user is None:
        raise AuthError("Not authenticated")
    return user


# --- Main Mutation Class ---
@strawberry.type
class Mutation:
    @strawberry.mutation
    def registerUser(self, input: CreateUserInput, info: Info) -> AuthPayload:
        user_in = build_schema(
            UserCreate,
            name=input.name,
            email=input.email,
            password=input.password,
            confirm_password=input.confirmPassword,
        )
        user = crud.user.register(info.context.db, obj_in=user_in)
        return AuthPayload(token=security.create_access_token(user.id), user=user)

    @strawberry.mutation
    def login(self, email: str, password: str, info: Info) -> AuthPayload:
        credentials = build_schema(UserLogin, email=email, password=password)
        user = crud.user.get_by_email(info.context.db, email=credentials.email)
        if not user:
            raise NotFoundError("User not found")
        if not crud.user.verify_password(user, credentials.password):
            logger.warning(f"Failed login for user {user.id}")
            raise AuthError("Invalid password")

        logger.info(f"User {user.id} logged in")
        return AuthPayload(token=security.create_access_token(user.id), user=user)

    @strawberry.mutation
    def createEvent(self, input: CreateEventInput, info: Info) -> EventType:
        user = require_user(info)
        event_in = build_schema(
            EventCreate,
            title=input.title,
            description=input.description,
            date=input.date,
        )
        event = crud.event.create_with_creator(
            info.context.db, obj_in=event_in, creator_id=user.id
        )
        # Loaders cache per request; drop entries this write made stale
        info.context.loaders["user_events_loader"].clear(user.id)
        return event

    @strawberry.mutation
    def joinEvent(self, eventId: strawberry.ID, info: Info) -> EventType:
        user = require_user(info)
        db = info.context.db
        event = crud.event.get(db, id=str(eventId))
        if not event:
            raise NotFoundError("Event not found")
        event = crud.event.add_attendee(db, event=event, user_id=user.id)
        info.context.loaders["attendees_loader"].clear(event.id)
        info.context.loaders["user_events_loader"].clear(user.id)
        return event

    @strawberry.mutation
    def addComment(self, input: CreateCommentInput, info: Info) -> CommentType:
        user = require_user(info)
        db = info.context.db
        comment_in = build_schema(
            CommentCreate, event_id=str(input.eventId), text=input.text
        )
        event = crud.event.get(db, id=comment_in.event_id)
        if not event:
            raise NotFoundError("Event not found")
        comment = crud.comment.create_for_event(
            db, obj_in=comment_in, author_id=user.id, event_id=event.id
        )
        info.context.loaders["event_comments_loader"].clear(event.id)
        info.context.loaders["author_comments_loader"].clear(user.id)
        return comment
