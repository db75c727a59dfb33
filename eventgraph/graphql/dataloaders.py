# eventgraph/graphql/dataloaders.py
"""
DataLoaders for batching relationship lookups in GraphQL resolvers.

Resolving `createdBy` on a page of ten events would otherwise run ten
`SELECT ... WHERE id = ?` queries. Each loader collects every key requested
while one level of the response is resolved and fetches them with a single
`WHERE ... IN (...)` query.
"""
from typing import Dict, List, Optional

from sqlalchemy.orm import Session
from strawberry.dataloader import DataLoader

from eventgraph import crud
from eventgraph.models.comment import Comment
from eventgraph.models.event import Event
from eventgraph.models.user import User


async def batch_load_users(keys: List[str], db: Session) -> List[Optional[User]]:
    users = crud.user.get_by_ids(db, keys)
    user_map: Dict[str, User] = {user.id: user for user in users}
    # Return in same order as keys (DataLoader contract)
    return [user_map.get(key) for key in keys]


async def batch_load_events(keys: List[str], db: Session) -> List[Optional[Event]]:
    events = crud.event.get_by_ids(db, keys)
    event_map: Dict[str, Event] = {event.id: event for event in events}
    return [event_map.get(key) for key in keys]


async def batch_load_attendees(keys: List[str], db: Session) -> List[List[User]]:
    attendees = crud.event.get_attendees_by_event_ids(db, event_ids=keys)
    return [attendees.get(key, []) for key in keys]


async def batch_load_comments_by_event(
    keys: List[str], db: Session
) -> List[List[Comment]]:
    comments = crud.comment.get_multi_by_event_ids(db, event_ids=keys)
    return [comments.get(key, []) for key in keys]


async def batch_load_comments_by_author(
    keys: List[str], db: Session
) -> List[List[Comment]]:
    comments = crud.comment.get_multi_by_author_ids(db, author_ids=keys)
    return [comments.get(key, []) for key in keys]


async def batch_load_events_by_user(keys: List[str], db: Session) -> List[List[Event]]:
    events = crud.event.get_multi_by_user_ids(db, user_ids=keys)
    return [events.get(key, []) for key in keys]


def create_dataloaders(db: Session) -> Dict[str, DataLoader]:
    """
    Factory function to create all DataLoaders for a GraphQL request.

    Called once per request in the GraphQL context getter, so nothing is
    cached between requests.
    """
    return {
        "user_loader": DataLoader(load_fn=lambda keys: batch_load_users(keys, db)),
        "event_loader": DataLoader(load_fn=lambda keys: batch_load_events(keys, db)),
        "attendees_loader": DataLoader(
            load_fn=lambda keys: batch_load_attendees(keys, db)
        ),
        "event_comments_loader": DataLoader(
            load_fn=lambda keys: batch_load_comments_by_event(keys, db)
        ),
        "author_comments_loader": DataLoader(
            load_fn=lambda keys: batch_load_comments_by_author(keys, db)
        ),
        "user_events_loader": DataLoader(
            load_fn=lambda keys: batch_load_events_by_user(keys, db)
        ),
    }
