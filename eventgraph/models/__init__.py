# eventgraph/models/__init__.py
# Import all models so Base.metadata knows every table before create_all

from eventgraph.db.base_class import Base
from eventgraph.models.user import User
from eventgraph.models.event import Event
from eventgraph.models.event_attendee import EventAttendee
from eventgraph.models.comment import Comment
