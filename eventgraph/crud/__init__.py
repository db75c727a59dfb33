# eventgraph/crud/__init__.py

from .crud_comment import comment
from .crud_event import event
from .crud_user import user
