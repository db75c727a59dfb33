from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from eventgraph.core.config import settings

# SQLite connections are shared across the threads FastAPI runs sync code in.
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

# The engine is the entry point to the database. It's configured with the
# database URL and handles the connection pooling.
engine = create_engine(
    settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args
)

# SessionLocal is a factory for creating new Session objects, one per request.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Always release the connection, even if the request failed.
        db.close()
