# eventgraph/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from eventgraph.core.config import settings
from eventgraph.db.base_class import Base
from eventgraph.db.session import engine
from eventgraph.graphql.router import graphql_router
import eventgraph.models  # noqa: F401  registers every table on Base.metadata

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Runs once when the application starts up. Without a reachable database the
# service has nothing to serve, so a connection failure aborts startup.
@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.critical(f"Could not connect to the database: {e}")
        raise
    logger.info("Database connection established, tables ready")
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Event Graph Service",
    version="1.0.0",
    description="""
        GraphQL API for creating events, joining them and commenting on them.

        ## Authentication

        Mutations that change events or comments need a JWT via the
        `Authorization: Bearer <token>` header. Obtain one from the
        `registerUser` or `login` mutations. Requests without a valid token
        run anonymously and can still use every query.
        """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,  # Allow cookies and authorization headers
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(graphql_router, prefix="/graphql")


@app.get("/health")
def health_check():
    return {"status": "healthy"}


def run():
    uvicorn.run("eventgraph.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
