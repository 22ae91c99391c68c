import asyncio
from typing import Callable, TypeVar
from sqlmodel import SQLModel, create_engine, Session
from app.core.config import settings

T = TypeVar("T")

# check_same_thread is needed for SQLite, remove for PostgreSQL
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, connect_args=connect_args)

def open_session() -> Session:
    # Looks up the module-level engine at call time so it can be swapped out
    return Session(engine)

async def run_in_session(work: Callable[[Session], T]) -> T:
    """Run blocking database work on a worker thread with its own session."""
    def run():
        with open_session() as session:
            return work(session)
    return await asyncio.to_thread(run)

def create_db_and_tables():
    # Register the tables on SQLModel.metadata before creating them
    import app.models  # noqa: F401
    SQLModel.metadata.create_all(engine)
