"""
Shared fixtures.

Every test runs against a fresh in-memory SQLite database. ``StaticPool``
keeps the single connection alive so all sessions see the same data.
"""
import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.models  # noqa: F401
from app.db import session as db_session
from app.models.item import Item


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def catalog(engine):
    """Starter catalog: apple=1, bread=2, milk=3"""
    with Session(engine) as session:
        session.add(Item(id="apple", name="Apple", price=1))
        session.add(Item(id="bread", name="Bread", price=2))
        session.add(Item(id="milk", name="Milk", price=3))
        session.commit()


@pytest.fixture
def tools_db(engine, monkeypatch):
    """Point the MCP tool handlers at the test engine"""
    monkeypatch.setattr(db_session, "engine", engine)
    return engine


@pytest.fixture
def file_engine(tmp_path):
    """File-backed SQLite, so separate sessions get separate connections"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'carts.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        session.add(Item(id="apple", name="Apple", price=1))
        session.commit()
    yield engine
    engine.dispose()
