import uuid

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.ai.local_cache import LocalCache
from app.core.db import init_db


@pytest.fixture
def engine():
    # One shared in-memory connection so worker threads see the same tables.
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def session_factory(engine):
    return lambda: Session(engine)


@pytest.fixture
def local_cache(tmp_path):
    return LocalCache(tmp_path / "local_storage.json")


@pytest.fixture
def user_id():
    return uuid.uuid4()
