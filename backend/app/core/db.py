from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from app.core.config import settings


def _connect_args(uri: str) -> dict:
    if uri.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    connect_args=_connect_args(settings.SQLALCHEMY_DATABASE_URI),
)


def init_db(db_engine: Engine | None = None) -> None:
    # Tables are registered on SQLModel.metadata when app.models is imported.
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(db_engine or engine)