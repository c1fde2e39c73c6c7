import json
import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase

logger = logging.getLogger("portfolio.db")

DEFAULT_URL = "sqlite:///./portfolio.db"

class Base(DeclarativeBase):
    pass


def normalize_url(url: str | None) -> str:
    url = url or DEFAULT_URL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def _json_dumps(value) -> str:
    # store accented text as-is rather than \u escapes
    return json.dumps(value, ensure_ascii=False)


class Database:
    """Store handle built once at startup and shared by every request."""

    def __init__(self, url: str | None = None):
        self.url = normalize_url(url)

        connect_args = {}
        if self.url.startswith("sqlite"):
            connect_args = {"check_same_thread": False}

        self.engine = create_engine(
            self.url,
            connect_args=connect_args,
            pool_pre_ping=True,
            json_serializer=_json_dumps,
            future=True,
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            future=True,
        )

    def create_all(self) -> None:
        from app.models import user, project, skill, education, about, contact  # noqa: F401
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database ready (%s)", self.engine.dialect.name)

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
