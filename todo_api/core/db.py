# todo_api/core/db.py
import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):

    pass


class Database:
    """
    Store handle: one engine and its session factory, owned by the app.

    The engine and the schema are set up lazily. Until both succeed, every
    new session retries them, so a store that was down (or misconfigured) at
    startup is picked up once it becomes reachable. Sessions handed out while
    the engine is missing are unbound and fail with a SQLAlchemy error on
    first use.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self._schema_ready = False
        self.SessionLocal = sessionmaker(
            autoflush=False,
            autocommit=False,
        )

    def _build_engine(self) -> bool:
        if self.engine is not None:
            return True

        connect_args = {}
        if self.database_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False

        try:
            self.engine = create_engine(
                self.database_url,
                echo=self.echo,
                connect_args=connect_args,
            )
        except (SQLAlchemyError, ImportError):
            # the URL may carry credentials, keep it out of the log
            logger.exception("Invalid database URL or missing database driver")
            return False

        self.SessionLocal.configure(bind=self.engine)
        return True

    def connect(self) -> bool:
        if not self._build_engine():
            return False

        # tables are registered on Base.metadata when todo_api.models is imported
        try:
            with self.engine.connect():
                pass
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError:
            logger.exception("Error connecting to database %s", self.engine.url)
            return False

        self._schema_ready = True
        logger.info("Connected to database %s", self.engine.url)
        return True

    def dispose(self) -> None:
        if self.engine is None:
            return
        self.engine.dispose()
        logger.info("Database connection pool released")

    def session(self) -> Session:
        if not self._schema_ready:
            self.connect()
        return self.SessionLocal()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
