"""Database connection and initialization"""

import logging
import os
from threading import Lock
from typing import Any, Generator

from fastapi import Depends
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from mlc.config import Config, get_config
from mlc.models.base import BaseModel

# register all tables on BaseModel.metadata
from mlc.models.card import Card  # noqa: F401
from mlc.models.operation import Operation  # noqa: F401
from mlc.models.place import Place  # noqa: F401

logger = logging.getLogger(__name__)

# execution option asking SQLite to take the write lock at BEGIN
IMMEDIATE = "mlc_begin_immediate"


class DatabaseConnection:
    engine: Engine
    session_local: sessionmaker[Session]

    def __init__(self, config: Config) -> None:
        connect_args: dict[str, Any] = {}
        if config.database_url.startswith("sqlite"):
            # Ensure the database folder exists.
            os.makedirs(config.database_path.parent, exist_ok=True)
            # sessions are used from the request threadpool
            connect_args = {"check_same_thread": False, "timeout": 30}
        self.engine = create_engine(config.database_url, connect_args=connect_args)
        if self.engine.dialect.name == "sqlite":
            self._sqlite_begin(self.engine)
        self.session_local = sessionmaker(
            autocommit=False,
            autoflush=False,
            # objects stay readable after commit without starting a new transaction
            expire_on_commit=False,
            bind=self.engine,
        )

    @staticmethod
    def _sqlite_begin(engine: Engine) -> None:
        """Let SQLite units of work take the write lock when they begin.

        pysqlite only emits BEGIN before the first write, so a balance read
        followed by an update would not be isolated from a concurrent writer.
        Connections opened with the `IMMEDIATE` execution option begin with
        BEGIN IMMEDIATE, all others with a plain deferred BEGIN. WAL keeps
        readers from blocking the writer.
        """

        @event.listens_for(engine, "connect")
        def _disable_pysqlite_begin(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

        @event.listens_for(engine, "begin")
        def _emit_begin(conn):
            if conn.get_execution_options().get(IMMEDIATE):
                conn.exec_driver_sql("BEGIN IMMEDIATE")
            else:
                conn.exec_driver_sql("BEGIN")

    def create_tables(self) -> None:
        """Create all database tables defined in models."""
        logger.info("Creating database tables...")
        BaseModel.metadata.create_all(bind=self.engine)
        logger.info("Database tables created.")

    def get_session(self) -> Session:
        """Return a new SQLAlchemy session."""
        return self.session_local()

    def dispose(self) -> None:
        self.engine.dispose()


# one engine (and its connection pool) per database url, shared by all requests
_connections: dict[str, DatabaseConnection] = {}
_connections_lock = Lock()


def get_db_conn(config: Config = Depends(get_config)) -> DatabaseConnection:
    with _connections_lock:
        db_conn = _connections.get(config.database_url)
        if db_conn is None:
            db_conn = DatabaseConnection(config)
            db_conn.create_tables()
            _connections[config.database_url] = db_conn
        return db_conn


def forget_db_conn(config: Config) -> None:
    """Dispose the pooled connection of a database, e.g. before deleting its file."""
    with _connections_lock:
        db_conn = _connections.pop(config.database_url, None)
    if db_conn is not None:
        db_conn.dispose()


def get_db(
    db_conn: DatabaseConnection = Depends(get_db_conn),
) -> Generator[Session, Any, None]:
    """
    Dependency for providing a SQLAlchemy session to services and tests.

    Yields:
        SQLAlchemy Session.
    """
    session = db_conn.get_session()
    try:
        yield session
    finally:
        session.close()
