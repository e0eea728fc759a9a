import os
from pathlib import Path
from typing import Generator

from dotenv import load_dotenv
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./subscriptions.db")

_is_sqlite = DATABASE_URL.startswith("sqlite")
_connect_args = {"check_same_thread": False} if _is_sqlite else {}
_echo = os.getenv("SQL_ECHO", "false").lower() in ("true", "1", "yes")

# Largest id a signed 64-bit INTEGER column can hold; larger ids can never match a row
MAX_ROW_ID = 2**63 - 1

if _is_sqlite and ":memory:" not in DATABASE_URL:
    db_path = DATABASE_URL.replace("sqlite:///", "", 1)
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def configure_sqlite(sqlite_engine: Engine) -> None:
    """Enable foreign keys and working SAVEPOINTs on a pysqlite engine.

    pysqlite issues its own BEGIN lazily, which breaks SAVEPOINT (used by
    service get-or-create). Driver-level transaction handling is turned off
    and SQLAlchemy emits BEGIN itself.
    """

    @event.listens_for(sqlite_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(sqlite_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


engine: Engine = create_engine(
    DATABASE_URL,
    echo=_echo,
    connect_args=_connect_args,
)

if _is_sqlite:
    configure_sqlite(engine)


def get_session() -> Generator[Session, None, None]:
    """Get database session"""
    with Session(engine) as session:
        yield session


def init_db() -> None:
    """Initialize database - create all tables"""
    # Import all models to ensure they're registered with SQLModel metadata
    from subscriptions_api.models.service import Service  # noqa: F401
    from subscriptions_api.models.subscription import Subscription  # noqa: F401
    from subscriptions_api.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(engine)
