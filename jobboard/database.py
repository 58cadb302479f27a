"""
Database schema and the store collaborator used by the repositories.

Repositories write SQL with positional ``$n`` placeholders; ``Database``
binds them through SQLAlchemy so the same statements run on SQLite and
PostgreSQL.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    bindparam,
    create_engine,
    event,
    text,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base

from .config import get_database_url, load_env
from .logger import get_logger

Base = declarative_base()

_PLACEHOLDER = re.compile(r"\$(\d+)")


class Company(Base):
    """Company model (read-only to this package)."""

    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    num_employees = Column(Integer, CheckConstraint("num_employees >= 0"))
    description = Column(Text, nullable=False)
    logo_url = Column(Text)


class Job(Base):
    """Job posting model."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, CheckConstraint("salary >= 0"))
    equity = Column(Numeric, CheckConstraint("equity <= 1.0"))
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    )


def _sqlite_path(url: str) -> Optional[Path]:
    database = make_url(url).database
    if not database or database == ":memory:":
        return None
    return Path(database)


def create_db_engine(url: str, enforce_foreign_keys: bool = True) -> Engine:
    """
    Create an engine for the given URL.

    Args:
        url: SQLAlchemy database URL
        enforce_foreign_keys: Turn on SQLite's foreign key checks (no effect
            on other backends, which always enforce them)

    Returns:
        SQLAlchemy engine
    """
    engine = create_engine(url)

    if engine.dialect.name == "sqlite" and enforce_foreign_keys:
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_database(url: str) -> None:
    """
    Initialize database and create tables.

    Args:
        url: SQLAlchemy database URL
    """
    if url.startswith("sqlite"):
        db_path = _sqlite_path(url)
        if db_path is not None:
            db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(url)
    Base.metadata.create_all(engine)
    engine.dispose()


def bind_positional(sql: str, params: Sequence[Any]):
    """
    Convert a ``$n`` statement into a SQLAlchemy text clause.

    ``$n`` becomes the named parameter ``p<n>`` bound to ``params[n - 1]``.
    A parameter with no matching placeholder is rejected by SQLAlchemy, so
    a drifted parameter list fails loudly instead of binding the wrong
    values.
    """
    stmt = text(_PLACEHOLDER.sub(r":p\1", sql))
    if params:
        stmt = stmt.bindparams(
            *(bindparam(f"p{idx}", value) for idx, value in enumerate(params, start=1))
        )
    return stmt


class Database:
    """Executes SQL statements and returns rows as dicts."""

    def __init__(self, url: str, enforce_foreign_keys: bool = True):
        self.url = url
        self.engine = create_db_engine(url, enforce_foreign_keys=enforce_foreign_keys)
        self.logger = get_logger()

    @classmethod
    def from_env(cls) -> "Database":
        """Build a Database from .env / environment settings."""
        load_env()
        return cls(get_database_url())

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Run one statement in its own transaction.

        Args:
            sql: Statement with ``$n`` placeholders
            params: Values for the placeholders, in order

        Returns:
            List of rows, each a dict keyed by output column name
        """
        stmt = bind_positional(sql, params)
        self.logger.debug("Executing statement", sql=" ".join(sql.split()), params=list(params))

        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
                rows = [dict(row._mapping) for row in result] if result.returns_rows else []
        except Exception as e:
            self.logger.record_query_failure(type(e).__name__)
            self.logger.error(f"Statement failed: {e}", error_type=type(e).__name__)
            raise

        self.logger.record_query(len(rows))
        return rows

    def close(self) -> None:
        self.engine.dispose()
