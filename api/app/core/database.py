from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from typing import Optional
import logging
import threading

from app.core.config import settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def normalize_database_url(db_url: str) -> str:
    """SQLAlchemy expects postgresql:// rather than postgres://."""
    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql://", 1)
    return db_url


def build_engine(db_url: str) -> Engine:
    """Create an engine for the given URL with pool settings suited to its backend."""
    db_url = normalize_database_url(db_url)
    logger.info(f"Connecting to database: {db_url[:20]}...")  # Log partial URL for debugging

    if db_url.startswith("sqlite"):
        # In-memory SQLite must share a single connection across threads
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        db_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = build_engine(settings.database_url)
    return _engine


def get_session():
    """Dependency for getting database sessions."""
    with Session(get_engine()) as session:
        yield session


def init_db():
    """Initialize database tables."""
    SQLModel.metadata.create_all(get_engine())


def dialect_insert(session: Session, table):
    """
    Build an INSERT for the session's backend that supports ON CONFLICT clauses.
    
    Args:
        session: Database session (its bind decides the dialect)
        table: Table to insert into
        
    Returns:
        Dialect-specific Insert construct
    """
    dialect_name = session.get_bind().dialect.name
    if dialect_name == "postgresql":
        return pg_insert(table)
    if dialect_name == "sqlite":
        return sqlite_insert(table)
    raise NotImplementedError(f"Upserts are not supported on the {dialect_name} backend")
