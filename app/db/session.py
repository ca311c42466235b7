import logging
from collections.abc import Generator
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.core.errors import StoreConnectionError
from app.db.init_db import init_db

logger = logging.getLogger(__name__)

# Process-wide handle, set once connect() succeeds
engine: Optional[Engine] = None

SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def connect(database_url: Optional[str] = None) -> Engine:
    """
    Open the database and run the auto-migration.

    Any failure is fatal for the caller: there is no retry and no fallback.
    Raises StoreConnectionError if the store cannot be reached or prepared.
    """
    global engine

    url = database_url or settings.database_url
    candidate: Optional[Engine] = None
    try:
        candidate = create_engine(
            url,
            connect_args={"check_same_thread": False} if url.startswith("sqlite") else {},
        )
        logger.info(
            "Connecting to database %s",
            candidate.url.render_as_string(hide_password=True),
        )
        # create_all opens the first real connection
        init_db(candidate)
    except (SQLAlchemyError, ImportError) as exc:
        if candidate is not None:
            candidate.dispose()
        raise StoreConnectionError(f"could not connect to database: {exc}") from exc

    engine = candidate
    SessionLocal.configure(bind=engine)
    return engine


def get_engine() -> Engine:
    if engine is None:
        raise StoreConnectionError("database is not connected")
    return engine


# ----------------------------------------------------
# DB Session Dependency
# ----------------------------------------------------
def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)

    Raises StoreConnectionError if connect() has not run.
    """
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
