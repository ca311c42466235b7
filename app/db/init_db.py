"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all runs.
"""

from sqlalchemy.engine import Engine

from app.models.base import Base
from app.models import user  # noqa: F401


def init_db(engine: Engine) -> None:
    """
    Create all tables that do not exist yet.

    create_all only issues CREATE TABLE for missing tables, so this is safe
    to run on every startup and never touches existing tables or rows.
    """
    Base.metadata.create_all(bind=engine)
