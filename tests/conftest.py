# File: tests/conftest.py

import pytest

from app.db import session


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'hello.db'}"


@pytest.fixture(autouse=True)
def reset_store():
    """Drop the process-wide engine handle between tests."""
    yield
    if session.engine is not None:
        session.engine.dispose()
    session.engine = None
    session.SessionLocal.configure(bind=None)
