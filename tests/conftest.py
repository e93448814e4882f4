"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For in-memory repository fakes, see tests/mocks/compatibility_mocks.py
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base, User, UserAnswer


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring a database engine (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def sqlite_engine():
    """
    In-memory SQLite engine with the full schema.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seed(session_factory):
    """
    Factory fixture inserting users and answers, committed.

    Usage:
        seed(users=[("u1", "f", "m", 100)], answers=[("u1", "a1", "q1")])
    """
    def _seed(users=(), answers=()):
        session = session_factory()
        try:
            for user_id, gender, interested_in, created_at in users:
                session.add(User(id=user_id, gender=gender, interested_in=interested_in, created_at=created_at))
            for user_id, answer_id, question_id in answers:
                session.add(UserAnswer(user_id=user_id, answer_id=answer_id, question_id=question_id))
            session.commit()
        finally:
            session.close()
    return _seed
