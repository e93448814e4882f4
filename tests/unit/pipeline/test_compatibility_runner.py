#!/usr/bin/env python3
"""
End-to-end tests for compute_and_store_compatibility against SQLite.
"""

import pytest
from unittest.mock import patch

from sqlalchemy.orm import Session

from core.config_loader import AppConfig, DatabaseConfig, MatchingConfig
from database.database import dispose_engine, get_engine
from database.exceptions import StorageError
from database.models import Base, User, UserAnswer
from database.repositories import CompatibilityRepository, UserRepository
from pipeline.runner import compute_and_store_compatibility

pytestmark = pytest.mark.db


@pytest.fixture
def config():
    return AppConfig(matching=MatchingConfig(page_size=10))


@pytest.fixture
def population(seed):
    users = [("s", "f", "m", 100_000)]
    answers = [("s", f"a{q}", f"q{q}") for q in range(5)]
    # 25 candidates matching 3 of 5 (60), 5 matching 1 of 5 (20)
    for i in range(30):
        user_id = f"c{i:02d}"
        users.append((user_id, "m", "f", 50_000 - i))
        matching = 3 if i < 25 else 1
        answers.extend(
            (user_id, f"a{q}" if q < matching else f"x{q}", f"q{q}") for q in range(5)
        )
    seed(users=users, answers=answers)


def test_persists_qualifying_candidates_in_scan_order(population, config, session_factory, db_session):
    result = compute_and_store_compatibility("s", config=config, session_factory=session_factory)

    assert result.success
    assert result.matches_count == 25
    assert result.saved_count == 25
    assert result.error is None

    stored = CompatibilityRepository(db_session).get_for_user("s")
    assert [r.user_two_id for r in stored] == [f"c{i:02d}" for i in range(25)]
    assert {r.percent for r in stored} == {60}


def test_unknown_subject_writes_nothing(population, config, session_factory, db_session):
    result = compute_and_store_compatibility("ghost", config=config, session_factory=session_factory)

    assert not result.success
    assert "ghost" in result.error
    assert CompatibilityRepository(db_session).get_for_user("ghost") == []


def test_write_failure_rolls_back_every_chunk(population, config, session_factory, db_session):
    original = CompatibilityRepository.insert_many
    calls = []

    def flaky_insert(self, chunk):
        calls.append(len(chunk))
        if len(calls) == 3:
            raise StorageError("simulated insert failure")
        return original(self, chunk)

    with patch.object(CompatibilityRepository, 'insert_many', flaky_insert):
        result = compute_and_store_compatibility("s", config=config, session_factory=session_factory)

    assert not result.success
    assert result.matches_count == 25
    assert result.saved_count == 0
    assert calls == [10, 10, 5]
    assert CompatibilityRepository(db_session).get_for_user("s") == []


def test_scan_failure_writes_nothing(population, config, session_factory, db_session):
    original = UserRepository.next_candidate_page
    pages = []

    def flaky_page(self, *args, **kwargs):
        pages.append(args)
        if len(pages) == 2:
            raise StorageError("simulated page failure")
        return original(self, *args, **kwargs)

    with patch.object(UserRepository, 'next_candidate_page', flaky_page):
        result = compute_and_store_compatibility("s", config=config, session_factory=session_factory)

    assert result.success
    assert result.matches_count == 0
    assert result.saved_count == 0
    assert CompatibilityRepository(db_session).get_for_user("s") == []


def test_repeated_runs_append_rows(population, config, session_factory, db_session):
    compute_and_store_compatibility("s", config=config, session_factory=session_factory)
    compute_and_store_compatibility("s", config=config, session_factory=session_factory)

    assert len(CompatibilityRepository(db_session).get_for_user("s")) == 50


def test_unexpected_scan_error_is_reported_not_raised(population, config, session_factory, db_session):
    with patch.object(UserRepository, 'next_candidate_page', side_effect=ValueError("bad cursor")):
        result = compute_and_store_compatibility("s", config=config, session_factory=session_factory)

    assert result.success is False
    assert result.error == "bad cursor"
    assert CompatibilityRepository(db_session).get_for_user("s") == []


def test_unusable_database_url_is_reported_not_raised():
    config = AppConfig(database=DatabaseConfig(url="not-a-database-url"))

    result = compute_and_store_compatibility("s", config=config)

    assert result.success is False
    assert result.error


def test_database_settings_come_from_the_passed_config(tmp_path):
    config = AppConfig(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'compat.db'}", pool_size=2, max_overflow=0),
        matching=MatchingConfig(page_size=10),
    )
    engine = get_engine(config.database)
    try:
        Base.metadata.create_all(engine)
        with Session(engine) as session:
            session.add_all([
                User(id="s", gender="f", interested_in="m", created_at=200),
                User(id="c", gender="m", interested_in="f", created_at=100),
                UserAnswer(user_id="s", answer_id="a1", question_id="q1"),
                UserAnswer(user_id="c", answer_id="a1", question_id="q1"),
            ])
            session.commit()

        result = compute_and_store_compatibility("s", config=config)

        assert result.success
        assert result.saved_count == 1
        assert get_engine(config.database) is engine
        with Session(engine) as session:
            stored = CompatibilityRepository(session).get_for_user("s")
        assert [(r.user_two_id, r.percent) for r in stored] == [("c", 100)]
    finally:
        dispose_engine()
