import contextlib
import logging
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from database.database import get_session_factory
from database.exceptions import StorageError
from database.repositories import AnswerRepository, UserRepository, CompatibilityRepository

logger = logging.getLogger(__name__)


class CompatibilityUnitOfWork:
    """Repositories sharing one Session, and therefore one transaction."""

    def __init__(self, session: Session):
        self.session = session
        self.answers = AnswerRepository(session)
        self.users = UserRepository(session)
        self.compatibilities = CompatibilityRepository(session)


@contextlib.contextmanager
def compatibility_uow(session_factory: Optional[sessionmaker] = None) -> Iterator[CompatibilityUnitOfWork]:
    """Per-invocation transaction scope.

    Yields a CompatibilityUnitOfWork bound to a fresh pooled Session. Commits
    on success, rolls back on exception (no rows from the invocation remain),
    always closes so the connection returns to the pool.

    Usage:
        with compatibility_uow() as uow:
            results = MatchingEngine(uow.answers, uow.users).find_matches(user_id)
            ResultWriter(uow.compatibilities).persist(results)
        # commit happens automatically on successful exit
    """
    factory = session_factory or get_session_factory()
    session = factory()
    try:
        yield CompatibilityUnitOfWork(session)
        try:
            session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"commit failed: {e}") from e
    except Exception:
        logger.warning("Rolling back compatibility unit of work")
        session.rollback()
        raise
    finally:
        session.close()
