import contextlib
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.exceptions import StorageError

logger = logging.getLogger(__name__)


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextlib.contextmanager
    def _storage_errors(self, operation: str):
        """Re-raise any SQLAlchemy failure inside the block as StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Storage failure during {operation}: {e}")
            raise StorageError(f"{operation} failed: {e}") from e
