import logging
from typing import List, Sequence

from sqlalchemy import insert, select

from core.compatibility.models import CompatibilityResult
from database.models import UserCompatibility
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CompatibilityRepository(BaseRepository):
    def insert_many(self, results: Sequence[CompatibilityResult]) -> int:
        """
        Insert results with a single multi-row INSERT ... VALUES statement.

        Row order follows the input order. Does not commit.
        """
        if not results:
            return 0

        stmt = insert(UserCompatibility).values([
            {
                'user_one_id': result.user_one_id,
                'user_two_id': result.user_two_id,
                'percent': result.percent,
            }
            for result in results
        ])
        with self._storage_errors("insert_many"):
            self.db.execute(stmt)
        return len(results)

    def get_for_user(self, user_one_id: str) -> List[CompatibilityResult]:
        stmt = select(
            UserCompatibility.user_one_id,
            UserCompatibility.user_two_id,
            UserCompatibility.percent
        ).where(
            UserCompatibility.user_one_id == user_one_id
        ).order_by(UserCompatibility.id)

        with self._storage_errors("get_for_user"):
            rows = self.db.execute(stmt).all()

        return [
            CompatibilityResult(user_one_id=row.user_one_id, user_two_id=row.user_two_id, percent=row.percent)
            for row in rows
        ]
