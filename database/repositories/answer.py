import logging
from typing import Dict, Iterable, List

from sqlalchemy import select

from core.compatibility.models import AnswerRecord
from database.models import UserAnswer
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class AnswerRepository(BaseRepository):
    """Read access to user_answers. Every call is a fresh query."""

    def answers_for_user(self, user_id: str) -> Dict[str, str]:
        """Return the user's question_id -> answer_id mapping (empty if none)."""
        stmt = select(UserAnswer.question_id, UserAnswer.answer_id).where(
            UserAnswer.user_id == user_id
        )
        with self._storage_errors("answers_for_user"):
            rows = self.db.execute(stmt).all()
        return {question_id: answer_id for question_id, answer_id in rows}

    def answers_for_users(self, user_ids: Iterable[str]) -> List[AnswerRecord]:
        """
        Fetch answers for several users in one round trip.

        Records come back unordered; partitioning by user is left to the caller.
        """
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return []

        stmt = select(UserAnswer.user_id, UserAnswer.answer_id, UserAnswer.question_id).where(
            UserAnswer.user_id.in_(ids)
        )
        with self._storage_errors("answers_for_users"):
            rows = self.db.execute(stmt).all()

        logger.debug(f"Fetched {len(rows)} answers for {len(ids)} users")
        return [
            AnswerRecord(user_id=user_id, answer_id=answer_id, question_id=question_id)
            for user_id, answer_id, question_id in rows
        ]
