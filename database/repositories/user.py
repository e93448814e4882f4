import logging
from typing import List, Optional

from sqlalchemy import select

from core.compatibility.models import CandidateDescriptor, SubjectProfile
from database.exceptions import NotFoundError
from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


class UserRepository(BaseRepository):
    def get_profile(self, user_id: str) -> SubjectProfile:
        stmt = select(User.gender, User.interested_in).where(User.id == user_id)
        with self._storage_errors("get_profile"):
            row = self.db.execute(stmt).one_or_none()

        if row is None:
            raise NotFoundError(f"User {user_id} not found")

        return SubjectProfile(user_id=user_id, gender=row.gender, interested_in=row.interested_in)

    def next_candidate_page(
        self,
        gender: str,
        interested_in: str,
        cursor: Optional[int] = None,
        limit: int = DEFAULT_PAGE_SIZE
    ) -> List[CandidateDescriptor]:
        """
        Return up to `limit` users with the given gender and interest, newest first.

        A cursor of None applies no lower bound; otherwise only users created
        strictly before the cursor are returned. An empty list means the scan
        is exhausted.
        """
        stmt = select(User.id, User.created_at).where(
            User.gender == gender,
            User.interested_in == interested_in
        )

        if cursor is not None:
            stmt = stmt.where(User.created_at < cursor)

        # id breaks ties inside a page so ordering is deterministic
        stmt = stmt.order_by(User.created_at.desc(), User.id.desc()).limit(limit)

        with self._storage_errors("next_candidate_page"):
            rows = self.db.execute(stmt).all()

        return [CandidateDescriptor(user_id=row.id, created_at=row.created_at) for row in rows]
