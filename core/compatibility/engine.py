#!/usr/bin/env python3
"""
Matching Engine - scan, score and collect compatible candidates.

Walks the candidate population page by page (newest first), bulk-loads each
page's answers, scores every candidate against the subject's answers and
keeps those at or above the threshold until the population is exhausted or
the match cap is reached.

Designed to be storage-agnostic: repositories are injected, so the engine
runs unchanged against the SQL repositories or in-memory fakes.
"""
from typing import Dict, List, Optional
import logging

from core.config_loader import MatchingConfig
from core.compatibility.models import (
    AnswerMapping, CandidateDescriptor, CompatibilityResult, SubjectProfile
)
from core.compatibility.scorer import score
from database.exceptions import StorageError

logger = logging.getLogger(__name__)


class MatchingEngine:
    """
    Single-pass compatibility search for one subject per call.

    Each find_matches() owns its cursor, counters and result list. The page
    answer buffer is reused across pages, so an instance must not be shared
    between threads; create one per invocation.
    """

    def __init__(self, answers_repo, users_repo, config: Optional[MatchingConfig] = None):
        """
        Args:
            answers_repo: provides answers_for_user() and answers_for_users()
            users_repo: provides get_profile() and next_candidate_page()
            config: MatchingConfig with threshold, cap and page size
        """
        self.answers = answers_repo
        self.users = users_repo
        self.config = config or MatchingConfig()
        # Per-page answer buffer, refilled for every page. Emptied mappings go
        # to the spare list and back into the buffer on the next page.
        self._page_answers: Dict[str, AnswerMapping] = {}
        self._spare_mappings: List[AnswerMapping] = []

    def find_matches(self, subject_id: str) -> List[CompatibilityResult]:
        """
        Collect qualifying candidates for the subject.

        Raises:
            NotFoundError: the subject has no profile row

        Any StorageError aborts the search and yields an empty list; partial
        results are never returned.
        """
        try:
            profile = self.users.get_profile(subject_id)
            subject_answers = self.answers.answers_for_user(subject_id)
            return self._scan(profile, subject_answers)
        except StorageError as e:
            logger.error(f"Compatibility search for {subject_id} aborted, discarding partial results: {e}")
            return []
        finally:
            self._release_page_answers()

    def _scan(self, profile: SubjectProfile, subject_answers: AnswerMapping) -> List[CompatibilityResult]:
        cfg = self.config
        cursor: Optional[int] = None
        found = 0
        pages = 0
        results: List[CompatibilityResult] = []

        logger.info(
            f"Scanning candidates for {profile.user_id} "
            f"(gender={profile.interested_in}, interested_in={profile.gender}, "
            f"{len(subject_answers)} answers)"
        )

        while True:
            # Candidates must be of the gender the subject is interested in and
            # interested in the subject's gender
            page = self.users.next_candidate_page(
                profile.interested_in,
                profile.gender,
                cursor,
                cfg.page_size
            )
            if not page:
                break
            pages += 1

            candidates = self._candidates_on_page(page, profile.user_id)
            self._load_page_answers(candidates)

            for candidate_id in candidates:
                percent = score(subject_answers, self._page_answers.get(candidate_id, {}))
                if percent < cfg.threshold:
                    continue

                results.append(CompatibilityResult(
                    user_one_id=profile.user_id,
                    user_two_id=candidate_id,
                    percent=percent
                ))
                found += 1

                if found >= cfg.max_matches:
                    logger.info(f"Match cap of {cfg.max_matches} reached for {profile.user_id} after {pages} pages")
                    return results

            cursor = page[-1].created_at

        logger.info(f"Found {found} compatible candidates for {profile.user_id} across {pages} pages")
        return results

    def _candidates_on_page(self, page: List[CandidateDescriptor], subject_id: str) -> List[str]:
        ids = [descriptor.user_id for descriptor in page]
        if self.config.exclude_subject:
            ids = [user_id for user_id in ids if user_id != subject_id]
        return ids

    def _load_page_answers(self, candidate_ids: List[str]) -> None:
        """Replace the page buffer with the answers of the given candidates."""
        self._release_page_answers()
        if not candidate_ids:
            return

        for record in self.answers.answers_for_users(candidate_ids):
            mapping = self._page_answers.get(record.user_id)
            if mapping is None:
                mapping = self._spare_mappings.pop() if self._spare_mappings else {}
                self._page_answers[record.user_id] = mapping
            mapping[record.question_id] = record.answer_id

    def _release_page_answers(self) -> None:
        """Empty the page buffer, keeping its per-candidate mappings for the next page."""
        for mapping in self._page_answers.values():
            mapping.clear()
            self._spare_mappings.append(mapping)
        self._page_answers.clear()
