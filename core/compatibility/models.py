"""
Value types shared by the matching engine and the storage layer.

All types are immutable; an AnswerMapping is a plain dict built per scoring
call and treated as read-only once built.
"""
from dataclasses import dataclass
from typing import Dict

# question_id -> answer_id for exactly one user
AnswerMapping = Dict[str, str]


@dataclass(frozen=True)
class AnswerRecord:
    user_id: str
    answer_id: str
    question_id: str


@dataclass(frozen=True)
class CandidateDescriptor:
    """One entry of a candidate page. created_at is the pagination cursor value."""
    user_id: str
    created_at: int


@dataclass(frozen=True)
class SubjectProfile:
    user_id: str
    gender: str
    interested_in: str


@dataclass(frozen=True)
class CompatibilityResult:
    user_one_id: str
    user_two_id: str
    percent: int

    def __post_init__(self):
        if not 0 <= self.percent <= 100:
            raise ValueError(f"percent must be within [0, 100], got {self.percent}")
