"""Compatibility Module - answer-overlap scoring and candidate matching."""
from core.compatibility.models import (
    AnswerMapping, AnswerRecord, CandidateDescriptor, SubjectProfile, CompatibilityResult
)
from core.compatibility.scorer import score, count_matching_answers
from core.compatibility.engine import MatchingEngine
from core.compatibility.writer import ResultWriter, chunked

__all__ = [
    'MatchingEngine', 'ResultWriter', 'score', 'count_matching_answers', 'chunked',
    'AnswerMapping', 'AnswerRecord', 'CandidateDescriptor', 'SubjectProfile',
    'CompatibilityResult'
]
