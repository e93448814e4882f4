"""
Answer-overlap compatibility score.
"""
import math

from core.compatibility.models import AnswerMapping

MAX_PERCENT = 100


def count_matching_answers(subject_answers: AnswerMapping, candidate_answers: AnswerMapping) -> int:
    """Number of the subject's questions the candidate answered identically."""
    return sum(
        1 for question_id, answer_id in subject_answers.items()
        if question_id in candidate_answers and candidate_answers[question_id] == answer_id
    )


def score(subject_answers: AnswerMapping, candidate_answers: AnswerMapping) -> int:
    """
    Percentage of the subject's answered questions that the candidate matched.

    Directional: questions only the candidate answered are ignored, so
    score(a, b) and score(b, a) can differ. The exact ratio is rounded up,
    so 1 of 3 scores 34.
    """
    total = len(subject_answers)
    if total == 0:
        return 0

    matches = count_matching_answers(subject_answers, candidate_answers)
    if matches == 0:
        return 0

    return min(math.ceil(MAX_PERCENT * matches / total), MAX_PERCENT)
