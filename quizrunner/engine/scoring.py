# quizrunner/engine/scoring.py
from __future__ import annotations

from typing import Optional

from quizrunner.domain.enums import Outcome, Verdict
from quizrunner.domain.models import Question


def answer_outcome(question: Question, selected: Optional[int]) -> Outcome:
    """
    selected: 0..3, or None if nothing was picked.
    A question without a marked option can never be answered correctly.
    """
    if not question.has_correct_option:
        return Outcome.UNMARKED
    if selected == question.correct_index:
        return Outcome.CORRECT
    return Outcome.WRONG


def score_delta(question: Question, selected: int) -> int:
    return 1 if answer_outcome(question, selected) == Outcome.CORRECT else 0


def result_verdict(score: int, total: int) -> Verdict:
    """
    Final comment on the result screen:
    - all correct -> PERFECT
    - more than half -> GOOD
    - otherwise -> KEEP_PRACTICING
    """
    if score == total:
        return Verdict.PERFECT
    if score > total / 2:
        return Verdict.GOOD
    return Verdict.KEEP_PRACTICING
