# quizrunner/engine/quiz_engine.py
from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from quizrunner.domain.models import OPTION_COUNT, Question, QuizSession
from quizrunner.engine.scoring import score_delta


def start_session(questions: Sequence[Question]) -> QuizSession:
    if not questions:
        raise ValueError("A quiz needs at least one question.")
    return QuizSession(questions=tuple(questions))


def is_last_question(session: QuizSession) -> bool:
    return session.current_index >= session.total - 1


def select_option(session: QuizSession, index: int) -> QuizSession:
    """
    Records the answer to the current question.
    Only the first pick counts: once answered, the same session is returned.
    """
    if not (0 <= index < OPTION_COUNT):
        raise ValueError(f"Option index must be between 0 and {OPTION_COUNT - 1}, got {index}")
    if session.answered:
        return session

    return replace(
        session,
        selected_option=index,
        answered=True,
        score=session.score + score_delta(session.current_question, index),
    )


def advance(session: QuizSession) -> QuizSession:
    # caller checks is_last_question() first: the last question has nowhere to go
    if not session.answered:
        raise ValueError("Cannot advance before the current question is answered.")
    if is_last_question(session):
        raise ValueError("Already on the last question.")
    return replace(
        session,
        current_index=session.current_index + 1,
        selected_option=None,
        answered=False,
    )


def restart(session: QuizSession) -> QuizSession:
    # same questions, nothing is re-fetched
    return QuizSession(questions=session.questions)
