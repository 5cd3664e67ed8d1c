# quizrunner/engine/controller.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from quizrunner.bank.loader import QuizLoader
from quizrunner.domain.enums import PhaseName
from quizrunner.domain.errors import InvalidTransition, QuizLoadError
from quizrunner.domain.models import (
    Error,
    Loading,
    Menu,
    Phase,
    Playing,
    Question,
    QuizSession,
    Result,
)
from quizrunner.engine import quiz_engine

log = logging.getLogger(__name__)


def quiz_title(quiz_id: str) -> str:
    return quiz_id.replace("_", " ").upper()


@dataclass(frozen=True)
class QuizSnapshot:
    """What a view needs to draw the current screen."""
    phase: PhaseName
    error_msg: str = ""
    quiz_title: str = ""
    questions: Tuple[Question, ...] = ()
    current_question_index: int = 0
    score: int = 0
    selected_option: Optional[int] = None
    is_answer_checked: bool = False


class QuizController:
    def __init__(self, loader: QuizLoader):
        self.loader = loader
        self.phase: Phase = Menu()
        self.quiz_id: str = ""
        self.quiz_title: str = ""

    # --- LOADING ---
    async def open_quiz(self, quiz_id: str) -> Phase:
        """
        Loads the question bank and starts playing.
        Load failures end in the error phase, never as an exception.
        """
        self.quiz_id = quiz_id
        self.quiz_title = quiz_title(quiz_id)
        self.phase = Loading(quiz_id)

        try:
            questions = await self.loader.load(quiz_id)
        except QuizLoadError as e:
            log.error("Quiz %s could not be loaded: %s", quiz_id, e)
            self.phase = Error(str(e))
            return self.phase

        self.phase = Playing(quiz_engine.start_session(questions))
        return self.phase

    # --- PLAYING ---
    def select_option(self, index: int) -> QuizSession:
        session = self._playing_session("select_option")
        self.phase = Playing(quiz_engine.select_option(session, index))
        return self.phase.session

    def advance(self) -> Phase:
        session = self._playing_session("advance")
        if not session.answered:
            raise InvalidTransition("advance() before answering the current question")

        if quiz_engine.is_last_question(session):
            log.info("Quiz %s finished: %d/%d", self.quiz_id, session.score, session.total)
            self.phase = Result(session)
        else:
            self.phase = Playing(quiz_engine.advance(session))
        return self.phase

    # --- RESULT ---
    def restart(self) -> QuizSession:
        if not isinstance(self.phase, (Playing, Result)):
            raise InvalidTransition(f"restart() not allowed in phase {self.phase.name.value}")
        self.phase = Playing(quiz_engine.restart(self.phase.session))
        return self.phase.session

    def return_to_menu(self) -> Phase:
        self.phase = Menu()
        self.quiz_id = ""
        self.quiz_title = ""
        return self.phase

    def snapshot(self) -> QuizSnapshot:
        phase = self.phase
        if isinstance(phase, (Playing, Result)):
            s = phase.session
            return QuizSnapshot(
                phase=phase.name,
                quiz_title=self.quiz_title,
                questions=s.questions,
                current_question_index=s.current_index,
                score=s.score,
                selected_option=s.selected_option,
                is_answer_checked=s.answered,
            )
        if isinstance(phase, Error):
            return QuizSnapshot(phase=phase.name, error_msg=phase.message, quiz_title=self.quiz_title)
        return QuizSnapshot(phase=phase.name, quiz_title=self.quiz_title)

    def _playing_session(self, op: str) -> QuizSession:
        if not isinstance(self.phase, Playing):
            raise InvalidTransition(f"{op}() not allowed in phase {self.phase.name.value}")
        return self.phase.session
