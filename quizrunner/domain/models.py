# quizrunner/domain/models.py
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from quizrunner.domain.enums import PhaseName

OPTION_COUNT = 4
NO_CORRECT_OPTION = -1


@dataclass(frozen=True)
class Question:
    id: int
    text: str
    options: Tuple[str, str, str, str]
    correct_index: int
    explanation: str = ""

    def __post_init__(self):
        if len(self.options) != OPTION_COUNT:
            raise ValueError(f"Question must have exactly {OPTION_COUNT} options")
        if not (NO_CORRECT_OPTION <= self.correct_index < OPTION_COUNT):
            raise ValueError("correct_index out of range")

    @property
    def has_correct_option(self) -> bool:
        return self.correct_index != NO_CORRECT_OPTION


@dataclass(frozen=True)
class QuizSession:
    """
    One playthrough of a loaded question sequence.
    selected_option is None until the current question is answered.
    """
    questions: Tuple[Question, ...]
    current_index: int = 0
    score: int = 0
    selected_option: Optional[int] = None
    answered: bool = False

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]


# --- Phases (closed set) ---
@dataclass(frozen=True)
class Menu:
    name: PhaseName = field(default=PhaseName.MENU, init=False)


@dataclass(frozen=True)
class Loading:
    quiz_id: str
    name: PhaseName = field(default=PhaseName.LOADING, init=False)


@dataclass(frozen=True)
class Error:
    message: str
    name: PhaseName = field(default=PhaseName.ERROR, init=False)


@dataclass(frozen=True)
class Playing:
    session: QuizSession
    name: PhaseName = field(default=PhaseName.PLAYING, init=False)


@dataclass(frozen=True)
class Result:
    session: QuizSession
    name: PhaseName = field(default=PhaseName.RESULT, init=False)


Phase = Union[Menu, Loading, Error, Playing, Result]
