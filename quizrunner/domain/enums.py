# quizrunner/domain/enums.py
from __future__ import annotations

from enum import Enum


class PhaseName(str, Enum):
    MENU = "menu"
    LOADING = "loading"
    ERROR = "error"
    PLAYING = "playing"
    RESULT = "result"


class Outcome(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    UNMARKED = "unmarked"


class Verdict(str, Enum):
    PERFECT = "perfect"
    GOOD = "good"
    KEEP_PRACTICING = "keep_practicing"
