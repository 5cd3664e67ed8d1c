# quizrunner/main.py
from __future__ import annotations

import asyncio
import os
import sys
from typing import List, Optional

from quizrunner.bank.loader import LoaderConfig, QuizLoader
from quizrunner.domain.enums import Outcome, PhaseName, Verdict
from quizrunner.domain.models import Error, Playing, Question
from quizrunner.engine.controller import QuizController
from quizrunner.engine.scoring import answer_outcome, result_verdict
from quizrunner.utils.logger_setup import setup_logging

VERDICT_TEXT = {
    Verdict.PERFECT: "Perfect! Excellent work.",
    Verdict.GOOD: "Well done!",
    Verdict.KEEP_PRACTICING: "Keep practicing.",
}


class BackToMenu(Exception):
    pass


def _get_env(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip()


def _read(prompt: str) -> str:
    s = input(prompt).strip()
    if s.lower() in ("q", "quit", "exit"):
        raise KeyboardInterrupt()
    if s.lower() in ("m", "menu"):
        raise BackToMenu()
    return s


def _print_question(q: Question, index: int, total: int, score: int) -> None:
    print("\n" + "=" * 80)
    print(f"Question {index + 1} / {total} | Score: {score}")
    print("-" * 80)
    print(q.text)
    print("-" * 80)
    for i, opt in enumerate(q.options, start=1):
        print(f"{i}) {opt}")
    print("=" * 80)


def _print_feedback(q: Question, selected: int) -> None:
    outcome = answer_outcome(q, selected)
    if outcome == Outcome.CORRECT:
        print("\nCorrect!")
    elif outcome == Outcome.WRONG:
        print(f"\nWrong. The answer was {q.correct_index + 1}) {q.options[q.correct_index]}")
    else:
        print("\nNo correct answer is marked for this question.")
    if q.explanation:
        print(f"Explanation: {q.explanation}")


def _read_option() -> int:
    while True:
        s = _read("Answer (1-4, M=menu, Q=quit): ")
        if s in ("1", "2", "3", "4"):
            return int(s) - 1
        print("Please type a number between 1 and 4.")


def _menu(controller: QuizController) -> str:
    quizzes = controller.loader.available_quizzes()
    print("\nQUIZ MASTER")
    for i, name in enumerate(quizzes, start=1):
        print(f"{i}) {name.replace('_', ' ').upper()}")
    while True:
        s = input("Quiz number or name (Q=quit): ").strip()
        if s.lower() in ("q", "quit", "exit"):
            raise KeyboardInterrupt()
        if s.isdigit() and 1 <= int(s) <= len(quizzes):
            return quizzes[int(s) - 1]
        if s:
            return s


def _play(controller: QuizController) -> None:
    while isinstance(controller.phase, Playing):
        session = controller.phase.session
        q = session.current_question
        _print_question(q, session.current_index, session.total, session.score)

        selected = _read_option()
        controller.select_option(selected)
        _print_feedback(q, selected)

        _read("\nPress Enter to continue... ")
        controller.advance()


def _result(controller: QuizController) -> bool:
    """True when the player wants to replay the same quiz."""
    session = controller.phase.session
    print("\n--- QUIZ COMPLETE ---")
    print(controller.quiz_title)
    print(f"Score: {session.score} / {session.total}")
    print(VERDICT_TEXT[result_verdict(session.score, session.total)])
    s = _read("R=replay, M=menu, Q=quit: ")
    return s.lower() in ("r", "replay")


def run(controller: QuizController, quiz_id: Optional[str] = None) -> int:
    while True:
        try:
            if not quiz_id:
                quiz_id = _menu(controller)

            print("\nLoading quiz...")
            asyncio.run(controller.open_quiz(quiz_id))

            if isinstance(controller.phase, Error):
                print(f"\nLoading error: {controller.phase.message}")
                _read("Press Enter to go back to the menu (Q=quit)... ")
                raise BackToMenu()

            while True:
                _play(controller)
                if controller.phase.name != PhaseName.RESULT or not _result(controller):
                    break
                controller.restart()
            raise BackToMenu()

        except BackToMenu:
            controller.return_to_menu()
            quiz_id = None
        except (KeyboardInterrupt, EOFError):
            print("\nBye.")
            controller.loader.close()
            return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    setup_logging(
        console_level=_get_env("QUIZ_LOG_LEVEL", "WARNING") or "WARNING",
        log_file=_get_env("QUIZ_LOG_FILE") or None,
    )

    controller = QuizController(QuizLoader(LoaderConfig.from_env()))
    quiz_id = args[0] if args else _get_env("QUIZ")
    return run(controller, quiz_id or None)


if __name__ == "__main__":
    raise SystemExit(main())
