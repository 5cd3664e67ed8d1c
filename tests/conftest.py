import pytest

from quizrunner.domain.models import Question, QuizSession

TWO_QUESTIONS = "Q1\nA\n*B\nC\nD\nExp1\nQ2\nE\nF\n*G\nH\nExp2"


@pytest.fixture
def two_question_text():
    return TWO_QUESTIONS


@pytest.fixture
def questions():
    return (
        Question(id=0, text="Q1", options=("A", "B", "C", "D"), correct_index=1, explanation="Exp1"),
        Question(id=6, text="Q2", options=("E", "F", "G", "H"), correct_index=2, explanation="Exp2"),
    )


@pytest.fixture
def session(questions):
    return QuizSession(questions=questions)


@pytest.fixture
def content_dir(tmp_path, two_question_text):
    (tmp_path / "general_knowledge.txt").write_text(two_question_text, encoding="utf-8")
    (tmp_path / "empty.txt").write_text("  \n\"\"\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("not a quiz", encoding="utf-8")
    return tmp_path
