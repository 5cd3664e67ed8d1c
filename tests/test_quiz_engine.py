"""
Tests for the quiz progression transitions and scoring helpers
"""

import pytest

from quizrunner.domain.enums import Outcome, Verdict
from quizrunner.domain.models import Question
from quizrunner.engine import quiz_engine
from quizrunner.engine.scoring import answer_outcome, result_verdict


class TestSelectOption:
    def test_correct_answer_scores(self, session):
        s = quiz_engine.select_option(session, 1)
        assert s.score == 1
        assert s.answered is True
        assert s.selected_option == 1

    def test_wrong_answer_does_not_score(self, session):
        s = quiz_engine.select_option(session, 0)
        assert s.score == 0
        assert s.answered is True
        assert s.selected_option == 0

    def test_second_selection_is_ignored(self, session):
        s = quiz_engine.select_option(session, 0)
        again = quiz_engine.select_option(s, 1)
        assert again is s
        assert again.score == 0
        assert again.selected_option == 0

    def test_original_session_is_untouched(self, session):
        quiz_engine.select_option(session, 1)
        assert session.answered is False
        assert session.score == 0

    @pytest.mark.parametrize("index", [-1, 4])
    def test_out_of_range_index(self, session, index):
        with pytest.raises(ValueError):
            quiz_engine.select_option(session, index)

    def test_unmarked_question_never_scores(self):
        q = Question(id=0, text="Q", options=("a", "b", "c", "d"), correct_index=-1)
        s = quiz_engine.start_session([q])
        for i in range(4):
            assert quiz_engine.select_option(s, i).score == 0


class TestAdvance:
    def test_moves_to_next_question(self, session):
        s = quiz_engine.advance(quiz_engine.select_option(session, 1))
        assert s.current_index == 1
        assert s.answered is False
        assert s.selected_option is None
        assert s.score == 1

    def test_requires_an_answer(self, session):
        with pytest.raises(ValueError):
            quiz_engine.advance(session)

    def test_last_question(self, session):
        s = quiz_engine.advance(quiz_engine.select_option(session, 1))
        assert quiz_engine.is_last_question(s)
        with pytest.raises(ValueError):
            quiz_engine.advance(quiz_engine.select_option(s, 2))


class TestRestart:
    def test_resets_progress_and_keeps_questions(self, session):
        s = quiz_engine.select_option(session, 1)
        s = quiz_engine.select_option(quiz_engine.advance(s), 2)

        fresh = quiz_engine.restart(s)
        assert fresh.score == 0
        assert fresh.current_index == 0
        assert fresh.answered is False
        assert fresh.selected_option is None
        assert fresh.questions is s.questions


class TestStartSession:
    def test_empty_question_list(self):
        with pytest.raises(ValueError):
            quiz_engine.start_session([])


class TestScoring:
    def test_answer_outcome(self, questions):
        q = questions[0]
        assert answer_outcome(q, 1) == Outcome.CORRECT
        assert answer_outcome(q, 3) == Outcome.WRONG
        assert answer_outcome(q, None) == Outcome.WRONG

    def test_answer_outcome_unmarked(self):
        q = Question(id=0, text="Q", options=("a", "b", "c", "d"), correct_index=-1)
        assert answer_outcome(q, 0) == Outcome.UNMARKED

    @pytest.mark.parametrize(
        "score,total,expected",
        [
            (4, 4, Verdict.PERFECT),
            (3, 4, Verdict.GOOD),
            (2, 4, Verdict.KEEP_PRACTICING),
            (0, 3, Verdict.KEEP_PRACTICING),
            (2, 3, Verdict.GOOD),
        ],
    )
    def test_result_verdict(self, score, total, expected):
        assert result_verdict(score, total) == expected


class TestQuestionModel:
    def test_requires_four_options(self):
        with pytest.raises(ValueError):
            Question(id=0, text="Q", options=("a", "b", "c"), correct_index=0)

    def test_correct_index_range(self):
        with pytest.raises(ValueError):
            Question(id=0, text="Q", options=("a", "b", "c", "d"), correct_index=4)
