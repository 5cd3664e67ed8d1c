# quizrunner/bank/parser.py
from __future__ import annotations

import logging
from typing import List, Tuple

from quizrunner.domain.errors import FormatError
from quizrunner.domain.models import NO_CORRECT_OPTION, OPTION_COUNT, Question

log = logging.getLogger(__name__)

BLOCK_SIZE = 6
CORRECT_MARKER = "*"


def parse_question_bank(raw_text: str) -> List[Question]:
    """
    Converts a plain-text question bank into questions.

    Every block is 6 non-blank lines: question, 4 options, explanation.
    The option starting with "*" is the correct one. A trailing partial
    block is dropped.
    """
    lines = _clean_lines(raw_text)
    if len(lines) < BLOCK_SIZE:
        raise FormatError()

    questions: List[Question] = []
    for start in range(0, len(lines) - BLOCK_SIZE + 1, BLOCK_SIZE):
        questions.append(_parse_block(lines[start : start + BLOCK_SIZE], start))

    dropped = len(lines) % BLOCK_SIZE
    if dropped:
        log.debug("Ignored %d trailing line(s) outside a complete block", dropped)
    return questions


def _clean_lines(raw_text: str) -> List[str]:
    # quotes have no meaning in the format, they are simply removed
    text = raw_text.replace('"', "")
    return [ln.strip() for ln in text.split("\n") if ln.strip()]


def _parse_block(block: List[str], block_id: int) -> Question:
    text = block[0]
    options, correct_index = _parse_options(block[1 : 1 + OPTION_COUNT], text)
    explanation = block[1 + OPTION_COUNT]

    if correct_index == NO_CORRECT_OPTION:
        log.warning('No correct answer marked for question "%s"', text)

    return Question(
        id=block_id,
        text=text,
        options=options,
        correct_index=correct_index,
        explanation=explanation,
    )


def _parse_options(raw_options: List[str], question_text: str) -> Tuple[Tuple[str, ...], int]:
    correct_index = NO_CORRECT_OPTION
    options = []
    for idx, opt in enumerate(raw_options):
        if opt.startswith(CORRECT_MARKER):
            if correct_index != NO_CORRECT_OPTION:
                log.warning('Several answers marked for question "%s", keeping the last one', question_text)
            correct_index = idx
            opt = opt[len(CORRECT_MARKER):].strip()
        options.append(opt)
    return tuple(options), correct_index
