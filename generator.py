# generator.py
from __future__ import annotations

import logging
import random
from typing import List, Optional

from patterns import ALL_PATTERNS, PatternFn
from schemas.cards import NumericAnswer, PatternInfo, QuestionResult

logger = logging.getLogger("flashcards.generator")

FALLBACK_QUESTION = "2 + 2"
FALLBACK_ANSWER = 4


def _pattern_name(fn: PatternFn) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def _pattern_title(fn: PatternFn) -> str:
    doc = (getattr(fn, "__doc__", None) or "").strip()
    return doc.splitlines()[0] if doc else _pattern_name(fn)


class QuestionGenerator:
    """
    Registry of question patterns plus the running question count.

    Patterns are only ever appended. Selection is uniform and repeats are
    allowed, so the same pattern may come up twice in a row.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.patterns: List[PatternFn] = []
        self.question_count = 0

    def add_pattern(self, fn: PatternFn) -> None:
        self.patterns.append(fn)

    def generate_question(self) -> QuestionResult:
        if not self.patterns:
            return QuestionResult(
                question=FALLBACK_QUESTION, answer=NumericAnswer(value=FALLBACK_ANSWER)
            )
        fn = self.rng.choice(self.patterns)
        logger.debug("pattern selected: %s", _pattern_name(fn))
        return fn(self.rng)

    def pattern_infos(self) -> List[PatternInfo]:
        return [
            PatternInfo(index=i, name=_pattern_name(fn), title=_pattern_title(fn))
            for i, fn in enumerate(self.patterns)
        ]


def default_generator(
    rng: Optional[random.Random] = None, seed: Optional[int] = None
) -> QuestionGenerator:
    gen = QuestionGenerator(rng=rng, seed=seed)
    for fn in ALL_PATTERNS:
        gen.add_pattern(fn)
    return gen
