# session.py
"""
Flashcard sessions: the front/back card state machine and the in-memory
store the HTTP layer keeps them in.
"""
from __future__ import annotations

import logging
import os
import threading
import uuid
from collections import OrderedDict
from enum import Enum
from typing import List, Optional, Tuple

from formatting import format_number
from generator import QuestionGenerator, default_generator
from schemas.cards import Answer, CardView, FormattedAnswer, NumericAnswer, QuestionResult

logger = logging.getLogger("flashcards.session")

# question length thresholds for the card font size
LONG_QUESTION_CHARS = 60
MEDIUM_QUESTION_CHARS = 30

DEFAULT_MAX_SESSIONS = 1000


class Face(str, Enum):
    FRONT = "front"
    BACK = "back"


def render_answer(answer: Answer) -> str:
    match answer:
        case NumericAnswer(value=value):
            return format_number(value)
        case FormattedAnswer(text=text):
            return text
    raise TypeError(f"Unknown answer type: {type(answer).__name__}")


def question_classes(question: str) -> List[str]:
    if len(question) > LONG_QUESTION_CHARS:
        return ["question", "long"]
    if len(question) > MEDIUM_QUESTION_CHARS:
        return ["question", "medium"]
    return ["question"]


def answer_classes(question: str) -> List[str]:
    # only long questions shrink the answer too
    if len(question) > LONG_QUESTION_CHARS:
        return ["answer", "long"]
    return ["answer"]


class FlashcardSession:
    """
    One card on screen at a time, question side up until revealed.

    `next()` bumps the generator's question count and deals a fresh card;
    `reveal()` only flips the current one.
    """

    def __init__(self, generator: QuestionGenerator):
        self.generator = generator
        self.face = Face.FRONT
        self.current: QuestionResult = generator.generate_question()
        # requests for one session may run on different threadpool workers
        self._lock = threading.Lock()

    @property
    def question_count(self) -> int:
        return self.generator.question_count

    def reveal(self) -> None:
        with self._lock:
            self.face = Face.BACK

    def next(self) -> None:
        with self._lock:
            self.generator.question_count += 1
            self.current = self.generator.generate_question()
            self.face = Face.FRONT

    def view(self) -> CardView:
        with self._lock:
            question = self.current.question
            return CardView(
                question=question,
                question_text=question,
                answer=render_answer(self.current.answer),
                question_count=self.question_count,
                front_visible=self.face is Face.FRONT,
                back_visible=self.face is Face.BACK,
                question_classes=question_classes(question),
                answer_classes=answer_classes(question),
            )


class SessionStore:
    """Thread-safe, size-capped map of session id -> FlashcardSession."""

    def __init__(self, seed: Optional[int] = None, max_sessions: int = DEFAULT_MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self.seed = seed
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, FlashcardSession]" = OrderedDict()
        self._created = 0
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls) -> "SessionStore":
        seed = os.getenv("FLASHCARDS_SEED")
        max_sessions = os.getenv("FLASHCARDS_MAX_SESSIONS")
        return cls(
            seed=int(seed) if seed else None,
            max_sessions=int(max_sessions) if max_sessions else DEFAULT_MAX_SESSIONS,
        )

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> Tuple[str, FlashcardSession]:
        with self._lock:
            seed = None if self.seed is None else self.seed + self._created
            self._created += 1
            sid = uuid.uuid4().hex
            session = FlashcardSession(default_generator(seed=seed))
            self._sessions[sid] = session
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("session evicted: %s", evicted)
        logger.info("session created: %s", sid)
        return sid, session

    def get(self, sid: str) -> Optional[FlashcardSession]:
        with self._lock:
            return self._sessions.get(sid)
