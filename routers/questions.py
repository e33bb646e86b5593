# routers/questions.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from generator import default_generator
from schemas.cards import PatternInfo, QuestionOut
from session import render_answer

router = APIRouter(tags=["questions"])


@router.get("/patterns", response_model=List[PatternInfo])
def list_patterns():
    return default_generator().pattern_infos()


@router.get("/questions/random", response_model=QuestionOut)
def random_question(
    seed: Optional[int] = Query(default=None, description="Same seed, same question"),
):
    result = default_generator(seed=seed).generate_question()
    return QuestionOut(
        question=result.question,
        answer=result.answer,
        answer_text=render_answer(result.answer),
    )
