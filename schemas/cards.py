# schemas/cards.py
from __future__ import annotations

import math
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field, field_validator


class NumericAnswer(BaseModel):
    kind: Literal["numeric"] = "numeric"
    value: Union[int, float]

    @field_validator("value")
    @classmethod
    def _finite(cls, v: Union[int, float]) -> Union[int, float]:
        if not math.isfinite(v):
            raise ValueError("Answer is not finite.")
        return v


class FormattedAnswer(BaseModel):
    kind: Literal["formatted"] = "formatted"
    text: str = Field(min_length=1)


Answer = Annotated[Union[NumericAnswer, FormattedAnswer], Field(discriminator="kind")]


class QuestionResult(BaseModel):
    question: str
    answer: Answer


class PatternInfo(BaseModel):
    index: int
    name: str
    title: str


class QuestionOut(BaseModel):
    question: str
    answer: Answer
    # answer as it is shown on the back of the card
    answer_text: str


class CardView(BaseModel):
    question: str
    question_text: str
    answer: str
    question_count: int = Field(ge=0)
    front_visible: bool
    back_visible: bool
    question_classes: List[str]
    answer_classes: List[str]


class SessionOut(BaseModel):
    id: str
    view: CardView
