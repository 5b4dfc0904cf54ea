"""
Pydantic models for quiz items and scoring.

Shared by the generator, the curated question store and the scoring
engine. Every QuizItem is fully specified: four options and a correct
index in [0, 3], whatever the model actually returned.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

OPTION_COUNT = 4


class ItemOrigin(str, Enum):
    CURATED = "curated"
    GENERATED = "generated"


class QuizItem(BaseModel):
    id: str
    question: str
    options: list[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_option_index: int = Field(ge=0, le=OPTION_COUNT - 1)
    category: str
    explanation: str = ""
    origin: ItemOrigin


class GeneratedQuiz(BaseModel):
    items: list[QuizItem]
    category: str
    generated_at: datetime
    source: str
    used_fallback: bool = False


class ScoredResult(BaseModel):
    item_id: str
    chosen_index: int
    correct_index: int
    is_correct: bool


class ScoreReport(BaseModel):
    results: list[ScoredResult]
    score: int
    total: int
    percentage: int
    recorded: bool = True  # False when the progress store could not be written
