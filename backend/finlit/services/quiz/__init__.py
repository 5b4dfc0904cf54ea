"""
Quiz Pipeline

Generates quiz items from the language model (with a pre-authored fallback
bank), encodes each generated item's answer in its id, and scores
submissions against generated and curated items alike.
"""

from finlit.services.quiz.generator import QuizGenerator
from finlit.services.quiz.identity import decode, encode, parse_item_id
from finlit.services.quiz.scoring import ScoringEngine

__all__ = [
    "QuizGenerator",
    "ScoringEngine",
    "decode",
    "encode",
    "parse_item_id",
]
