"""
Answer Extractor

Model output is untrusted text. It may wrap the JSON in prose or code
fences, triple its quotation marks, truncate the array, or omit fields.

Extraction is total: it returns either a list of item records or None,
and never raises. Normalization then turns any record into a fully
specified item.
"""

import json
import logging

from finlit.services.quiz.models import OPTION_COUNT

logger = logging.getLogger(__name__)

TRIPLE_QUOTE = '"""'
PLACEHOLDER_OPTIONS = ["Option A", "Option B", "Option C", "Option D"]
OPTION_LETTERS = "ABCD"

APOLOGY_MESSAGE = "I apologize, but I could not generate a response at this time."


def find_bracketed_span(text: str) -> str | None:
    """Return the text from the first '[' to the last ']', if both exist in order."""
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end <= start:
        return None
    return text[start:end + 1]


def extract_questions(raw: str | None) -> list[dict] | None:
    """
    Parse raw model output into item-shaped records.

    Returns:
        The object elements of the first bracketed JSON array, or None when
        there is no array, it does not parse, or it holds no objects
    """
    if not raw:
        return None

    cleaned = raw.replace(TRIPLE_QUOTE, '"')

    span = find_bracketed_span(cleaned)
    if span is None:
        logger.warning("[Quiz] No JSON array found in model output")
        return None

    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        logger.warning("[Quiz] Model output is not valid JSON: %s", e)
        return None

    if not isinstance(parsed, list):
        return None

    records = [record for record in parsed if isinstance(record, dict)]
    if not records:
        logger.warning("[Quiz] Model output contained no question objects")
        return None

    return records


def extract_answer(raw: str | None) -> str:
    """Chat answers are the raw text itself, or a fixed apology when empty."""
    if raw is None or not raw.strip():
        return APOLOGY_MESSAGE
    return raw


# ── Normalization ────────────────────────────────────────────────────────────

def normalize_answer_index(value) -> int:
    """Coerce correctAnswer to an index in [0, 3]; anything else becomes 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        index = value
    elif isinstance(value, float) and value.is_integer():
        index = int(value)
    elif isinstance(value, str):
        text = value.strip().upper()
        if text.isdigit():
            index = int(text)
        elif len(text) == 1 and text in OPTION_LETTERS:
            index = OPTION_LETTERS.index(text)
        else:
            return 0
    else:
        return 0

    if 0 <= index < OPTION_COUNT:
        return index
    return 0


def normalize_options(value) -> list[str]:
    if not isinstance(value, list) or len(value) < OPTION_COUNT:
        return list(PLACEHOLDER_OPTIONS)
    return [str(option) for option in value[:OPTION_COUNT]]


def normalize_question(record: dict, position: int) -> dict:
    """
    Fill every missing or unusable field of a parsed record.

    Args:
        record: One element of the parsed array
        position: Zero-based position in the batch, used for placeholders

    Returns:
        Dict with question, options, correctAnswer and explanation, all valid
    """
    question = record.get("question")
    if not isinstance(question, str) or not question.strip():
        question = f"Question {position + 1}"

    explanation = record.get("explanation")
    if explanation is None:
        explanation = ""

    return {
        "question": question,
        "options": normalize_options(record.get("options")),
        "correctAnswer": normalize_answer_index(record.get("correctAnswer")),
        "explanation": str(explanation),
    }
