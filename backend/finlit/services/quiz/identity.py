"""
Item Identity Encoder

Generated quiz items are never stored, so their correct answer travels in
the item id itself:

    ai-generated-<timestamp_ms>-<ordinal>-<answer_index>

Curated item ids are plain store keys and need a lookup to resolve.
"""

import time
from dataclasses import dataclass

GENERATED_PREFIX = "ai-generated"
DELIMITER = "-"
MAX_ANSWER_INDEX = 3


@dataclass(frozen=True)
class CuratedItemId:
    value: str


@dataclass(frozen=True)
class GeneratedItemId:
    timestamp_ms: int
    ordinal: int
    answer_index: int


def new_generated_id(ordinal: int, answer_index: int, timestamp_ms: int | None = None) -> GeneratedItemId:
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return GeneratedItemId(timestamp_ms=timestamp_ms, ordinal=ordinal, answer_index=answer_index)


def encode(item_id: GeneratedItemId) -> str:
    return DELIMITER.join(
        [
            GENERATED_PREFIX,
            str(item_id.timestamp_ms),
            str(item_id.ordinal),
            str(item_id.answer_index),
        ]
    )


def is_generated(raw_id: str) -> bool:
    return raw_id.startswith(GENERATED_PREFIX + DELIMITER)


def _parse_int(part: str | None, default: int = 0) -> int:
    if part is None or not part.isdigit():
        return default
    return int(part)


def parse_item_id(raw_id: str) -> CuratedItemId | GeneratedItemId:
    """
    Turn a wire id back into its tagged form.

    Malformed generated ids never raise: missing or non-numeric parts
    become 0, and so does an answer index outside [0, 3].
    """
    if not is_generated(raw_id):
        return CuratedItemId(raw_id)

    parts = raw_id[len(GENERATED_PREFIX) + 1:].split(DELIMITER)
    timestamp = parts[0] if len(parts) > 0 else None
    ordinal = parts[1] if len(parts) > 1 else None
    answer = parts[-1] if len(parts) > 2 else None

    answer_index = _parse_int(answer)
    if answer_index > MAX_ANSWER_INDEX:
        answer_index = 0

    return GeneratedItemId(
        timestamp_ms=_parse_int(timestamp),
        ordinal=_parse_int(ordinal),
        answer_index=answer_index,
    )


def decode(raw_id: str) -> int:
    """Return the correct option index carried by a generated item id."""
    parsed = parse_item_id(raw_id)
    if isinstance(parsed, GeneratedItemId):
        return parsed.answer_index
    return 0
