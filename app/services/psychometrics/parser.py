"""
Turns free-text model answers into numeric samples.

A model that rambles, refuses or answers off-format is expected noise, not an
error: every miss resolves to the fixed fallback for the item type.
"""

import re

from loguru import logger

from app.models.inventory import ItemType
from app.services.psychometrics.constants import CHOICE_FALLBACK, DISC_CHOICES_PER_ITEM, LIKERT_FALLBACK

LIKERT_PATTERN = re.compile(r"\b([1-5])\b")
NUMBER_PATTERN = re.compile(r"\d+")


def fallback_for(item_type: ItemType) -> int:
    return CHOICE_FALLBACK if item_type == ItemType.CHOICE_BINARY else LIKERT_FALLBACK


def parse_likert(raw_text: str | None) -> int:
    if not isinstance(raw_text, str):
        return LIKERT_FALLBACK
    match = LIKERT_PATTERN.search(raw_text)
    if not match:
        logger.debug(f"No 1-5 rating found in response: {raw_text[:80]!r}")
        return LIKERT_FALLBACK
    return int(match.group(1))


def parse_choice(raw_text: str | None) -> int:
    """Parse a "most, least" answer (1-based) into the encoded value most*10 + least (0-based)."""
    if not isinstance(raw_text, str):
        return CHOICE_FALLBACK
    numbers = NUMBER_PATTERN.findall(raw_text)
    if len(numbers) < 2:
        logger.debug(f"Expected two choices in response: {raw_text[:80]!r}")
        return CHOICE_FALLBACK

    most, least = int(numbers[0]) - 1, int(numbers[1]) - 1
    if not (0 <= most < DISC_CHOICES_PER_ITEM and 0 <= least < DISC_CHOICES_PER_ITEM):
        logger.debug(f"Choice indices out of range in response: {raw_text[:80]!r}")
        return CHOICE_FALLBACK
    return encode_choice(most, least)


def parse_response(raw_text: str | None, item_type: ItemType) -> int:
    if item_type == ItemType.CHOICE_BINARY:
        return parse_choice(raw_text)
    return parse_likert(raw_text)


def encode_choice(most: int, least: int) -> int:
    return most * 10 + least


def decode_choice(encoded: float) -> tuple[int, int]:
    value = int(round(encoded))
    return value // 10, value % 10
