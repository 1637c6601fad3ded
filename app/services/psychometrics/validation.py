"""
Checks on inbound raw-score maps, run before any scoring.
"""

import math
from typing import Any

from app.core.exceptions import InvalidRawScoresError, UnknownInventoryError
from app.models.results import RawScoreSet
from app.services.psychometrics.constants import DISC_CHOICES_PER_ITEM, LIKERT_MAX, LIKERT_MIN
from app.services.psychometrics.items import VALID_INVENTORIES
from app.services.psychometrics.parser import decode_choice


def validate_inventories(inventories: Any) -> list[str]:
    if not isinstance(inventories, list) or not inventories:
        raise UnknownInventoryError(f"inventories must be a non-empty list drawn from {', '.join(VALID_INVENTORIES)}")
    unknown = [name for name in inventories if name not in VALID_INVENTORIES]
    if unknown:
        raise UnknownInventoryError(
            f"Unknown inventories: {', '.join(map(str, unknown))}. Valid options: {', '.join(VALID_INVENTORIES)}"
        )
    # keep request order, drop duplicates
    return list(dict.fromkeys(inventories))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _check_value(item_id: str, value: float, inventory: str) -> None:
    if inventory == "disc":
        if value != int(value) or value < 0:
            raise InvalidRawScoresError(f'Item "{item_id}" has an invalid choice encoding: {value}')
        most, least = decode_choice(value)
        if most >= DISC_CHOICES_PER_ITEM or least >= DISC_CHOICES_PER_ITEM:
            raise InvalidRawScoresError(
                f'Item "{item_id}" choice {value} must encode most*10 + least'
                f" with both in 0-{DISC_CHOICES_PER_ITEM - 1}"
            )
    elif not LIKERT_MIN <= value <= LIKERT_MAX:
        raise InvalidRawScoresError(
            f'Item "{item_id}" score {value} is outside {LIKERT_MIN}-{LIKERT_MAX}',
        )


def validate_raw_scores(raw_scores: Any, inventory: str | None = None) -> RawScoreSet:
    """
    Validate a raw-score map and return it with float samples.

    Every value must be a non-empty list of finite numbers. When ``inventory`` is
    given, samples are also range-checked for that inventory: 1-5 for bigfive and
    mbti, an encoded most/least pair for disc.
    """
    if not isinstance(raw_scores, dict):
        raise InvalidRawScoresError(
            'rawScores object is required. Format: { "itemId": [score1, score2, ...] }',
            error="Invalid request format",
        )
    if inventory is not None and inventory not in VALID_INVENTORIES:
        raise UnknownInventoryError(f"Unknown inventory: {inventory}")

    validated: RawScoreSet = {}
    for item_id, scores in raw_scores.items():
        if not isinstance(scores, list) or not scores:
            raise InvalidRawScoresError(
                f'Item "{item_id}" must have a non-empty array of scores', error="Invalid score format"
            )
        for value in scores:
            if not _is_number(value):
                raise InvalidRawScoresError(f'All scores must be finite numbers. Found invalid score in "{item_id}"')
            if inventory is not None:
                _check_value(item_id, value, inventory)
        validated[str(item_id)] = [float(value) for value in scores]
    return validated


def split_by_inventory(raw_scores: RawScoreSet) -> dict[str, RawScoreSet]:
    """Group item ids by the inventory their prefix belongs to."""
    groups: dict[str, RawScoreSet] = {name: {} for name in VALID_INVENTORIES}
    for item_id, scores in raw_scores.items():
        if item_id.startswith("mbti_"):
            groups["mbti"][item_id] = scores
        elif item_id.startswith("disc_"):
            groups["disc"][item_id] = scores
        else:
            groups["bigfive"][item_id] = scores
    return groups
