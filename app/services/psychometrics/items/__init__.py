from typing import Final

from app.models.inventory import InventoryItem
from app.services.psychometrics.items.bigfive import BIG_FIVE_FACETS, BIG_FIVE_ITEMS
from app.services.psychometrics.items.disc import DISC_ITEMS
from app.services.psychometrics.items.mbti import MBTI_ITEMS, MBTI_POLES

VALID_INVENTORIES: Final[tuple[str, ...]] = ("bigfive", "mbti", "disc")

ITEMS_BY_ID: Final[dict[str, InventoryItem]] = {
    item.id: item for item in (*BIG_FIVE_ITEMS, *DISC_ITEMS, *MBTI_ITEMS)
}


def items_for_inventories(inventories: list[str]) -> list[InventoryItem]:
    """Collect the items to administer, in bigfive, disc, mbti order."""
    items: list[InventoryItem] = []
    if "bigfive" in inventories:
        items.extend(BIG_FIVE_ITEMS)
    if "disc" in inventories:
        items.extend(DISC_ITEMS)
    if "mbti" in inventories:
        items.extend(MBTI_ITEMS)
    return items


__all__ = [
    "BIG_FIVE_FACETS",
    "BIG_FIVE_ITEMS",
    "DISC_ITEMS",
    "ITEMS_BY_ID",
    "MBTI_ITEMS",
    "MBTI_POLES",
    "VALID_INVENTORIES",
    "items_for_inventories",
]
