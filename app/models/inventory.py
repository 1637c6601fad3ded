from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

Domain = Literal["N", "E", "O", "A", "C"]
Dimension = Literal["IE", "SN", "TF", "JP"]
Quadrant = Literal["D", "I", "S", "C"]


class ItemType(str, Enum):
    """Response format of an inventory item."""

    LIKERT_5 = "likert_5"
    CHOICE_BINARY = "choice_binary"


class _FrozenItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class LikertItem(_FrozenItem):
    """Big Five statement rated from 1 (strongly disagree) to 5 (strongly agree)."""

    kind: Literal["statement"] = "statement"
    type: ItemType = ItemType.LIKERT_5
    text: str
    domain: Domain
    facet: str  # "N1" .. "C6"
    keyed: Literal["+", "-"] = "+"

    @property
    def reverse_keyed(self) -> bool:
        return self.keyed == "-"


class BipolarItem(_FrozenItem):
    """
    MBTI item rated between two descriptions.
    1 = left description (first letter of the dimension), 5 = right description.
    """

    kind: Literal["bipolar"] = "bipolar"
    type: ItemType = ItemType.LIKERT_5
    dimension: Dimension
    left_text: str
    right_text: str


class DiscWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    quadrant: Quadrant


class ForcedChoiceItem(_FrozenItem):
    """DISC item: pick the word that describes you most and the one that describes you least."""

    kind: Literal["forced_choice"] = "forced_choice"
    type: ItemType = ItemType.CHOICE_BINARY
    words: tuple[DiscWord, DiscWord, DiscWord, DiscWord]


InventoryItem = Annotated[LikertItem | BipolarItem | ForcedChoiceItem, Field(discriminator="kind")]
