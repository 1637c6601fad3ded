from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RawScoreSet = dict[str, list[float]]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InventoryResult(_CamelModel):
    """Scores of one inventory for one run. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    inventory_name: str
    raw_scores: RawScoreSet = Field(default_factory=dict)
    trait_scores: dict[str, float]
    type: str | None = None
    psi: dict[str, float] | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class BigFiveScores(_CamelModel):
    domains: dict[str, float]
    facets: dict[str, float]
    interpretations: dict[str, str]
    descriptions: dict[str, str] = Field(default_factory=dict)
    items_answered: int = 0

    def to_inventory_result(self, raw_scores: RawScoreSet) -> InventoryResult:
        return InventoryResult(
            inventory_name="Big Five (IPIP-NEO-120)",
            raw_scores=raw_scores,
            trait_scores=self.domains,
            details={
                "facets": self.facets,
                "interpretations": self.interpretations,
                "itemsAnswered": self.items_answered,
            },
        )


class MBTIScores(_CamelModel):
    type: str
    dimensions: dict[str, float]
    psi: dict[str, float]
    preferences: dict[str, str]
    description: str = ""

    def to_inventory_result(self, raw_scores: RawScoreSet) -> InventoryResult:
        return InventoryResult(
            inventory_name="MBTI",
            raw_scores=raw_scores,
            trait_scores=self.dimensions,
            type=self.type,
            psi=self.psi,
            details={"preferences": self.preferences, "description": self.description},
        )


class DISCScores(_CamelModel):
    scores: dict[str, float]
    percentages: dict[str, float]
    profile: str
    profile_name: str
    interpretations: dict[str, str]

    def to_inventory_result(self, raw_scores: RawScoreSet) -> InventoryResult:
        return InventoryResult(
            inventory_name="DISC",
            raw_scores=raw_scores,
            trait_scores=self.scores,
            type=self.profile,
            details={
                "percentages": self.percentages,
                "profileName": self.profile_name,
                "interpretations": self.interpretations,
            },
        )


class ModelProfile(_CamelModel):
    """All inventory results of one run, keyed by inventory ("bigfive", "mbti_derived", "mbti", "disc")."""

    model_name: str
    persona: str = "Base Model"
    system_prompt: str = ""
    timestamp: int  # epoch milliseconds
    results: dict[str, InventoryResult] = Field(default_factory=dict)
