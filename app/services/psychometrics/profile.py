import time

from loguru import logger

from app.models.results import InventoryResult, ModelProfile, RawScoreSet
from app.services.psychometrics.scoring import (
    calculate_big_five_scores,
    calculate_disc_scores,
    calculate_mbti_scores,
    derive_mbti_from_big_five,
)
from app.services.psychometrics.validation import split_by_inventory


def score_inventories(
    raw_scores: RawScoreSet, inventories: list[str], logs: list[str] | None = None
) -> tuple[dict[str, InventoryResult], dict[str, str]]:
    """
    Score each requested inventory independently.

    Returns the results keyed by inventory (bigfive also yields mbti_derived) and
    an error message per inventory that failed to score.
    """
    groups = split_by_inventory(raw_scores)
    results: dict[str, InventoryResult] = {}
    errors: dict[str, str] = {}

    for inventory in inventories:
        try:
            if inventory == "bigfive":
                big_five = calculate_big_five_scores(groups["bigfive"]).to_inventory_result(groups["bigfive"])
                results["bigfive"] = big_five
                results["mbti_derived"] = derive_mbti_from_big_five(big_five)
            elif inventory == "disc":
                results["disc"] = calculate_disc_scores(groups["disc"]).to_inventory_result(groups["disc"])
            elif inventory == "mbti":
                results["mbti"] = calculate_mbti_scores(groups["mbti"]).to_inventory_result(groups["mbti"])
        except Exception as e:
            logger.exception(f"Scoring failed for {inventory}: {e}")
            errors[inventory] = str(e)
            if logs is not None:
                logs.append(f"Scoring failed for {inventory}: {e}")

    return results, errors


def assemble_profile(
    model_name: str,
    raw_scores: RawScoreSet,
    inventories: list[str],
    persona: str = "Base Model",
    system_prompt: str = "",
    logs: list[str] | None = None,
    timestamp: int | None = None,
) -> ModelProfile:
    results, _ = score_inventories(raw_scores, inventories, logs)
    return ModelProfile(
        model_name=model_name,
        persona=persona,
        system_prompt=system_prompt,
        timestamp=timestamp if timestamp is not None else int(time.time() * 1000),
        results=results,
    )
