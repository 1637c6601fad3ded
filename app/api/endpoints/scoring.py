from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.api.responses import success
from app.services.psychometrics.items import VALID_INVENTORIES
from app.services.psychometrics.profile import score_inventories
from app.services.psychometrics.scoring import calculate_big_five_scores, calculate_disc_scores, calculate_mbti_scores
from app.services.psychometrics.validation import split_by_inventory, validate_inventories, validate_raw_scores

router = APIRouter(tags=["scoring"])


class ScoreRequest(BaseModel):
    # Checked by validate_raw_scores so errors use the 400 envelope
    rawScores: Any = None


class PsychometricsRequest(ScoreRequest):
    inventories: Any = Field(default_factory=lambda: list(VALID_INVENTORIES))


@router.post("/bigfive")
async def score_big_five(payload: ScoreRequest) -> dict:
    raw_scores = validate_raw_scores(payload.rawScores, "bigfive")
    return success(calculate_big_five_scores(raw_scores).model_dump(by_alias=True))


@router.post("/mbti")
async def score_mbti(payload: ScoreRequest) -> dict:
    raw_scores = validate_raw_scores(payload.rawScores, "mbti")
    return success(calculate_mbti_scores(raw_scores).model_dump(by_alias=True))


@router.post("/disc")
async def score_disc(payload: ScoreRequest) -> dict:
    raw_scores = validate_raw_scores(payload.rawScores, "disc")
    return success(calculate_disc_scores(raw_scores).model_dump(by_alias=True))


@router.post("/psychometrics")
async def score_psychometrics(payload: PsychometricsRequest) -> dict:
    """Score several inventories from one raw-score map; failures come back as warnings."""
    inventories = validate_inventories(payload.inventories)
    raw_scores = validate_raw_scores(payload.rawScores)
    for inventory, group in split_by_inventory(raw_scores).items():
        if inventory in inventories:
            validate_raw_scores(group, inventory)

    results, errors = score_inventories(raw_scores, inventories)
    data = {key: result.model_dump(by_alias=True) for key, result in results.items()}
    warnings = [f"{inventory}: {message}" for inventory, message in errors.items()]
    return success(data, warnings=warnings) if warnings else success(data)
