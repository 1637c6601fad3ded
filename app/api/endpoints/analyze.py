from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from app.api.responses import success
from app.core.config import settings
from app.services.analysis_runner import analysis_runner
from app.services.psychometrics.validation import validate_inventories

router = APIRouter(prefix="/analyze", tags=["analyze"])


class AnalyzeRequest(BaseModel):
    model: str = Field(min_length=1, description="Model identifier on the provider, e.g. openai/gpt-4o")
    inventories: list[str] = Field(default_factory=lambda: ["bigfive"])
    persona: str = Field(default="Base Model")
    systemPrompt: str = Field(default="", description="Optional system prompt applied to every query")


def _job_not_found(job_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Analysis job {job_id} not found")


@router.post("", status_code=202)
async def start_analysis(payload: AnalyzeRequest) -> dict:
    inventories = validate_inventories(payload.inventories)
    if not settings.OPENROUTER_API_KEY:
        logger.error("Analysis requested but OPENROUTER_API_KEY is not configured")
        raise HTTPException(status_code=503, detail="OpenRouter API key is not configured")

    job = analysis_runner.start(
        payload.model.strip(),
        inventories,
        persona=payload.persona or "Base Model",
        system_prompt=payload.systemPrompt,
    )
    return success(job.model_dump(mode="json"))


@router.get("/{job_id}")
async def get_analysis(job_id: str) -> dict:
    job = analysis_runner.get_job(job_id)
    if job is None:
        raise _job_not_found(job_id)
    return success(job.model_dump(mode="json"))


@router.delete("/{job_id}")
async def cancel_analysis(job_id: str) -> dict:
    job = analysis_runner.cancel(job_id)
    if job is None:
        raise _job_not_found(job_id)
    return success(job.model_dump(mode="json"))
