from fastapi import APIRouter, HTTPException, Query
from loguru import logger

from app.api.responses import success
from app.models.results import ModelProfile
from app.models.run import RunRecord
from app.services.run_store import run_store

router = APIRouter(prefix="/runs", tags=["runs"])


@router.get("")
async def list_runs(
    model: str | None = Query(default=None, description="Case-insensitive substring of the model name"),
    persona: str | None = Query(default=None, description="Exact persona name"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> dict:
    runs = await run_store.list_runs(model=model, persona=persona, limit=limit, offset=offset)
    return success([run.model_dump() for run in runs], count=len(runs))


@router.post("", status_code=201)
async def save_run(profile: ModelProfile) -> dict:
    """Persist a profile that was produced elsewhere (e.g. scored from uploaded raw scores)."""
    run_id = await run_store.save_run(RunRecord.from_profile(profile))
    if run_id is None:
        logger.error(f"Failed to save run for {profile.model_name}")
        raise HTTPException(status_code=503, detail="Run storage is unavailable")
    return success({"id": run_id})


@router.get("/{run_id}")
async def get_run(run_id: str) -> dict:
    run = await run_store.get_run(run_id)
    if run is None:
        raise HTTPException(status_code=404, detail=f"Run {run_id} not found")
    return success(run.model_dump())


@router.delete("/{run_id}")
async def delete_run(run_id: str) -> dict:
    if not await run_store.delete_run(run_id):
        raise HTTPException(status_code=404, detail=f"Run {run_id} not found")
    return success({"id": run_id, "deleted": True})
