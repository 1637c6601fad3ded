from fastapi import APIRouter

from app.api.responses import success
from app.services.run_store import run_store

router = APIRouter(tags=["stats"])


@router.get("/stats")
async def get_stats() -> dict:
    """Number of persisted runs; null when Redis is unreachable."""
    return success(await run_store.stats())
