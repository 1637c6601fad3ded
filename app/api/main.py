from fastapi import APIRouter

from .endpoints.analyze import router as analyze_router
from .endpoints.runs import router as runs_router
from .endpoints.scoring import router as scoring_router
from .endpoints.stats import router as stats_router

api_router = APIRouter(prefix="/api")


@api_router.get("")
async def root():
    return {"message": "AI Psychometric Profiler API is running"}


api_router.include_router(analyze_router)
api_router.include_router(scoring_router)
api_router.include_router(runs_router)
api_router.include_router(stats_router)
