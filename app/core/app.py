from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.endpoints.health import router as health_router
from app.api.main import api_router
from app.api.responses import failure
from app.core.exceptions import InvalidRawScoresError, PsychometricsError
from app.services.analysis_runner import analysis_runner
from app.services.run_store import run_store

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    if not settings.OPENROUTER_API_KEY:
        logger.warning("OPENROUTER_API_KEY is not set. Analysis requests will be rejected until configured.")
    yield
    await analysis_runner.shutdown()
    try:
        await run_store.close()
    except Exception as exc:
        logger.warning(f"Failed to close RunStore Redis client: {exc}")


app = FastAPI(
    title=settings.APP_TITLE,
    description="Administers Big Five, MBTI and DISC inventories to language models and scores the answers",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidRawScoresError)
async def invalid_raw_scores_handler(request: Request, exc: InvalidRawScoresError) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content=failure(exc.error, exc.message))


@app.exception_handler(PsychometricsError)
async def psychometrics_error_handler(request: Request, exc: PsychometricsError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=400, content=failure(type(exc).__name__, str(exc)))


app.include_router(health_router)
app.include_router(api_router)
