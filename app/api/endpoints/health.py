from fastapi import APIRouter

from app.core.config import APP_VERSION, settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness check")
async def health_check() -> dict[str, str | bool]:
    return {
        "status": "ok",
        "version": APP_VERSION,
        "model_provider_configured": bool(settings.OPENROUTER_API_KEY),
    }
