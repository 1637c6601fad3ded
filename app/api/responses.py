from datetime import datetime, timezone
from typing import Any


def success(data: Any, **extra: Any) -> dict[str, Any]:
    """Standard success envelope: {"success": true, "data": ..., "timestamp": ISO}."""
    return {"success": True, "data": data, **extra, "timestamp": datetime.now(timezone.utc).isoformat()}


def failure(error: str, message: str) -> dict[str, Any]:
    return {"success": False, "error": error, "message": message}
