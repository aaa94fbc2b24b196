"""Эндпоинт мониторинга."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter

from ..config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, Any]:
    return {
        "status": "ok",
        "app": get_settings().app_name,
        "time": datetime.now(timezone.utc).isoformat(),
    }
