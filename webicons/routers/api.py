"""JSON API поверх резолвера.

- GET /api/webicons/{family}       — вендоры семейства и вендор по умолчанию
- GET /api/webicons/{family}/{id}  — результат резолва без HTML
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query

from .. import metadata
from ..config import get_settings
from ..metadata import WebiconFamily
from ..service import resolve_webicon

router = APIRouter(prefix="/api/webicons", tags=["api"])


@router.get("/{family}")
def family_info(family: str) -> dict[str, Any]:
    settings = get_settings()
    family = WebiconFamily.parse(family)
    config = metadata.load_config(settings.metadata_source, timeout=settings.metadata_timeout)
    return {
        "family": family.value,
        "vendors": metadata.list_vendors(config, family),
        "default_vendor": metadata.get_default_vendor(config, family),
    }


@router.get("/{family}/{id}")
def resolve(family: str, id: str, vendor: str | None = Query(None)) -> dict[str, Any]:
    resolved = resolve_webicon(family, id, vendor)
    return {
        "family": resolved.family.value,
        "id": resolved.id,
        "vendor": resolved.vendor,
        "title": resolved.title,
        "metadata": resolved.metadata.model_dump(),
    }
