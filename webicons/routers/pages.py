"""Публичные эндпоинты: страница атрибуции, редирект /emoji, favicon.

- GET /emoji/{id}?vendor=...     — редирект на /emojis/{id}
- GET /{family}/{id}?vendor=...  — HTML-страница атрибуции
- GET /favicon.ico               — статический файл
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse

from ..config import get_settings
from ..metadata import WebiconFamily
from ..service import resolve_webicon

router = APIRouter(tags=["pages"])


@router.get("/favicon.ico", include_in_schema=False)
async def get_favicon():
    path = Path(get_settings().favicon_path)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(path, media_type="image/x-icon")


@router.get("/emoji/{id}")
async def emoji_redirect(request: Request, id: str, vendor: str | None = Query(None)):
    """Короткий путь для эмодзи: /emoji/grinning → /emojis/grinning."""
    # id кодируется целиком: "?" и "#" в нём не должны стать query/fragment
    path = f"/{WebiconFamily.EMOJIS.value}/{quote(id, safe='')}"
    url = request.url.replace(path=path, query="")
    if vendor is not None:
        url = url.include_query_params(vendor=vendor)
    return RedirectResponse(url=str(url))


@router.get("/{family}/{id}", response_class=HTMLResponse)
def get_webicon(family: str, id: str, vendor: str | None = Query(None)):
    """Страница атрибуции webicon.

    Синхронный: загрузка конфига блокирующая, FastAPI выполняет
    обработчик в threadpool.
    """
    resolved = resolve_webicon(family, id, vendor)
    return HTMLResponse(resolved.document.render())
