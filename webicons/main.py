"""Точка входа webicons (FastAPI + Jinja2)."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from jinja2 import Environment, FileSystemLoader

from .config import get_settings
from .exceptions import WebiconError
from .routers import api, health, pages

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)

# Jinja2 шаблоны (страницы ошибок)
app.state.templates = Environment(
    loader=FileSystemLoader(str(BASE_DIR / "templates")),
    autoescape=True,
)

# Роутеры. pages последним: /{family}/{id} ловит всё двухсегментное
app.include_router(health.router)
app.include_router(api.router)
app.include_router(pages.router)


@app.exception_handler(WebiconError)
async def webicon_error_handler(request: Request, exc: WebiconError):
    """Ошибки резолва: JSON для API, HTML для браузера."""
    if exc.status_code >= 500:
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s: %s", request.method, request.url.path, exc.message)

    if request.url.path.startswith("/api/"):
        return JSONResponse(
            {"detail": exc.message, "error": type(exc).__name__},
            status_code=exc.status_code,
        )
    template = app.state.templates.get_template("error.html")
    html = template.render(error_code=exc.status_code, error_message=exc.message)
    return HTMLResponse(html, status_code=exc.status_code)
