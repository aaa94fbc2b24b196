"""Резолв webicon: (family, id, vendor?) → страница атрибуции."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from . import emojis, metadata, token
from .config import get_settings
from .html import HtmlDocument, make_html
from .metadata import VendorMetadata, WebiconFamily

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedWebicon:
    family: WebiconFamily
    id: str
    vendor: str
    title: str
    metadata: VendorMetadata
    document: HtmlDocument


def make_title(id: str, family: WebiconFamily) -> str:
    """Заголовок страницы: "😀 (1f600)" для эмодзи, сам ID для иконок."""
    if family is WebiconFamily.EMOJIS:
        emoji = emojis.get_emoji_from_id(id)
        return f"{emoji.glyph} ({id})"
    return id


def resolve_webicon(
    family: WebiconFamily | str,
    id: str,
    vendor: str | None = None,
    source: str | Path | None = None,
    timeout: float | None = None,
) -> ResolvedWebicon:
    """Полный резолв одного запроса.

    Конфиг загружается заново на каждый вызов; вендор по умолчанию
    вычисляется только если вызывающий его не передал.
    """
    settings = get_settings()
    family = WebiconFamily.parse(family)
    config = metadata.load_config(
        source if source is not None else settings.metadata_source,
        timeout=timeout if timeout is not None else settings.metadata_timeout,
    )
    if vendor is None:
        vendor = metadata.get_default_vendor(config, family)

    id = token.normalize_id(id, family)
    title = make_title(id, family)
    vendor_metadata = metadata.get_metadata(config, family, vendor)
    document = make_html(vendor_metadata, title)

    logger.info("Resolved %s/%s via %s", family, id, vendor)
    return ResolvedWebicon(
        family=family,
        id=id,
        vendor=vendor,
        title=title,
        metadata=vendor_metadata,
        document=document,
    )
