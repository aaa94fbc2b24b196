"""webicons — страницы атрибуции для эмодзи и иконок."""

from .exceptions import WebiconError
from .html import HtmlDocument, make_html
from .metadata import (
    VendorMetadata,
    WebiconFamily,
    get_default_vendor,
    get_metadata,
    load_config,
)
from .service import ResolvedWebicon, resolve_webicon
from .token import normalize_id

__all__ = [
    "HtmlDocument",
    "ResolvedWebicon",
    "VendorMetadata",
    "WebiconError",
    "WebiconFamily",
    "get_default_vendor",
    "get_metadata",
    "load_config",
    "make_html",
    "normalize_id",
    "resolve_webicon",
]
