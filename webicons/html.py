"""Сборка HTML-страницы атрибуции.

Тело страницы — фиксированный порядок элементов:
  name → url → attribution → license
Текстовые поля экранируются, attribution вставляется как HTML-фрагмент.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .metadata import VendorMetadata

TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=True,
)


@dataclass(frozen=True)
class FaviconLink:
    rel: str = "icon"
    type: str = "image/x-icon"
    href: str = "/favicon.ico"
    sizes: str = "any"


@dataclass(frozen=True)
class HtmlDocument:
    """Документ: заголовок, favicon и элементы тела по порядку."""

    title: str
    body: tuple[Markup, ...]
    favicon: FaviconLink = field(default_factory=FaviconLink)

    def render(self) -> str:
        return _env.get_template("page.html").render(doc=self)

    def __str__(self) -> str:
        return self.render()


def make_body(metadata: VendorMetadata) -> tuple[Markup, ...]:
    h1 = Markup("<h1>{}</h1>").format(metadata.name)
    url = Markup('<p><a href="{url}">{url}</a></p>').format(url=metadata.url)
    attribution = Markup("<p>{}</p>").format(Markup(metadata.attribution))
    license = Markup('<p>License: <a href="{}">{}</a></p>').format(
        metadata.license_url, metadata.license_name
    )
    return (h1, url, attribution, license)


def make_html(metadata: VendorMetadata, title: str) -> HtmlDocument:
    """Собрать страницу атрибуции. Чистая функция, без I/O."""
    return HtmlDocument(title=title, body=make_body(metadata))
