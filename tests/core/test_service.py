from __future__ import annotations

import json
from pathlib import Path

import pytest

from webicons.exceptions import UnknownFamily, UnknownShortcode, UnknownVendor
from webicons.metadata import WebiconFamily
from webicons.service import resolve_webicon


def test_default_vendor_and_shortcode_match_explicit_request(config_path: Path) -> None:
    implicit = resolve_webicon("emojis", "grinning", None, source=config_path)
    explicit = resolve_webicon("emojis", "1f600", "OpenMoji", source=config_path)

    assert implicit.vendor == "OpenMoji"
    assert implicit.id == explicit.id == "1f600"
    assert implicit.document == explicit.document
    assert implicit.document.render() == explicit.document.render()


def test_emoji_title(config_path: Path) -> None:
    resolved = resolve_webicon(WebiconFamily.EMOJIS, "😀", "Noto", source=config_path)
    assert resolved.title == "😀 (1f600)"
    assert resolved.metadata.name == "Noto"


def test_icon_title_is_id(config_path: Path) -> None:
    resolved = resolve_webicon("icons", "home", source=config_path)
    assert resolved.vendor == "Feather"
    assert resolved.title == "home"


def test_uses_settings_source(settings) -> None:
    resolved = resolve_webicon("emojis", "grinning")
    assert resolved.vendor == "OpenMoji"


def test_config_is_reloaded_per_call(config_path: Path, config_data: dict) -> None:
    assert resolve_webicon("emojis", "1f600", source=config_path).vendor == "OpenMoji"
    config_data["emojis"]["Twemoji"] = config_data["emojis"].pop("Twemoji")
    config_path.write_text(json.dumps(config_data), encoding="utf-8")
    assert resolve_webicon("emojis", "1f600", source=config_path).vendor == "Twemoji"


@pytest.mark.parametrize(
    "family,id,vendor,error",
    [
        ("stickers", "1f600", None, UnknownFamily),
        ("emojis", "1f600", "Apple", UnknownVendor),
        ("emojis", "not_a_shortcode", None, UnknownShortcode),
    ],
)
def test_failures(config_path: Path, family, id, vendor, error) -> None:
    with pytest.raises(error):
        resolve_webicon(family, id, vendor, source=config_path)
