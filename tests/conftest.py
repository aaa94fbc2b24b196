from __future__ import annotations

import json
from pathlib import Path

import pytest

from webicons.config import get_settings


def _vendor(name: str, slug: str) -> dict[str, str]:
    return {
        "name": name,
        "attribution": f"Emoji graphics by <b>{name}</b>.",
        "license_name": "CC BY-SA 4.0",
        "license_url": "https://creativecommons.org/licenses/by-sa/4.0/",
        "url": f"https://{slug}.example.org/",
    }


# Порядок не алфавитный: последний ключ OpenMoji, алфавитно последний Twemoji
CONFIG: dict = {
    "emojis": {
        "Twemoji": _vendor("Twemoji", "twemoji"),
        "Noto": _vendor("Noto", "noto"),
        "OpenMoji": _vendor("OpenMoji", "openmoji"),
    },
    "icons": {
        "Material": _vendor("Material", "material"),
        "Feather": _vendor("Feather", "feather"),
    },
}


@pytest.fixture
def config_data() -> dict:
    return json.loads(json.dumps(CONFIG))


@pytest.fixture
def config_path(tmp_path: Path, config_data: dict) -> Path:
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(config_data), encoding="utf-8")
    return path


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, config_path: Path, tmp_path: Path):
    monkeypatch.setenv("METADATA_SOURCE", str(config_path))
    monkeypatch.setenv("FAVICON_PATH", str(tmp_path / "favicon.ico"))
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
