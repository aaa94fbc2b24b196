"""Метаданные вендоров webicon.

Конфиг — вложенный JSON:
  {family: {vendor: {name, attribution, license_name, license_url, url}}}

Конфиг читается заново при каждом резолве, кэша нет: источник может
поменяться между запросами, а сервис ничего не хранит между ними.
Вендор по умолчанию — последний в порядке объявления в источнике.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .exceptions import (
    ConfigMalformed,
    ConfigUnreadable,
    EmptyVendorTable,
    InvalidFamily,
    UnknownFamily,
    UnknownVendor,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class WebiconFamily(str, Enum):
    """Допустимые семейства webicon."""

    EMOJIS = "emojis"
    ICONS = "icons"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> WebiconFamily:
        """Строка → семейство. Неизвестная строка — ошибка, не дефолт."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidFamily(f"Invalid webicon family: {value!r}") from None


class VendorMetadata(BaseModel):
    """Атрибуция вендора (набора эмодзи или иконок).

    Подробнее о вендорах: https://emojipedia.org/vendors/
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attribution: str
    license_name: str
    license_url: str
    url: str


# vendor → metadata, порядок ключей как в источнике
VendorTable = dict[str, VendorMetadata]
MetadataConfig = dict[WebiconFamily, VendorTable]

_CONFIG_ADAPTER: TypeAdapter[MetadataConfig] = TypeAdapter(MetadataConfig)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_source(source: str | Path, timeout: float) -> str:
    """Прочитать сырой текст конфига из файла или по HTTP."""
    if isinstance(source, str) and _is_url(source):
        try:
            with httpx.Client(timeout=timeout) as client:
                resp = client.get(source)
                resp.raise_for_status()
                return resp.text
        except httpx.TimeoutException as exc:
            raise ConfigUnreadable(f"couldn't open {source}: deadline exceeded") from exc
        except httpx.HTTPError as exc:
            raise ConfigUnreadable(f"couldn't open {source}: {exc}") from exc

    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigUnreadable(f"couldn't open {source}: {exc}") from exc


def parse_config(raw: str | bytes, source: str | Path = "<string>") -> MetadataConfig:
    """Разобрать JSON конфига. ConfigMalformed при любой ошибке структуры."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigMalformed(f"{source} is not valid JSON: {exc}") from exc
    try:
        return _CONFIG_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ConfigMalformed(
            f"{source} has invalid structure: {exc.error_count()} error(s)"
        ) from exc


def load_config(source: str | Path, timeout: float = DEFAULT_TIMEOUT) -> MetadataConfig:
    """Открыть источник конфига и вернуть объект конфигурации."""
    config = parse_config(_read_source(source, timeout), source)
    logger.debug(
        "Loaded metadata from %s: %s",
        source,
        {str(family): len(vendors) for family, vendors in config.items()},
    )
    return config


def _vendor_table(config: MetadataConfig, family: WebiconFamily | str) -> VendorTable:
    family = WebiconFamily.parse(family)
    if family not in config:
        raise UnknownFamily(f"config does not contain [\"{family}\"]")
    return config[family]


def get_default_vendor(config: MetadataConfig, family: WebiconFamily | str) -> str:
    """Вендор по умолчанию — последний объявленный в семействе.

    >>> get_default_vendor(load_config("./config/metadata.json"), "emojis")
    'OpenMoji'
    """
    vendors = _vendor_table(config, family)
    if not vendors:
        raise EmptyVendorTable(f"config has no keys under [\"{family}\"]")
    return next(reversed(vendors))


def get_metadata(
    config: MetadataConfig,
    family: WebiconFamily | str,
    vendor: str,
) -> VendorMetadata:
    """Метаданные family.vendor (копия записи)."""
    vendors = _vendor_table(config, family)
    if vendor not in vendors:
        raise UnknownVendor(
            f"config does not have [\"{vendor}\"] under [\"{family}\"]"
        )
    return vendors[vendor].model_copy()


def list_vendors(config: MetadataConfig, family: WebiconFamily | str) -> list[str]:
    """Имена вендоров семейства в порядке объявления."""
    return list(_vendor_table(config, family))
