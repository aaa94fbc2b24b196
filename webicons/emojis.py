"""Таблица эмодзи и конвертация hex-кодов в глифы.

Таблица — внешний справочник (пакет emoji, EMOJI_DATA), ядро его только
читает. Индекс шорткодов строится один раз при первом обращении:
первый эмодзи в порядке таблицы выигрывает при совпадении шорткодов.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import emoji
import regex
from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidCodepoint, UnknownEmoji, UnknownShortcode

logger = logging.getLogger(__name__)

# Unicode-свойство Emoji=Yes (включает цифры, '#', '*', ©, ®)
_EMOJI_PROPERTY = regex.compile(r"\p{Emoji}")

_VS16 = "\ufe0f"
_MAX_SCALAR = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)
_HEX_ID = regex.compile(r"[0-9a-fA-F]+")


class EmojiRecord(BaseModel):
    """Запись таблицы эмодзи."""

    model_config = ConfigDict(frozen=True)

    glyph: str
    name: str
    shortcodes: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.glyph


def _strip_colons(code: str) -> str:
    if len(code) > 2 and code.startswith(":") and code.endswith(":"):
        return code[1:-1]
    return code


class EmojiTable:
    """Read-only доступ к справочнику эмодзи."""

    def __init__(self, data: dict[str, dict] | None = None):
        self._data = emoji.EMOJI_DATA if data is None else data
        self._by_shortcode: dict[str, str] = {}
        for glyph, entry in self._data.items():
            for code in self._shortcodes_of(entry):
                self._by_shortcode.setdefault(code, glyph)
        logger.debug(
            "Emoji table: %d glyphs, %d shortcodes",
            len(self._data),
            len(self._by_shortcode),
        )

    @staticmethod
    def _shortcodes_of(entry: dict) -> tuple[str, ...]:
        """Шорткоды записи: сначала алиасы (github-стиль), потом CLDR-имя."""
        codes = [_strip_colons(a) for a in entry.get("alias", [])]
        en = entry.get("en")
        if en:
            codes.append(_strip_colons(en))
        return tuple(dict.fromkeys(codes))

    def _record(self, glyph: str) -> EmojiRecord:
        entry = self._data[glyph]
        return EmojiRecord(
            glyph=glyph,
            name=_strip_colons(entry.get("en", "")),
            shortcodes=self._shortcodes_of(entry),
        )

    def lookup_by_glyph(self, glyph: str) -> EmojiRecord | None:
        """Найти запись по глифу. Голый scalar находит и вариант с VS16."""
        for candidate in (glyph, glyph + _VS16):
            if candidate in self._data:
                return self._record(candidate)
        return None

    def lookup_by_shortcode(self, code: str) -> EmojiRecord | None:
        """Точное (регистрозависимое) совпадение шорткода."""
        glyph = self._by_shortcode.get(code)
        if glyph is None:
            return None
        return self._record(glyph)

    def contains_emoji_scalar(self, char: str) -> bool:
        """Есть ли у символа Unicode-свойство Emoji."""
        return len(char) == 1 and _EMOJI_PROPERTY.fullmatch(char) is not None


@lru_cache
def get_emoji_table() -> EmojiTable:
    # Static reference data, shared across requests.
    return EmojiTable()


def codepoint_to_char(id: str) -> str:
    """Hex-строка → символ. InvalidCodepoint если это не Unicode scalar value."""
    if not isinstance(id, str) or _HEX_ID.fullmatch(id) is None:
        raise InvalidCodepoint(f"{id!r} is not a hexadecimal codepoint")
    value = int(id, 16)
    if value > _MAX_SCALAR or value in _SURROGATES:
        raise InvalidCodepoint(f"{id!r} is not a valid Unicode scalar value")
    return chr(value)


def get_emoji_from_id(id: str, table: EmojiTable | None = None) -> EmojiRecord:
    """Получить эмодзи по hex-ID.

    >>> get_emoji_from_id("1f600").glyph
    '😀'
    """
    table = table or get_emoji_table()
    char = codepoint_to_char(id)
    record = table.lookup_by_glyph(char)
    if record is None:
        raise UnknownEmoji(f"Unable to get emoji from id {id}")
    return record


def get_emoji_from_shortcode(code: str, table: EmojiTable | None = None) -> EmojiRecord:
    table = table or get_emoji_table()
    record = table.lookup_by_shortcode(code)
    if record is None:
        raise UnknownShortcode(f"Unable to find shortcode {code}")
    return record
