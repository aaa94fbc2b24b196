"""Нормализация идентификаторов webicon (шорткоды, глифы, hex-ID).

Каноническая форма эмодзи — hex-код первого scalar в нижнем регистре
("1f600"). Иконки шорткодов не имеют и проходят как есть.
"""

from __future__ import annotations

import logging

from .emojis import EmojiTable, codepoint_to_char, get_emoji_from_shortcode, get_emoji_table
from .exceptions import InvalidInput
from .metadata import WebiconFamily

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def first_char(s: str) -> str:
    """Первый символ строки ("abc" → "a")."""
    if not s:
        raise InvalidInput("Empty identifier")
    return s[0]


def char_to_id(c: str) -> str:
    """Символ → hex-код в нижнем регистре ("😀" → "1f600")."""
    return format(ord(c), "x")


def _is_hex(s: str) -> bool:
    return all(c in _HEX_DIGITS for c in s)


def normalize_id(
    id: str,
    family: WebiconFamily,
    table: EmojiTable | None = None,
) -> str:
    """Привести идентификатор к каноническому виду.

    Для эмодзи:
    1. Первый символ имеет свойство Emoji (цифры тоже) →
       hex-строка приводится к каноническому виду (без ведущих нулей,
       нижний регистр), глиф — к hex первого scalar
    2. Иначе это шорткод ("grinning", ":grinning:") → hex его эмодзи

    >>> normalize_id("grinning", WebiconFamily.EMOJIS)
    '1f600'
    """
    if family is not WebiconFamily.EMOJIS:
        return id

    table = table or get_emoji_table()
    head = first_char(id)

    if table.contains_emoji_scalar(head):
        if _is_hex(id):
            return char_to_id(codepoint_to_char(id))
        return char_to_id(head)

    shortcode = id[1:-1] if len(id) > 2 and id[0] == id[-1] == ":" else id
    emoji = get_emoji_from_shortcode(shortcode, table)
    normalized = char_to_id(first_char(emoji.glyph))
    logger.debug("Shortcode %s → %s", id, normalized)
    return normalized
