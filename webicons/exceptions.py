"""Исключения webicons.

Каждое исключение несёт status_code — HTTP-статус, в который его переводит
граница сервиса. Ядро только поднимает исключения, маппинг и логирование
делает обработчик в main.py.
"""

from __future__ import annotations


class WebiconError(Exception):
    """Базовая ошибка резолва webicon."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


# ── Ошибки идентификатора ──


class TokenError(WebiconError):
    """Идентификатор нельзя привести к известному глифу."""

    status_code = 404


class InvalidInput(TokenError):
    """Пустой или неразбираемый идентификатор."""

    status_code = 400


class InvalidCodepoint(TokenError):
    """Строка не является hex-кодом допустимого Unicode scalar value."""

    status_code = 400


class UnknownShortcode(TokenError):
    pass


class UnknownEmoji(TokenError):
    """Валидный Unicode, но такого эмодзи нет в таблице."""


# ── Ошибки пути в конфиге ──


class LookupFailure(WebiconError):
    """Запрошенного пути family → vendor нет в конфиге."""

    status_code = 404


class UnknownFamily(LookupFailure):
    pass


class InvalidFamily(UnknownFamily):
    """Строка не является ни "emojis", ни "icons"."""


class UnknownVendor(LookupFailure):
    pass


class EmptyVendorTable(LookupFailure):
    pass


# ── Ошибки загрузки конфига ──


class ConfigError(WebiconError):
    status_code = 500


class ConfigUnreadable(ConfigError):
    """Источник конфига не открывается (файл, HTTP, таймаут)."""


class ConfigMalformed(ConfigError):
    """Конфиг прочитан, но структура невалидна."""
