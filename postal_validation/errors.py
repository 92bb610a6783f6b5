"""Исключения валидации почтовых индексов."""

from __future__ import annotations

from typing import Any


class PostalCodeError(Exception):
    """Базовое исключение пакета."""


class UnsupportedCountryError(PostalCodeError, ValueError):
    """Запрошена страна, отсутствующая в таблице правил."""

    def __init__(self, country_code: Any) -> None:
        self.country_code = country_code
        super().__init__(f"Unsupported country code '{country_code}'")


class InvalidArgumentError(PostalCodeError, ValueError):
    """Правило вызвано без единого параметра."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Validation rule '{rule}' requires at least 1 parameter.")


class UnsupportedDatasetSourceError(PostalCodeError, TypeError):
    """Источник данных формы не умеет отдавать плоский словарь полей."""

    def __init__(self, source: Any = None) -> None:
        self.source = source
        super().__init__("Unsupported validator type, cannot retrieve data")


class UnknownRuleError(PostalCodeError, ValueError):
    """Идентификатор правила не относится к почтовым индексам."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Unknown validation rule '{rule}'")


class RuleTableError(PostalCodeError):
    """Таблица правил повреждена или имеет неверный формат."""
