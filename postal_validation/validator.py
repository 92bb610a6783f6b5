"""Таблица правил стран и проверка индекса для одной страны."""

from __future__ import annotations

import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence

from .base import CountryRule, normalize_country_code
from .errors import UnsupportedCountryError
from .loader import compile_pattern, load_rules


class PostalCodeValidator:
    """Отвечает на вопросы о поддержке стран и проверяет индекс по шаблону страны."""

    def __init__(self, rules: Mapping[str, dict | None]) -> None:
        table: Dict[str, CountryRule | None] = {}
        for code, raw in rules.items():
            key = normalize_country_code(code)
            table[key] = CountryRule.from_raw(key, raw) if raw is not None else None
        self._rules: Mapping[str, CountryRule | None] = MappingProxyType(table)
        self._patterns: Mapping[str, re.Pattern[str]] = MappingProxyType(
            {
                code: compile_pattern(rule.pattern)
                for code, rule in table.items()
                if rule is not None and rule.pattern is not None
            }
        )

    def _rule(self, country_code: Any) -> CountryRule | None:
        if not self.supports(country_code):
            raise UnsupportedCountryError(country_code)
        return self._rules[normalize_country_code(country_code)]

    def supports(self, country_code: Any) -> bool:
        return normalize_country_code(country_code) in self._rules

    def get_pattern(self, country_code: Any) -> str | None:
        rule = self._rule(country_code)
        return rule.pattern if rule is not None else None

    def get_example(self, country_code: Any) -> str | None:
        rule = self._rule(country_code)
        return rule.example if rule is not None else None

    def validate(self, country_code: Any, postal_code: Any) -> bool:
        """Проверяет индекс по шаблону страны.

        Страна без шаблона принимает любое значение. ``None`` проверяется
        как пустая строка.
        """

        self._rule(country_code)
        pattern = self._patterns.get(normalize_country_code(country_code))
        if pattern is None:
            return True
        text = "" if postal_code is None else str(postal_code)
        return pattern.fullmatch(text) is not None

    def countries(self) -> List[str]:
        return sorted(self._rules)

    @property
    def rules(self) -> Mapping[str, CountryRule | None]:
        return self._rules

    @classmethod
    def from_config(
        cls,
        path: Path | None = None,
        countries: Sequence[str] | None = None,
    ) -> "PostalCodeValidator":
        return cls(load_rules(path, allowed_countries=countries))
