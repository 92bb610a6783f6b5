"""Базовые модели данных для валидации почтовых индексов."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


def normalize_country_code(code: Any) -> str:
    """Приводит код страны к каноническому виду ключа таблицы."""

    if code is None:
        return ""
    return str(code).upper()


@dataclass(frozen=True)
class CountryRule:
    """Регулярное выражение и пример индекса одной страны."""

    code: str
    pattern: str | None = None
    example: str | None = None

    @classmethod
    def from_raw(cls, code: Any, raw: dict | None) -> "CountryRule":
        raw = raw or {}
        return cls(
            code=normalize_country_code(code),
            pattern=raw.get("pattern"),
            example=raw.get("example"),
        )


@dataclass
class MatchResult:
    """Результат проверки по полям-ссылкам.

    ``attempts`` хранит поля, страны которых были проверены без совпадения,
    и используется для подстановки в сообщение об ошибке. Результат
    ведёт себя как ``bool``: истинен и равен ``True`` при совпадении.
    """

    matched: bool
    attempts: Dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.matched

    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool):
            return self.matched == other
        if isinstance(other, MatchResult):
            return self.matched == other.matched and self.attempts == other.attempts
        return NotImplemented

    def to_dict(self) -> dict:
        return {
            "matched": self.matched,
            "attempts": dict(self.attempts),
        }
