"""Строковые идентификаторы правил ``postal_code`` и ``postal_code_for``."""

from __future__ import annotations

from typing import List, Tuple

from .postal_code import RULE_NAME as POSTAL_CODE
from .postal_code_for import RULE_NAME as POSTAL_CODE_FOR


class PostalCodeRule:
    """Построитель идентификатора правила.

    >>> str(PostalCodeRule.for_country("NL").or_("BE"))
    'postal_code:NL,BE'
    """

    def __init__(self, name: str, parameters: List[str]) -> None:
        self.name = name
        self.parameters = parameters

    @classmethod
    def for_country(cls, *country_codes: str) -> "PostalCodeRule":
        return cls(POSTAL_CODE, list(country_codes))

    @classmethod
    def for_input(cls, *fields: str) -> "PostalCodeRule":
        return cls(POSTAL_CODE_FOR, list(fields))

    def or_(self, *parameters: str) -> "PostalCodeRule":
        self.parameters.extend(parameters)
        return self

    def __str__(self) -> str:
        return f"{self.name}:{','.join(self.parameters)}"

    def __repr__(self) -> str:
        return f"PostalCodeRule({str(self)!r})"


def parse_rule(identifier: str) -> Tuple[str, List[str]]:
    """Разбирает ``name:a,b`` на имя правила и список параметров."""

    name, _, raw = str(identifier).partition(":")
    parameters = [item.strip() for item in raw.split(",")] if raw.strip() else []
    return name.strip(), parameters
