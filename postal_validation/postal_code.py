"""Проверка индекса по явно перечисленным странам."""

from __future__ import annotations

from typing import Any, List, Sequence

from .errors import InvalidArgumentError
from .templating import join_unique, replace_placeholders
from .validator import PostalCodeValidator

RULE_NAME = "postal_code"


class PostalCode:
    """Правило ``postal_code:<коды стран>``: индекс подходит хотя бы одной стране."""

    def __init__(self, validator: PostalCodeValidator) -> None:
        self.validator = validator

    def replace(self, message: str, attribute: str, rule: str, parameters: Sequence[str]) -> str:
        countries: List[str] = []
        examples: List[str | None] = []

        for parameter in parameters:
            if not self.validator.supports(parameter):
                continue
            countries.append(parameter)
            examples.append(self.validator.get_example(parameter))

        return replace_placeholders(
            message,
            {
                ":countries": join_unique(countries),
                ":examples": join_unique(examples, skip_empty=True),
            },
        )

    def validate(self, attribute: str, value: Any, parameters: Sequence[str]) -> bool:
        if not parameters:
            raise InvalidArgumentError(RULE_NAME)

        if value is None or value in ("", "0", 0):
            return False

        for parameter in parameters:
            if self.validator.validate(parameter, value):
                return True

        return False
