"""Проверка индекса по странам, указанным в других полях формы."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .base import MatchResult
from .data import data_get, extract_data, is_filled
from .errors import InvalidArgumentError
from .logging_manager import get_logger
from .templating import SEPARATOR, join_unique, replace_placeholders
from .validator import PostalCodeValidator

logger = get_logger(__name__)

RULE_NAME = "postal_code_for"


class PostalCodeFor:
    """Правило ``postal_code_for:<поля>``.

    Значение каждого поля-ссылки трактуется как код страны. Экземпляр
    обслуживает одну попытку валидации: неудачные проверки запоминаются
    (атрибут -> поле -> код страны) и затем используются в ``replace``.
    """

    def __init__(self, validator: PostalCodeValidator) -> None:
        self.replacements: Dict[str, Dict[str, str]] = {}
        self.validator = validator

    def _add_replacement(self, attribute: str, field: str, country_code: str) -> None:
        self.replacements.setdefault(attribute, {})[field] = country_code

    def get_replacements(self, attribute: str) -> Dict[str, str]:
        return dict(self.replacements.get(attribute, {}))

    def replace(
        self,
        message: str,
        attribute: str,
        rule: str,
        parameters: Sequence[str],
        result: MatchResult | None = None,
    ) -> str:
        recorded = result.attempts if result is not None else self.get_replacements(attribute)
        found: List[str] = [recorded[field] for field in parameters if field in recorded]
        examples = [self.validator.get_example(code) for code in found]

        return replace_placeholders(
            message,
            {
                ":countries": join_unique(found),
                ":examples": join_unique(examples, skip_empty=True),
                ":fields": SEPARATOR.join(parameters),
            },
        )

    def validate(self, attribute: str, value: Any, parameters: Sequence[str], data: Any) -> MatchResult:
        if not parameters:
            raise InvalidArgumentError(RULE_NAME)

        dataset = extract_data(data)
        fields = [field for field in parameters if is_filled(dataset, field)]

        if not fields:
            return MatchResult(matched=True)

        attempts: Dict[str, str] = {}
        for field in fields:
            country_code = data_get(dataset, field)

            if not self.validator.supports(country_code):
                logger.debug("Field %s references unsupported country %r, skipped", field, country_code)
                continue

            if self.validator.validate(country_code, value):
                return MatchResult(matched=True, attempts=attempts)

            attempts[field] = country_code
            self._add_replacement(attribute, field, country_code)
            logger.debug("Postal code for %s does not match %s from field %s", attribute, country_code, field)

        return MatchResult(matched=False, attempts=attempts)
