"""Проверка набора полей формы и сборка сообщений об ошибках."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .data import data_get, extract_data
from .errors import UnknownRuleError
from .logging_manager import get_logger
from .postal_code import RULE_NAME as POSTAL_CODE
from .postal_code import PostalCode
from .postal_code_for import RULE_NAME as POSTAL_CODE_FOR
from .postal_code_for import PostalCodeFor
from .rules import PostalCodeRule, parse_rule
from .templating import replace_placeholders
from .validator import PostalCodeValidator

logger = get_logger(__name__)

DEFAULT_MESSAGES: Dict[str, str] = {
    POSTAL_CODE: "The :attribute field must be a valid :countries postal code (e.g. :examples).",
    POSTAL_CODE_FOR: "The :attribute field must be a valid :countries postal code (e.g. :examples).",
}


@dataclass
class CheckReport:
    """Итог проверки формы: сообщения об ошибках по атрибутам."""

    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def passes(self) -> bool:
        return not self.errors

    @property
    def fails(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> dict:
        return {"passes": self.passes, "errors": dict(self.errors)}


class PostalCodeChecker:
    """Применяет правила почтовых индексов к данным формы.

    Для каждого атрибута создаётся свой экземпляр правила, поэтому
    состояние ``postal_code_for`` не переходит между попытками.
    """

    def __init__(
        self,
        validator: PostalCodeValidator,
        messages: Mapping[str, str] | None = None,
    ) -> None:
        self.validator = validator
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}

    def check(self, data: Any, rules: Mapping[str, str | PostalCodeRule]) -> CheckReport:
        dataset = extract_data(data)
        report = CheckReport()

        for attribute, rule in rules.items():
            name, parameters = parse_rule(str(rule))
            value = data_get(dataset, attribute)
            message = self.messages.get(name, "")

            if name == POSTAL_CODE:
                extension = PostalCode(self.validator)
                if extension.validate(attribute, value, parameters):
                    continue
                message = extension.replace(message, attribute, name, parameters)
            elif name == POSTAL_CODE_FOR:
                referential = PostalCodeFor(self.validator)
                result = referential.validate(attribute, value, parameters, dataset)
                if result:
                    continue
                message = referential.replace(message, attribute, name, parameters, result)
            else:
                raise UnknownRuleError(name)

            logger.debug("Attribute %s failed rule %s", attribute, rule)
            report.errors[attribute] = replace_placeholders(message, {":attribute": attribute})

        return report
