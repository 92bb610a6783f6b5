"""Валидация почтовых индексов по форматам стран."""

from .base import CountryRule, MatchResult, normalize_country_code
from .checker import DEFAULT_MESSAGES, CheckReport, PostalCodeChecker
from .data import DataSource
from .errors import (
    InvalidArgumentError,
    PostalCodeError,
    RuleTableError,
    UnknownRuleError,
    UnsupportedCountryError,
    UnsupportedDatasetSourceError,
)
from .loader import formats_path, load_rules
from .postal_code import PostalCode
from .postal_code_for import PostalCodeFor
from .rules import PostalCodeRule, parse_rule
from .validator import PostalCodeValidator

__all__ = [
    "CheckReport",
    "CountryRule",
    "DEFAULT_MESSAGES",
    "DataSource",
    "InvalidArgumentError",
    "MatchResult",
    "PostalCode",
    "PostalCodeChecker",
    "PostalCodeError",
    "PostalCodeFor",
    "PostalCodeRule",
    "PostalCodeValidator",
    "RuleTableError",
    "UnknownRuleError",
    "UnsupportedCountryError",
    "UnsupportedDatasetSourceError",
    "formats_path",
    "load_rules",
    "normalize_country_code",
    "parse_rule",
]
