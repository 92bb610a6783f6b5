"""Общие фикстуры: таблица правил и подменённый движок."""

from unittest.mock import Mock

import pytest

from postal_validation import PostalCodeValidator


@pytest.fixture
def rules():
    return {
        "FR": {"pattern": r"^\d{2} ?\d{3}$", "example": "75008"},
        "NL": {"pattern": r"^\d{4} ?[A-Z]{2}$", "example": "1012 AB"},
        "BE": {"pattern": r"^\d{4}$", "example": "1000"},
        "LU": {"pattern": r"^\d{4}$"},
        "HK": None,
    }


@pytest.fixture
def engine(rules):
    return PostalCodeValidator(rules)


@pytest.fixture
def mock_engine():
    """Движок без поведения: тесты задают ответы и проверяют вызовы."""
    return Mock(spec=PostalCodeValidator)
