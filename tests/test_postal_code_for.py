"""Tests for the referential ``postal_code_for`` rule."""

import logging
from unittest.mock import call

import pytest

from postal_validation import (
    InvalidArgumentError,
    MatchResult,
    PostalCodeFor,
    UnsupportedDatasetSourceError,
)


class FormRequest:
    """Минимальный источник данных формы."""

    def __init__(self, data):
        self._data = data

    def get_data(self):
        return self._data


class TestReplace:
    def test_replaces_placeholders(self, mock_engine):
        mock_engine.supports.return_value = True
        mock_engine.validate.return_value = False
        mock_engine.get_example.return_value = "example"
        rule = PostalCodeFor(mock_engine)

        rule.validate("attribute", "postal_code", ["field"], {"field": "country_code"})
        message = rule.replace(
            "country=:countries, example=:examples, field=:fields", "attribute", "rule", ["field"]
        )

        assert message == "country=country_code, example=example, field=field"
        mock_engine.get_example.assert_called_once_with("country_code")

    def test_uses_explicit_result(self, engine):
        rule = PostalCodeFor(engine)
        result = MatchResult(matched=False, attempts={"country": "FR"})

        message = rule.replace(":fields/:countries/:examples", "postal_code", "rule", ["country"], result)

        assert message == "country/FR/75008"

    def test_only_requested_fields_contribute(self, engine):
        rule = PostalCodeFor(engine)
        data = {"billing": "FR", "shipping": "NL"}

        assert not rule.validate("postal_code", "nope", ["billing", "shipping"], data)
        message = rule.replace(":countries|:examples|:fields", "postal_code", "rule", ["shipping", "other"])

        assert message == "NL|1012 AB|shipping, other"

    def test_deduplicates_codes_but_not_fields(self, engine):
        rule = PostalCodeFor(engine)
        data = {"billing": "FR", "shipping": "fr"}

        assert not rule.validate("postal_code", "nope", ["billing", "shipping"], data)
        message = rule.replace(":countries|:examples|:fields", "postal_code", "rule", ["billing", "shipping"])

        assert message == "FR, fr|75008|billing, shipping"

    def test_replace_before_validate_is_empty(self, engine):
        rule = PostalCodeFor(engine)

        message = rule.replace("[:countries][:examples][:fields]", "postal_code", "rule", ["country"])

        assert message == "[][][country]"

    def test_replacements_are_kept_per_attribute(self, engine):
        rule = PostalCodeFor(engine)

        rule.validate("billing_code", "nope", ["country"], {"country": "FR"})

        assert rule.get_replacements("billing_code") == {"country": "FR"}
        assert rule.get_replacements("shipping_code") == {}


class TestValidate:
    def test_fails_when_no_matches_are_found(self, mock_engine):
        mock_engine.supports.return_value = True
        mock_engine.validate.return_value = False
        rule = PostalCodeFor(mock_engine)

        result = rule.validate("attribute", "postal_code", ["field"], {"field": "country_code"})

        assert result.matched is False
        assert result.attempts == {"field": "country_code"}
        mock_engine.supports.assert_called_once_with("country_code")
        mock_engine.validate.assert_called_once_with("country_code", "postal_code")

    def test_passes_on_first_match_and_skips_the_rest(self, mock_engine):
        mock_engine.supports.return_value = True
        mock_engine.validate.side_effect = lambda code, value: code == "matching_code"
        rule = PostalCodeFor(mock_engine)
        data = {
            "matching": "matching_code",
            "non_matching": "non_matching_code",
            "skipped": "skipped_code",
        }

        result = rule.validate("attribute", "postal_code", ["non_matching", "matching", "skipped"], data)

        assert result
        assert mock_engine.supports.call_args_list == [call("non_matching_code"), call("matching_code")]
        assert mock_engine.validate.call_args_list == [
            call("non_matching_code", "postal_code"),
            call("matching_code", "postal_code"),
        ]

    @pytest.mark.parametrize("data", [{"field": ""}, {"field": "   "}, {"field": None}, {"other_field": "qux"}])
    def test_passes_when_no_referenced_fields_are_present(self, mock_engine, data):
        rule = PostalCodeFor(mock_engine)

        assert rule.validate("attribute", "postal_code", ["field"], data)
        assert mock_engine.mock_calls == []

    def test_skips_unsupported_country_codes(self, mock_engine):
        mock_engine.supports.return_value = False
        rule = PostalCodeFor(mock_engine)

        assert not rule.validate("attribute", "postal_code", ["field"], {"field": "unsupported_country"})
        mock_engine.supports.assert_called_once_with("unsupported_country")
        mock_engine.validate.assert_not_called()
        assert rule.get_replacements("attribute") == {}

    def test_unsupported_field_does_not_stop_scan(self, engine):
        rule = PostalCodeFor(engine)
        data = {"first": "XX", "second": "BE"}

        assert rule.validate("postal_code", "1000", ["first", "second"], data)

    def test_failed_validation_records_attempts(self, engine):
        rule = PostalCodeFor(engine)

        result = rule.validate("postal_code", "1012", ["country"], {"country": "FR"})

        assert not result
        assert rule.replace(":fields=:countries", "postal_code", "rule", ["country"]) == "country=FR"

    def test_reads_nested_fields(self, engine):
        rule = PostalCodeFor(engine)
        data = {"address": {"country": "nl"}}

        assert rule.validate("address.postal_code", "1012 AB", ["address.country"], data)
        assert not rule.validate("address.postal_code", "75008", ["address.country"], data)

    def test_accepts_data_source(self, engine):
        rule = PostalCodeFor(engine)

        assert rule.validate("postal_code", "75008", ["country"], FormRequest({"country": "FR"}))

    def test_does_not_mutate_dataset(self, engine):
        rule = PostalCodeFor(engine)
        data = {"country": "FR", "blank": " "}

        rule.validate("postal_code", "nope", ["country", "blank"], data)

        assert data == {"country": "FR", "blank": " "}

    def test_throws_on_empty_parameter_list(self, mock_engine):
        rule = PostalCodeFor(mock_engine)
        with pytest.raises(InvalidArgumentError, match="Validation rule 'postal_code_for' requires at least 1 parameter."):
            rule.validate("attribute", "postal_code", [], {})

    @pytest.mark.parametrize("source", [object(), ["country", "FR"], FormRequest(["FR"])])
    def test_throws_when_unable_to_retrieve_data(self, mock_engine, source):
        rule = PostalCodeFor(mock_engine)
        with pytest.raises(UnsupportedDatasetSourceError, match="Unsupported validator type, cannot retrieve data"):
            rule.validate("attribute", "postal_code", ["field"], source)
        mock_engine.supports.assert_not_called()


class TestMatchResult:
    def test_compares_with_bool(self, engine):
        rule = PostalCodeFor(engine)

        failed = rule.validate("postal_code", "nope", ["country"], {"country": "FR"})
        passed = rule.validate("postal_code", "75008", ["country"], {"country": "FR"})

        assert failed == False  # noqa: E712
        assert passed == True  # noqa: E712
        assert failed != passed

    def test_to_dict(self, engine):
        rule = PostalCodeFor(engine)

        result = rule.validate("postal_code", "nope", ["billing", "shipping"], {"billing": "FR", "shipping": "XX"})

        assert result.to_dict() == {"matched": False, "attempts": {"billing": "FR"}}
        assert result == MatchResult(matched=False, attempts={"billing": "FR"})

    def test_failed_attempt_is_logged(self, engine, caplog):
        rule = PostalCodeFor(engine)

        with caplog.at_level(logging.DEBUG, logger="postal_validation"):
            rule.validate("postal_code", "nope", ["country"], {"country": "FR"})

        assert "does not match FR from field country" in caplog.text
