"""Tests for permissive number parsing of raw form text."""

import pytest

from domain.models import FormFields
from services.eligibility.features import extract_features, parse_age, parse_amount


class TestParseAge:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("30", 30),
            (" 42 ", 42),
            ("+7", 7),
            ("0", 0),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_age(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", "30.5", "-3", "4294967296", "3 0"])
    def test_invalid_is_zero(self, text):
        assert parse_age(text) == 0


class TestParseAmount:
    def test_plain_and_exponent(self):
        assert parse_amount("150000") == 150000.0
        assert parse_amount("1e3") == 1000.0
        assert parse_amount("12.5") == 12.5
        assert parse_amount("1.") == 1.0
        assert parse_amount(".5") == 0.5
        assert parse_amount("-2E2") == -200.0

    @pytest.mark.parametrize(
        "text",
        ["", "12.5k", "nan", "inf", "-infinity", "$100", "150_000", "１５００００", "0x10", "1,000"],
    )
    def test_invalid_is_zero(self, text):
        assert parse_amount(text) == 0.0


def test_extract_features_never_raises():
    feats = extract_features(FormFields(name="x", age="abc", income="lots", mortgage=""))
    assert feats == {"age": 0, "income": 0.0, "mortgage": 0.0}
