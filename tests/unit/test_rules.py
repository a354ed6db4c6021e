"""Tests for required-field validation and score classification."""

import pytest

from domain.models import FormFields
from domain.value_objects import ScoringPolicy
from services.eligibility.rules import (
    INCOME_ONLY,
    TWO_FACTOR,
    can_advance,
    classify,
    compute_score,
    evaluate,
    missing_fields,
)

REQUIRED = ("name", "age", "income", "mortgage")


class TestValidation:
    def test_all_present(self, complete_fields):
        assert can_advance(complete_fields, REQUIRED)
        assert missing_fields(complete_fields, REQUIRED) == []

    @pytest.mark.parametrize("empty", REQUIRED)
    def test_any_empty_field_blocks(self, complete_fields, empty):
        fields = complete_fields.model_copy(update={empty: ""})
        assert not can_advance(fields, REQUIRED)
        assert missing_fields(fields, REQUIRED) == [empty]

    def test_missing_in_declaration_order(self):
        fields = FormFields(age="30")
        assert missing_fields(fields, REQUIRED) == ["name", "income", "mortgage"]

    def test_non_numeric_text_still_advances(self):
        fields = FormFields(name="a", age="abc", income="xyz")
        assert can_advance(fields, ("name", "age", "income"))

    def test_optional_field_ignored(self):
        assert can_advance(FormFields(name="a", age="1", income="2"), ("name", "age", "income"))


class TestScoring:
    def test_two_factor_example(self):
        assert compute_score(30, 150000.0, TWO_FACTOR) == pytest.approx(195.0)
        assert evaluate(30, 150000.0, TWO_FACTOR) == {
            "score": pytest.approx(195.0),
            "status": "high",
            "approved": True,
        }

    def test_income_only_example(self):
        res = evaluate(30, 1000.0, INCOME_ONLY)
        assert res["score"] == pytest.approx(1.0)
        assert res["status"] == "under review"
        assert res["approved"] is False

    def test_moderate_band(self):
        assert classify(compute_score(20, 40000.0, TWO_FACTOR), TWO_FACTOR) == "moderate"

    def test_thresholds_are_strict(self):
        assert classify(100.0) == "moderate"
        assert classify(50.0) == "under review"
        assert classify(100.01) == "high"

    def test_income_only_approval_threshold(self):
        assert evaluate(0, 50001.0, INCOME_ONLY)["approved"] is True
        assert evaluate(0, 50000.0, INCOME_ONLY)["approved"] is False

    def test_custom_policy_tiers(self):
        policy = ScoringPolicy(tiers=((10.0, "gold"),), fallback_status="none")
        assert classify(11.0, policy) == "gold"
        assert classify(10.0, policy) == "none"

    def test_deterministic(self):
        assert evaluate(41, 72000.0) == evaluate(41, 72000.0)

    def test_zero_inputs(self):
        assert evaluate(0, 0.0)["status"] == "under review"
