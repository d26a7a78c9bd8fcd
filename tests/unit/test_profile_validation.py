"""Tests for budget profile validation rules."""

import pytest

from satsignal.validation.profile_rules import ProfileValidator


class TestProfileValidator:

    def test_valid_profile(self, sample_profile):
        values = {f: getattr(sample_profile, f) for f in
                  ("id", "name", "income", "expenses", "allocation", "holdings", "target", "spent_so_far")}

        assert ProfileValidator.validate_profile(values) == []

    @pytest.mark.parametrize("value", [0, 1.01, -0.2, "abc", float("nan")])
    def test_allocation_bounds(self, value):
        errors = ProfileValidator.validate_field("allocation", value)
        assert [e.field for e in errors] == ["allocation"]

    def test_allocation_upper_bound_inclusive(self):
        assert ProfileValidator.validate_field("allocation", 1) == []
        assert ProfileValidator.validate_field("allocation", "0.05") == []

    def test_target_must_be_positive(self):
        assert ProfileValidator.validate_field("target", 0)[0].message == "Must be a positive number"

    @pytest.mark.parametrize("field", ["income", "expenses", "holdings", "spent_so_far"])
    def test_amounts_non_negative(self, field):
        assert ProfileValidator.validate_field(field, 0) == []
        assert ProfileValidator.validate_field(field, -1)[0].field == field

    def test_collects_every_error(self):
        errors = ProfileValidator.validate_profile({"name": "  ", "income": -5, "bogus": 1})

        assert sorted(e.field for e in errors) == ["bogus", "income", "name"]
