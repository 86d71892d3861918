# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the data completeness estimator."""

from __future__ import annotations

import pytest

from esg_preview.completeness.estimator import (
    KEY_METRIC_CHECKS,
    disclosure_warning,
    estimate_completeness,
)
from esg_preview.data.models import CompletenessResult, SupplierMetrics


class TestEstimateCompleteness:
    """Tests for estimate_completeness()."""

    def test_empty_record(self):
        result = estimate_completeness({})
        assert isinstance(result, CompletenessResult)
        assert result.present == 0
        assert result.total == 12
        assert result.ratio == 0
        assert len(result.missing) == 12

    def test_twelve_checks(self):
        assert len(KEY_METRIC_CHECKS) == 12

    def test_full_disclosure(self, full_disclosure_record: dict):
        result = estimate_completeness(full_disclosure_record)
        assert result.present == 12
        assert result.total == 12
        assert result.ratio == 1.0
        assert result.missing == []

    def test_accepts_model(self, full_disclosure_record: dict):
        result = estimate_completeness(SupplierMetrics(**full_disclosure_record))
        assert result.present == 12

    def test_checks_in_checklist_order(self, full_disclosure_record: dict):
        result = estimate_completeness(full_disclosure_record)
        assert [c.name for c in result.checks] == [name for name, _ in KEY_METRIC_CHECKS]

    @pytest.mark.parametrize("value", ["true", 1, "yes", 1.0])
    def test_anti_corruption_requires_boolean(self, full_disclosure_record: dict, value):
        record = {**full_disclosure_record, "anti_corruption_policy": value}
        result = estimate_completeness(record)
        assert result.present == 11
        assert result.missing == ["anti_corruption"]

    def test_anti_corruption_false_is_disclosed(self, full_disclosure_record: dict):
        record = {**full_disclosure_record, "anti_corruption_policy": False}
        assert estimate_completeness(record).present == 12

    def test_intensities_need_positive_revenue(self, full_disclosure_record: dict):
        for revenue in (0, -5, None, "n/a"):
            record = {**full_disclosure_record, "revenue": revenue}
            result = estimate_completeness(record)
            assert result.present == 9
            assert set(result.missing) == {
                "emission_intensity", "water_intensity", "waste_intensity",
            }

    def test_co2_emissions_fallback(self, full_disclosure_record: dict):
        record = {**full_disclosure_record, "co2_emissions": 0}
        del record["total_emissions"]
        assert estimate_completeness(record).present == 12

    def test_no_emissions_field(self, full_disclosure_record: dict):
        record = dict(full_disclosure_record)
        del record["total_emissions"]
        assert estimate_completeness(record).missing == ["emission_intensity"]

    @pytest.mark.parametrize("emissions", ["n/a", "Infinity"])
    def test_unparseable_emissions_not_computable(self, full_disclosure_record: dict, emissions):
        record = {**full_disclosure_record, "total_emissions": emissions}
        assert estimate_completeness(record).missing == ["emission_intensity"]

    def test_unparseable_total_emissions_shadows_co2(self, full_disclosure_record: dict):
        record = {**full_disclosure_record, "total_emissions": "n/a", "co2_emissions": 40}
        assert estimate_completeness(record).missing == ["emission_intensity"]

    def test_zero_values_count_as_present(self):
        result = estimate_completeness({
            "renewable_energy_percent": 0,
            "injury_rate": 0,
            "training_hours": 0,
            "living_wage_ratio": 0,
        })
        assert result.present == 4

    def test_empty_string_counts_as_missing(self):
        result = estimate_completeness({"injury_rate": "", "training_hours": None})
        assert result.present == 0

    def test_unparseable_value_counts_as_present(self):
        result = estimate_completeness({"injury_rate": "unknown"})
        assert result.present == 1

    def test_diversity_either_field(self):
        assert estimate_completeness({"gender_diversity_percent": 35}).present == 1
        assert estimate_completeness({"diversity_inclusion_score": 0.4}).present == 1
        assert estimate_completeness({
            "gender_diversity_percent": 35, "diversity_inclusion_score": 0.4,
        }).present == 1

    def test_ratio_is_present_over_total(self):
        result = estimate_completeness({
            "injury_rate": 1, "training_hours": 8, "board_diversity": 0.3,
        })
        assert result.present == 3
        assert result.ratio == pytest.approx(3 / 12)


class TestDisclosureWarning:
    """Tests for the low-disclosure display hint."""

    def test_warns_below_threshold(self):
        result = estimate_completeness({"injury_rate": 1})
        warning = disclosure_warning(result)
        assert warning is not None
        assert "capped at 50" in warning
        assert "70%" in warning

    def test_silent_at_full_disclosure(self, full_disclosure_record: dict):
        assert disclosure_warning(estimate_completeness(full_disclosure_record)) is None

    def test_threshold_is_inclusive(self):
        result = CompletenessResult(present=7, total=10, ratio=0.7)
        assert disclosure_warning(result) is None

    def test_custom_threshold_and_cap(self):
        result = CompletenessResult(present=9, total=12, ratio=0.75)
        warning = disclosure_warning(result, threshold=0.8, cap_score=40)
        assert "capped at 40" in warning
        assert "80%" in warning
