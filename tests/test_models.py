"""Tests for core Pydantic data models."""

from __future__ import annotations

import math

import pytest

from esg_preview.data.models import (
    CompletenessCheck,
    CompletenessResult,
    Factor,
    Pillar,
    ScorePreviewResult,
    RiskLevel,
    SupplierMetrics,
    coerce_number,
)


class TestCoerceNumber:
    """Tests for raw form value coercion."""

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing(self, raw):
        assert coerce_number(raw) is None

    @pytest.mark.parametrize("raw, expected", [
        (0, 0.0),
        (3, 3.0),
        (0.25, 0.25),
        ("0.75", 0.75),
        (" 42 ", 42.0),
        (True, 1.0),
        (False, 0.0),
    ])
    def test_numeric(self, raw, expected):
        assert coerce_number(raw) == expected

    @pytest.mark.parametrize("raw", ["inf", "-Infinity", "1e999", math.inf, -math.inf, 10**400])
    def test_non_finite_is_not_a_number(self, raw):
        assert math.isnan(coerce_number(raw))

    @pytest.mark.parametrize("raw", ["abc", [1, 2], {"a": 1}])
    def test_present_but_not_a_number(self, raw):
        assert math.isnan(coerce_number(raw))


class TestSupplierMetrics:
    """Tests for SupplierMetrics validation."""

    def test_all_fields_optional(self):
        metrics = SupplierMetrics()
        assert metrics.energy_efficiency is None
        assert metrics.anti_corruption_policy is None

    def test_string_numbers_are_parsed(self):
        metrics = SupplierMetrics.model_validate({"injury_rate": "2.5"})
        assert metrics.injury_rate == 2.5

    def test_unknown_keys_ignored(self):
        metrics = SupplierMetrics.model_validate({"delivery_efficiency": 0.9, "name": "X"})
        assert metrics.name == "X"
        assert not hasattr(metrics, "delivery_efficiency")

    def test_anti_corruption_kept_raw(self):
        assert SupplierMetrics(anti_corruption_policy="true").anti_corruption_policy == "true"
        assert SupplierMetrics(anti_corruption_policy=True).anti_corruption_policy is True

    def test_display_name(self):
        assert SupplierMetrics().display_name == "Unnamed supplier"
        assert SupplierMetrics(name="").display_name == "Unnamed supplier"
        assert SupplierMetrics(name="Acme").display_name == "Acme"

    def test_coerce_passthrough(self):
        metrics = SupplierMetrics(name="Acme")
        assert SupplierMetrics.coerce(metrics) is metrics

    def test_coerce_mapping_and_none(self):
        assert SupplierMetrics.coerce({"revenue": "10"}).revenue == 10.0
        assert SupplierMetrics.coerce(None) == SupplierMetrics()


class TestResultModels:
    """Tests for derived result models."""

    def _factor(self, **overrides) -> Factor:
        defaults = {
            "key": "energy_efficiency",
            "label": "Energy Efficiency",
            "pillar": Pillar.environmental,
            "value": 0.8,
            "weight": 0.0825,
            "impact": 0.066,
            "is_positive": True,
        }
        defaults.update(overrides)
        return Factor(**defaults)

    def test_factor_defaults_not_risk(self):
        assert self._factor().is_risk is False

    def test_preview_rejects_more_than_three_factors(self):
        with pytest.raises(ValueError):
            ScorePreviewResult(
                environmental=0.5,
                social=0.5,
                governance=0.5,
                overall=0.5,
                risk_level=RiskLevel.medium,
                top_positive=[self._factor() for _ in range(4)],
                explanation_text="",
            )

    def test_preview_pillars(self):
        result = ScorePreviewResult(
            environmental=0.1,
            social=0.2,
            governance=0.3,
            overall=0.2,
            risk_level=RiskLevel.critical,
            explanation_text="",
        )
        assert result.pillars == {
            Pillar.environmental: 0.1,
            Pillar.social: 0.2,
            Pillar.governance: 0.3,
        }

    def test_completeness_missing(self):
        result = CompletenessResult(
            present=1,
            total=2,
            ratio=0.5,
            checks=[
                CompletenessCheck(name="injury_rate", present=True),
                CompletenessCheck(name="training_hours", present=False),
            ],
        )
        assert result.missing == ["training_hours"]

    def test_risk_level_values(self):
        assert [level.value for level in RiskLevel] == ["Low", "Medium", "High", "Critical"]
