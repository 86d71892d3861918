# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the ESG preview tool.

This module defines the data contract shared by the scoring, completeness,
insights, reporting, and CLI layers.  ``SupplierMetrics`` is the single
input record; every other model is a derived result that is recomputed on
each input change and never persisted.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, computed_field, field_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RiskLevel(str, Enum):
    """Discrete risk tier derived from the overall preview score."""

    low = "Low"
    medium = "Medium"
    high = "High"
    critical = "Critical"


class Pillar(str, Enum):
    """The three ESG pillars."""

    environmental = "Environmental"
    social = "Social"
    governance = "Governance"


# ---------------------------------------------------------------------------
# Input record
# ---------------------------------------------------------------------------

NUMERIC_FIELDS: tuple[str, ...] = (
    # Environmental
    "energy_efficiency",
    "waste_management_score",
    "pollution_control",
    "renewable_energy_percent",
    # Social
    "wage_fairness",
    "human_rights_index",
    "diversity_inclusion_score",
    "community_engagement",
    "worker_safety",
    "injury_rate",
    "training_hours",
    "gender_diversity_percent",
    "living_wage_ratio",
    # Governance
    "transparency_score",
    "corruption_risk",
    "board_diversity",
    "ethics_program",
    "compliance_systems",
    "board_independence",
    # Context
    "revenue",
    "total_emissions",
    "co2_emissions",
    "water_usage",
    "waste_generated",
    "traceability",
)


def coerce_number(value: Any) -> Optional[float]:
    """Coerce a raw form value into a float, ``None`` or NaN.

    ``None`` and the empty string mean the field is missing.  Numbers,
    booleans, and numeric strings become floats.  Anything else, including
    infinities and values too large for a float, is kept as *present but
    not a number* (NaN) so that completeness still sees the field while
    scoring treats it as zero.
    """
    if value is None:
        return None
    if isinstance(value, str):
        if value == "":
            return None
        try:
            number = float(value.strip())
        except ValueError:
            return math.nan
    elif isinstance(value, (bool, int, float)):
        try:
            number = float(value)
        except OverflowError:
            return math.nan
    else:
        return math.nan
    return number if math.isfinite(number) else math.nan


class SupplierMetrics(BaseModel):
    """Flat record of supplier ESG metrics as collected by the form.

    All fields are optional.  Normalised indices are on a 0-1 scale;
    percentages are on a 0-100 scale.  Unknown keys are ignored so that
    records exported from the wider application can be passed straight in.
    """

    model_config = {"frozen": False, "populate_by_name": True, "extra": "ignore"}

    # Identity (display only)
    name: Optional[str] = Field(default=None, description="Supplier name")
    country: Optional[str] = Field(default=None, description="Country of operation")
    industry: Optional[str] = Field(default=None, description="Industry sector")

    # Environmental
    energy_efficiency: Optional[float] = Field(
        default=None, description="Energy efficiency index (0-1)"
    )
    waste_management_score: Optional[float] = Field(
        default=None, description="Waste management index (0-1)"
    )
    pollution_control: Optional[float] = Field(
        default=None, description="Pollution control index (0-1)"
    )
    renewable_energy_percent: Optional[float] = Field(
        default=None, description="Share of renewable energy (0-100)"
    )

    # Social
    wage_fairness: Optional[float] = Field(
        default=None, description="Wage fairness index (0-1)"
    )
    human_rights_index: Optional[float] = Field(
        default=None, description="Human rights index (0-1)"
    )
    diversity_inclusion_score: Optional[float] = Field(
        default=None, description="Diversity and inclusion index (0-1)"
    )
    community_engagement: Optional[float] = Field(
        default=None, description="Community engagement index (0-1)"
    )
    worker_safety: Optional[float] = Field(
        default=None, description="Worker safety index (0-1)"
    )
    injury_rate: Optional[float] = Field(
        default=None, description="Injuries per 200k hours worked"
    )
    training_hours: Optional[float] = Field(
        default=None, description="Training hours per employee"
    )
    gender_diversity_percent: Optional[float] = Field(
        default=None, description="Share of women in the workforce (0-100)"
    )
    living_wage_ratio: Optional[float] = Field(
        default=None, description="Wage relative to living-wage benchmark (1.0 = benchmark)"
    )

    # Governance
    transparency_score: Optional[float] = Field(
        default=None, description="Transparency index (0-1)"
    )
    corruption_risk: Optional[float] = Field(
        default=None, description="Corruption risk (0-1, lower is better)"
    )
    board_diversity: Optional[float] = Field(
        default=None, description="Board diversity index (0-1)"
    )
    ethics_program: Optional[float] = Field(
        default=None, description="Ethics programme strength (0-1)"
    )
    compliance_systems: Optional[float] = Field(
        default=None, description="Compliance systems strength (0-1)"
    )
    board_independence: Optional[float] = Field(
        default=None, description="Share of independent directors (0-100)"
    )
    anti_corruption_policy: Any = Field(
        default=None,
        description="Whether an anti-corruption policy exists; kept raw so its type can be checked",
    )

    # Context
    revenue: Optional[float] = Field(
        default=None, description="Annual revenue in millions"
    )
    total_emissions: Optional[float] = Field(
        default=None, description="Total emissions in tCO2e"
    )
    co2_emissions: Optional[float] = Field(
        default=None, description="CO2 emissions (legacy field name)"
    )
    water_usage: Optional[float] = Field(
        default=None, description="Water usage"
    )
    waste_generated: Optional[float] = Field(
        default=None, description="Waste generated"
    )
    traceability: Optional[float] = Field(
        default=None, description="Supply-chain traceability index (0-1)"
    )

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _coerce_numeric(cls, value: Any) -> Optional[float]:
        return coerce_number(value)

    @field_validator("name", "country", "industry", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(value)

    @classmethod
    def coerce(cls, metrics: MetricsInput) -> SupplierMetrics:
        """Accept a ``SupplierMetrics``, a plain key-value record, or ``None``."""
        if isinstance(metrics, cls):
            return metrics
        if metrics is None:
            return cls()
        return cls.model_validate(dict(metrics))

    @property
    def display_name(self) -> str:
        """Supplier name, or a placeholder when none was given."""
        return self.name or "Unnamed supplier"


MetricsInput = Union[SupplierMetrics, Mapping[str, Any], None]


# ---------------------------------------------------------------------------
# Scoring result models
# ---------------------------------------------------------------------------

class Factor(BaseModel):
    """A single metric paired with its contribution to the overall score."""

    model_config = {"frozen": True}

    key: str = Field(..., description="Input field name")
    label: str = Field(..., description="Human-readable metric label")
    pillar: Pillar = Field(..., description="Pillar the metric belongs to")
    value: float = Field(
        ..., description="Normalised value (0-1); risk metrics are inverted"
    )
    weight: float = Field(
        ..., ge=0, le=1,
        description="Effective weight on the overall score (sub-weight x pillar weight)",
    )
    impact: float = Field(
        ..., description="Contribution to the overall score (value x weight)"
    )
    is_positive: bool = Field(
        ..., description="True when the normalised value exceeds the positive threshold"
    )
    is_risk: bool = Field(
        default=False, description="True for lower-is-better metrics that were inverted"
    )


class ScorePreviewResult(BaseModel):
    """Real-time preview of the ESG assessment for one supplier record."""

    model_config = {"frozen": True}

    environmental: float = Field(..., description="Environmental pillar score (0-1)")
    social: float = Field(..., description="Social pillar score (0-1)")
    governance: float = Field(..., description="Governance pillar score (0-1)")
    overall: float = Field(..., description="Weighted overall score (0-1)")
    risk_level: RiskLevel = Field(..., description="Risk tier derived from the overall score")
    top_positive: list[Factor] = Field(
        default_factory=list, max_length=3,
        description="Up to three strongest positive contributors",
    )
    top_negative: list[Factor] = Field(
        default_factory=list, max_length=3,
        description="Up to three weakest non-positive contributors",
    )
    explanation_text: str = Field(..., description="Plain-language explanation")

    @property
    def pillars(self) -> dict[Pillar, float]:
        """Pillar scores keyed by pillar."""
        return {
            Pillar.environmental: self.environmental,
            Pillar.social: self.social,
            Pillar.governance: self.governance,
        }


class CompletenessCheck(BaseModel):
    """Outcome of one key-metric disclosure check."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Key metric identifier")
    present: bool = Field(..., description="Whether the check passed")


class CompletenessResult(BaseModel):
    """Share of the key-metric checklist disclosed in a record."""

    model_config = {"frozen": True}

    present: int = Field(..., ge=0, description="Number of checks that passed")
    total: int = Field(..., ge=0, description="Number of checks evaluated")
    ratio: float = Field(..., ge=0, le=1, description="present / total")
    checks: list[CompletenessCheck] = Field(
        default_factory=list, description="Per-check outcome, in checklist order"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def missing(self) -> list[str]:
        """Names of the checks that did not pass."""
        return [c.name for c in self.checks if not c.present]


# ---------------------------------------------------------------------------
# Insight models
# ---------------------------------------------------------------------------

class RiskFactor(BaseModel):
    """A qualitative supplier risk with a suggested mitigation."""

    model_config = {"frozen": True}

    factor: str
    severity: str = Field(..., pattern=r"^(Low|Medium|High)$")
    probability: str = Field(..., pattern=r"^(Low|Medium|High)$")
    mitigation: str


class SupplierInsights(BaseModel):
    """Qualitative findings that accompany a score preview."""

    model_config = {"frozen": True}

    risk_factors: list[RiskFactor] = Field(default_factory=list)
    standards_met: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    compliance_gaps: list[str] = Field(default_factory=list, max_length=3)


class SupplierReport(BaseModel):
    """Complete preview output for one supplier record.

    This is the top-level object consumed by the reporting and CLI layers
    to produce terminal output and JSON exports.
    """

    metrics: SupplierMetrics = Field(..., description="The record that was scored")
    preview: ScorePreviewResult
    completeness: CompletenessResult
    insights: Optional[SupplierInsights] = Field(default=None)
