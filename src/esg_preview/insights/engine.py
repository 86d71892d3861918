# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Supplier insight engine.

Derives qualitative findings (risk factors, standards met, likely
certifications, and compliance gaps) from a supplier record and its
score preview.  Missing or zero inputs fall back to neutral defaults so
that an untouched form does not raise spurious findings.
"""

from __future__ import annotations

import logging

from esg_preview.data.models import (
    MetricsInput,
    RiskFactor,
    ScorePreviewResult,
    SupplierInsights,
    SupplierMetrics,
)
from esg_preview.insights.templates import (
    CARBON_EMISSIONS_RISK,
    CERT_FAIR_LABOR,
    CERT_GREEN_ENERGY,
    CERT_QUALITY,
    CORRUPTION_RISK,
    GAP_DISCLOSURE,
    GAP_EMISSIONS,
    GAP_WATER,
    GAP_WORKER_SAFETY,
    HUMAN_RIGHTS_RISK,
    REGULATORY_COMPLIANCE_RISK,
    STANDARD_ENVIRONMENTAL,
    STANDARD_GLOBAL_COMPACT,
    STANDARD_GOVERNANCE,
    STANDARD_SOCIAL,
    SUPPLY_CHAIN_OPACITY_RISK,
)
from esg_preview.scoring.engine import PreviewScorer
from esg_preview.scoring.pillars import metric_value

logger = logging.getLogger(__name__)

# Neutral values assumed for missing or zero inputs
NEUTRAL_EMISSIONS = 50.0
NEUTRAL_WATER_USAGE = 50.0
NEUTRAL_INDEX = 0.5

# Trigger thresholds
EMISSIONS_RISK_LIMIT = 70
EMISSIONS_GAP_LIMIT = 60
WATER_GAP_LIMIT = 60
HUMAN_RIGHTS_MIN = 0.4
CORRUPTION_RISK_MAX = 0.6
TRACEABILITY_MIN = 0.4
WORKER_SAFETY_MIN = 0.5
TRANSPARENCY_MIN = 0.5
STANDARD_PILLAR_MIN = 0.6
GREEN_ENERGY_MIN_PERCENT = 50
FAIR_LABOR_MIN = 0.7

_MIN_RISK_FACTORS = 2
_MIN_CERTIFICATIONS = 2
_MAX_COMPLIANCE_GAPS = 3


def _value_or(metrics: SupplierMetrics, key: str, default: float) -> float:
    return metric_value(metrics, key) or default


class InsightEngine:
    """Generate qualitative supplier insights.

    Usage::

        engine = InsightEngine()
        insights = engine.generate(metrics, preview)
    """

    def generate(
        self,
        metrics: MetricsInput,
        preview: ScorePreviewResult | None = None,
    ) -> SupplierInsights:
        """Build the insights for one supplier record.

        Parameters
        ----------
        metrics:
            The supplier record (model or plain mapping).
        preview:
            Score preview for the same record.  Computed when omitted;
            its pillar scores decide which standards are met.
        """
        record = SupplierMetrics.coerce(metrics)
        if preview is None:
            preview = PreviewScorer().score(record)

        insights = SupplierInsights(
            risk_factors=self._risk_factors(record),
            standards_met=self._standards_met(preview),
            certifications=self._certifications(record),
            compliance_gaps=self._compliance_gaps(record),
        )
        logger.debug(
            "Insights for %s: %d risk factors, %d gaps",
            record.display_name,
            len(insights.risk_factors),
            len(insights.compliance_gaps),
        )
        return insights

    # ------------------------------------------------------------------
    # Private builders
    # ------------------------------------------------------------------

    def _risk_factors(self, m: SupplierMetrics) -> list[RiskFactor]:
        factors: list[RiskFactor] = []

        if _value_or(m, "co2_emissions", NEUTRAL_EMISSIONS) > EMISSIONS_RISK_LIMIT:
            factors.append(CARBON_EMISSIONS_RISK.build())
        if _value_or(m, "human_rights_index", NEUTRAL_INDEX) < HUMAN_RIGHTS_MIN:
            factors.append(HUMAN_RIGHTS_RISK.build())
        if _value_or(m, "corruption_risk", NEUTRAL_INDEX) > CORRUPTION_RISK_MAX:
            factors.append(CORRUPTION_RISK.build())
        if _value_or(m, "traceability", NEUTRAL_INDEX) < TRACEABILITY_MIN:
            factors.append(SUPPLY_CHAIN_OPACITY_RISK.build())

        if len(factors) < _MIN_RISK_FACTORS:
            factors.append(REGULATORY_COMPLIANCE_RISK.build())
        return factors

    def _standards_met(self, preview: ScorePreviewResult) -> list[str]:
        standards: list[str] = []
        if preview.environmental > STANDARD_PILLAR_MIN:
            standards.append(STANDARD_ENVIRONMENTAL)
        if preview.social > STANDARD_PILLAR_MIN:
            standards.append(STANDARD_SOCIAL)
        if preview.governance > STANDARD_PILLAR_MIN:
            standards.append(STANDARD_GOVERNANCE)
        standards.append(STANDARD_GLOBAL_COMPACT)
        return standards

    def _certifications(self, m: SupplierMetrics) -> list[str]:
        certifications: list[str] = []
        if metric_value(m, "renewable_energy_percent") > GREEN_ENERGY_MIN_PERCENT:
            certifications.append(CERT_GREEN_ENERGY)
        if _value_or(m, "wage_fairness", NEUTRAL_INDEX) > FAIR_LABOR_MIN:
            certifications.append(CERT_FAIR_LABOR)

        if len(certifications) < _MIN_CERTIFICATIONS:
            certifications.append(CERT_QUALITY)
        return certifications

    def _compliance_gaps(self, m: SupplierMetrics) -> list[str]:
        gaps: list[str] = []
        if _value_or(m, "co2_emissions", NEUTRAL_EMISSIONS) > EMISSIONS_GAP_LIMIT:
            gaps.append(GAP_EMISSIONS)
        if _value_or(m, "water_usage", NEUTRAL_WATER_USAGE) > WATER_GAP_LIMIT:
            gaps.append(GAP_WATER)
        if _value_or(m, "worker_safety", NEUTRAL_INDEX) < WORKER_SAFETY_MIN:
            gaps.append(GAP_WORKER_SAFETY)
        if _value_or(m, "transparency_score", NEUTRAL_INDEX) < TRANSPARENCY_MIN:
            gaps.append(GAP_DISCLOSURE)
        return gaps[:_MAX_COMPLIANCE_GAPS]
