# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Pillar scorers for the ESG preview.

Each pillar is a weighted sum of normalised sub-metrics.  Missing and
non-numeric inputs contribute zero; percentages are rescaled to 0-1 and
risk metrics are inverted before weighting.
"""

from __future__ import annotations

import math

from esg_preview.data.models import Pillar, SupplierMetrics
from esg_preview.scoring.thresholds import round_score
from esg_preview.scoring.weights import (
    ENVIRONMENTAL_METRICS,
    ENVIRONMENTAL_WEIGHT,
    GOVERNANCE_METRICS,
    GOVERNANCE_WEIGHT,
    PERCENT_METRICS,
    RISK_METRICS,
    SOCIAL_METRICS,
    SOCIAL_WEIGHT,
)

PILLAR_TABLES: dict[Pillar, tuple[tuple[tuple[str, str, float], ...], float]] = {
    Pillar.environmental: (ENVIRONMENTAL_METRICS, ENVIRONMENTAL_WEIGHT),
    Pillar.social: (SOCIAL_METRICS, SOCIAL_WEIGHT),
    Pillar.governance: (GOVERNANCE_METRICS, GOVERNANCE_WEIGHT),
}


def metric_value(metrics: SupplierMetrics, key: str) -> float:
    """Raw numeric value of *key*, with missing and NaN read as 0."""
    value = getattr(metrics, key)
    if value is None or math.isnan(value):
        return 0.0
    return value


def normalized_value(metrics: SupplierMetrics, key: str) -> float:
    """Value of *key* on the 0-1 "higher is better" scale used for weighting."""
    value = metric_value(metrics, key)
    if key in PERCENT_METRICS:
        value = value / 100
    if key in RISK_METRICS:
        value = 1 - value
    return value


def raw_pillar_score(metrics: SupplierMetrics, pillar: Pillar) -> float:
    """Unrounded weighted sum for one pillar."""
    table, _ = PILLAR_TABLES[pillar]
    return sum(normalized_value(metrics, key) * weight for key, _, weight in table)


def score_environmental(metrics: SupplierMetrics) -> float:
    """Environmental pillar: efficiency, waste, pollution, renewables."""
    return round_score(raw_pillar_score(metrics, Pillar.environmental))


def score_social(metrics: SupplierMetrics) -> float:
    """Social pillar: wages, human rights, diversity, community, safety."""
    return round_score(raw_pillar_score(metrics, Pillar.social))


def score_governance(metrics: SupplierMetrics) -> float:
    """Governance pillar: transparency, inverted corruption risk, board, ethics, compliance."""
    return round_score(raw_pillar_score(metrics, Pillar.governance))


def score_overall(metrics: SupplierMetrics) -> float:
    """Weighted overall score, rounded once on the final sum."""
    overall = sum(
        raw_pillar_score(metrics, pillar) * pillar_weight
        for pillar, (_, pillar_weight) in PILLAR_TABLES.items()
    )
    return round_score(overall)
