# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Contributing factors and plain-language explanation for a preview.

Every sub-metric is annotated with its contribution to the *overall*
score (normalised value x sub-weight x pillar weight).  The strongest
positive and weakest non-positive contributors are surfaced so the user
can see what drives the preview.
"""

from __future__ import annotations

import math

from esg_preview.data.models import Factor, Pillar, RiskLevel, SupplierMetrics
from esg_preview.scoring.pillars import PILLAR_TABLES, normalized_value
from esg_preview.scoring.thresholds import (
    MAX_TOP_FACTORS,
    NEUTRAL_OVERALL_SCORE,
    POSITIVE_FACTOR_THRESHOLD,
)
from esg_preview.scoring.weights import RISK_METRICS

PLACEHOLDER_EXPLANATION = (
    "Adjust the supplier metrics to generate a real-time ESG assessment preview."
)


def _pct(value: float) -> str:
    if not math.isfinite(value * 100):
        return "n/a"
    return f"{math.floor(value * 100 + 0.5)}%"


def build_factors(metrics: SupplierMetrics) -> list[Factor]:
    """Annotate all scored sub-metrics with their overall-score impact.

    Returns the 14 factors in pillar order (Environmental, Social,
    Governance), each in its weight-table order.
    """
    factors: list[Factor] = []
    for pillar, (table, pillar_weight) in PILLAR_TABLES.items():
        for key, label, sub_weight in table:
            value = normalized_value(metrics, key)
            weight = sub_weight * pillar_weight
            factors.append(
                Factor(
                    key=key,
                    label=label,
                    pillar=pillar,
                    value=value,
                    weight=weight,
                    impact=value * weight,
                    is_positive=value > POSITIVE_FACTOR_THRESHOLD,
                    is_risk=key in RISK_METRICS,
                )
            )
    return factors


def top_factors(factors: list[Factor]) -> tuple[list[Factor], list[Factor]]:
    """Split factors into the top positive and top negative contributors.

    Positives are ranked by impact descending, negatives (drawn only from
    non-positive factors) by impact ascending.  Each list holds at most
    three entries and the two never overlap.
    """
    positives = sorted(
        (f for f in factors if f.is_positive), key=lambda f: f.impact, reverse=True
    )
    negatives = sorted(
        (f for f in factors if not f.is_positive), key=lambda f: f.impact
    )
    return positives[:MAX_TOP_FACTORS], negatives[:MAX_TOP_FACTORS]


def strongest_pillar(pillars: dict[Pillar, float]) -> Pillar | None:
    """Return the pillar with the strict maximum score, or ``None`` on a tie."""
    best = max(pillars.values())
    leaders = [pillar for pillar, value in pillars.items() if value == best]
    if len(leaders) != 1:
        return None
    return leaders[0]


def build_explanation(
    overall: float,
    risk_level: RiskLevel,
    pillars: dict[Pillar, float],
    positives: list[Factor],
    negatives: list[Factor],
) -> str:
    """Render the templated explanation sentence for a preview.

    An overall score of exactly 0.50 is the untouched-form state, for
    which a fixed placeholder is returned instead of an assessment.
    """
    if overall == NEUTRAL_OVERALL_SCORE:
        return PLACEHOLDER_EXPLANATION

    parts = [
        f"Overall ESG score is {_pct(overall)}, indicating "
        f"{risk_level.value.lower()} risk."
    ]
    if positives:
        listed = ", ".join(f"{f.label} ({_pct(f.value)})" for f in positives)
        parts.append(f"Key strengths: {listed}.")
    if negatives:
        listed = ", ".join(f"{f.label} ({_pct(f.value)})" for f in negatives)
        parts.append(f"Areas for improvement: {listed}.")

    leader = strongest_pillar(pillars)
    if leader is not None:
        parts.append(f"{leader.value} performance is the strongest pillar.")

    return " ".join(parts)
