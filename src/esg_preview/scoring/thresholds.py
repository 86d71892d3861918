# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Risk thresholds, factor classification, and disclosure benchmarks.

Every band is inclusive on its lower bound so that a score sitting
exactly on a threshold falls into the better tier.
"""

import math

from esg_preview.data.models import RiskLevel

# ---------------------------------------------------------------------------
# Risk thresholds (overall score -> risk tier)
# ---------------------------------------------------------------------------
RISK_LOW_MIN = 0.75
RISK_MEDIUM_MIN = 0.50
RISK_HIGH_MIN = 0.25
# Below 0.25 = Critical

# ---------------------------------------------------------------------------
# Contributing factors
# ---------------------------------------------------------------------------
POSITIVE_FACTOR_THRESHOLD = 0.6  # normalised value strictly above = positive
MAX_TOP_FACTORS = 3

# Overall score of an untouched form; no assessment is stated for it
NEUTRAL_OVERALL_SCORE = 0.50

# ---------------------------------------------------------------------------
# Disclosure (completeness) benchmarks
# ---------------------------------------------------------------------------
DISCLOSURE_THRESHOLD = 0.70   # below this the server may cap scores
DISCLOSURE_CAP_SCORE = 50     # cap applied by the server, on a 0-100 scale


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def round_score(value: float) -> float:
    """Round a score to two decimals, halves rounding up.

    Sums that overflowed to infinity read as 0, like any other non-number.
    """
    if not math.isfinite(value * 100):
        return 0.0
    return math.floor(value * 100 + 0.5) / 100


def score_to_risk_level(score: float) -> RiskLevel:
    """Convert a 0-1 overall score to a risk tier."""
    if score >= RISK_LOW_MIN:
        return RiskLevel.low
    if score >= RISK_MEDIUM_MIN:
        return RiskLevel.medium
    if score >= RISK_HIGH_MIN:
        return RiskLevel.high
    return RiskLevel.critical
