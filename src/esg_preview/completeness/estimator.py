# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data completeness estimator.

Counts how many of the twelve key disclosure metrics are present in a
supplier record.  Unlike scoring, a zero is a valid disclosed value:
only absent fields count as missing.  The ratio drives the display hint
that the authoritative service may cap scores when disclosure is low;
nothing is capped here.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from esg_preview.data.models import (
    CompletenessCheck,
    CompletenessResult,
    MetricsInput,
    SupplierMetrics,
)
from esg_preview.scoring.thresholds import DISCLOSURE_CAP_SCORE, DISCLOSURE_THRESHOLD

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def _present(value: object) -> bool:
    return value is not None and value != ""


def _has_revenue(m: SupplierMetrics) -> bool:
    # NaN compares false, so an unparseable revenue never qualifies
    return m.revenue is not None and m.revenue > 0


def _emissions(m: SupplierMetrics) -> Optional[float]:
    return m.total_emissions if m.total_emissions is not None else m.co2_emissions


def _is_number(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)


KEY_METRIC_CHECKS: tuple[tuple[str, Callable[[SupplierMetrics], bool]], ...] = (
    ("emission_intensity", lambda m: _has_revenue(m) and _is_number(_emissions(m))),
    ("renewable_pct", lambda m: _present(m.renewable_energy_percent)),
    ("water_intensity", lambda m: _has_revenue(m) and m.water_usage is not None),
    ("waste_intensity", lambda m: _has_revenue(m) and m.waste_generated is not None),
    ("injury_rate", lambda m: _present(m.injury_rate)),
    ("training_hours", lambda m: _present(m.training_hours)),
    ("wage_ratio", lambda m: _present(m.living_wage_ratio)),
    (
        "diversity",
        lambda m: _present(m.gender_diversity_percent)
        or _present(m.diversity_inclusion_score),
    ),
    ("board_diversity", lambda m: _present(m.board_diversity)),
    ("board_independence", lambda m: _present(m.board_independence)),
    ("transparency", lambda m: _present(m.transparency_score)),
    ("anti_corruption", lambda m: isinstance(m.anti_corruption_policy, bool)),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def estimate_completeness(metrics: MetricsInput) -> CompletenessResult:
    """Evaluate the key-metric checklist against *metrics*.

    Each check adds one to ``total`` and, when it passes, one to
    ``present``.  ``anti_corruption`` only passes for a real boolean: the
    string ``"true"`` or the number ``1`` do not count as a disclosure.
    """
    record = SupplierMetrics.coerce(metrics)

    checks: list[CompletenessCheck] = []
    present = 0
    total = 0
    for name, check in KEY_METRIC_CHECKS:
        total += 1
        passed = check(record)
        if passed:
            present += 1
        checks.append(CompletenessCheck(name=name, present=passed))

    ratio = present / total if total > 0 else 0.0
    logger.debug(
        "Completeness for %s: %d/%d (%.0f%%)",
        record.display_name, present, total, ratio * 100,
    )
    return CompletenessResult(present=present, total=total, ratio=ratio, checks=checks)


def disclosure_warning(
    result: CompletenessResult,
    threshold: float = DISCLOSURE_THRESHOLD,
    cap_score: int = DISCLOSURE_CAP_SCORE,
) -> str | None:
    """Return the low-disclosure display hint, or ``None`` when not needed."""
    if result.ratio >= threshold:
        return None
    return (
        f"Data completeness is {result.ratio:.0%}: scores may be capped at "
        f"{cap_score} if below {threshold:.0%}."
    )
