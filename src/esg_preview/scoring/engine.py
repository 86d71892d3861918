# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Real-time ESG preview scorer.

Delegates to the pillar scorers, computes the weighted overall score and
risk tier, and ranks the contributing factors.  The remote evaluation
service stays authoritative; this preview only approximates it.
"""

from __future__ import annotations

import logging

from esg_preview.data.models import (
    MetricsInput,
    Pillar,
    ScorePreviewResult,
    SupplierMetrics,
)
from esg_preview.scoring.factors import build_explanation, build_factors, top_factors
from esg_preview.scoring.pillars import (
    score_environmental,
    score_governance,
    score_overall,
    score_social,
)
from esg_preview.scoring.thresholds import score_to_risk_level

logger = logging.getLogger(__name__)


class PreviewScorer:
    """Computes the ESG score preview for a supplier record.

    Usage::

        scorer = PreviewScorer()
        result = scorer.score({"energy_efficiency": 0.8, ...})
    """

    def score(self, metrics: MetricsInput) -> ScorePreviewResult:
        """Run the preview scoring pipeline.

        Args:
            metrics: A ``SupplierMetrics`` or a mapping with the same field
                names.  Missing or non-numeric fields count as zero.

        Returns:
            A ``ScorePreviewResult`` with pillar and overall scores (0-1,
            two decimals), the risk tier, the top contributors, and the
            explanation text.
        """
        record = SupplierMetrics.coerce(metrics)

        environmental = score_environmental(record)
        social = score_social(record)
        governance = score_governance(record)
        overall = score_overall(record)
        risk_level = score_to_risk_level(overall)

        positives, negatives = top_factors(build_factors(record))
        pillars = {
            Pillar.environmental: environmental,
            Pillar.social: social,
            Pillar.governance: governance,
        }

        logger.debug(
            "Preview for %s: E=%.2f S=%.2f G=%.2f overall=%.2f risk=%s",
            record.display_name, environmental, social, governance,
            overall, risk_level.value,
        )
        return ScorePreviewResult(
            environmental=environmental,
            social=social,
            governance=governance,
            overall=overall,
            risk_level=risk_level,
            top_positive=positives,
            top_negative=negatives,
            explanation_text=build_explanation(
                overall, risk_level, pillars, positives, negatives
            ),
        )


def score(metrics: MetricsInput) -> ScorePreviewResult:
    """Module-level shortcut for ``PreviewScorer().score(metrics)``."""
    return PreviewScorer().score(metrics)
