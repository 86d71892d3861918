# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""ESG Preview - real-time supplier ESG score preview."""

__version__ = "0.1.0"

from esg_preview.data.models import (
    CompletenessResult,
    Factor,
    Pillar,
    RiskLevel,
    ScorePreviewResult,
    SupplierMetrics,
    SupplierReport,
)
from esg_preview.scoring.engine import PreviewScorer, score
from esg_preview.completeness.estimator import disclosure_warning, estimate_completeness
from esg_preview.insights.engine import InsightEngine
from esg_preview.config import PreviewConfig, load_config
from esg_preview.report import build_report

__all__ = [
    "CompletenessResult",
    "Factor",
    "InsightEngine",
    "Pillar",
    "PreviewConfig",
    "PreviewScorer",
    "RiskLevel",
    "ScorePreviewResult",
    "SupplierMetrics",
    "SupplierReport",
    "build_report",
    "disclosure_warning",
    "estimate_completeness",
    "load_config",
    "score",
]
