# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Assemble the full preview report for a supplier record."""

from __future__ import annotations

from esg_preview.completeness.estimator import estimate_completeness
from esg_preview.config import PreviewConfig
from esg_preview.data.models import MetricsInput, SupplierMetrics, SupplierReport
from esg_preview.insights.engine import InsightEngine
from esg_preview.scoring.engine import PreviewScorer


def build_report(
    metrics: MetricsInput, config: PreviewConfig | None = None
) -> SupplierReport:
    """Score, estimate completeness, and (optionally) derive insights."""
    config = config or PreviewConfig()
    record = SupplierMetrics.coerce(metrics)

    preview = PreviewScorer().score(record)
    completeness = estimate_completeness(record)
    insights = (
        InsightEngine().generate(record, preview) if config.show_insights else None
    )

    return SupplierReport(
        metrics=record,
        preview=preview,
        completeness=completeness,
        insights=insights,
    )
