# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models and supplier record loader."""

from esg_preview.data.models import (
    CompletenessCheck,
    CompletenessResult,
    Factor,
    Pillar,
    RiskFactor,
    RiskLevel,
    ScorePreviewResult,
    SupplierInsights,
    SupplierMetrics,
    SupplierReport,
)
from esg_preview.data.loader import MetricsFileError, load_records

__all__ = [
    "CompletenessCheck",
    "CompletenessResult",
    "Factor",
    "MetricsFileError",
    "Pillar",
    "RiskFactor",
    "RiskLevel",
    "ScorePreviewResult",
    "SupplierInsights",
    "SupplierMetrics",
    "SupplierReport",
    "load_records",
]
