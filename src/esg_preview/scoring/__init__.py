# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Preview scoring engine for supplier ESG metrics."""

from esg_preview.scoring.engine import PreviewScorer, score

__all__ = ["PreviewScorer", "score"]
