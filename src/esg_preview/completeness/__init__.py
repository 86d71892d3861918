# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Key-metric disclosure completeness estimator."""

from esg_preview.completeness.estimator import disclosure_warning, estimate_completeness

__all__ = ["disclosure_warning", "estimate_completeness"]
