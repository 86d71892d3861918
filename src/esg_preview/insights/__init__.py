# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Qualitative supplier insights."""

from esg_preview.insights.engine import InsightEngine

__all__ = ["InsightEngine"]
