# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the preview configuration loader."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from esg_preview.config import PreviewConfig, load_config
from esg_preview.data.models import RiskLevel


class TestPreviewConfig:
    """Tests for PreviewConfig defaults and loading."""

    def test_defaults(self):
        config = PreviewConfig()
        assert config.disclosure_threshold == 0.70
        assert config.disclosure_cap_score == 50
        assert config.color_for(RiskLevel.low) == "green"
        assert config.color_for(RiskLevel.critical) == "red"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == PreviewConfig()

    def test_partial_colors_merge(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "disclosure_threshold: 0.8\n"
            "risk_colors:\n"
            "  critical: magenta\n"
        )
        config = load_config(path)
        assert config.disclosure_threshold == 0.8
        assert config.color_for(RiskLevel.critical) == "magenta"
        assert config.color_for(RiskLevel.low) == "green"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_threshold(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("disclosure_threshold: 1.5\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_config(path)
