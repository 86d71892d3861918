# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Preview configuration model and YAML loader."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from esg_preview.data.models import RiskLevel
from esg_preview.scoring.thresholds import DISCLOSURE_CAP_SCORE, DISCLOSURE_THRESHOLD


def _default_risk_colors() -> dict[RiskLevel, str]:
    return {
        RiskLevel.low: "green",
        RiskLevel.medium: "yellow",
        RiskLevel.high: "dark_orange",
        RiskLevel.critical: "red",
    }


class PreviewConfig(BaseModel):
    """Presentation settings for rendering previews.

    Passed explicitly to the renderer; scoring itself is not configurable.
    """

    disclosure_threshold: float = Field(
        default=DISCLOSURE_THRESHOLD, ge=0, le=1,
        description="Completeness ratio below which the cap warning is shown",
    )
    disclosure_cap_score: int = Field(
        default=DISCLOSURE_CAP_SCORE, ge=0, le=100,
        description="Score cap quoted in the warning (0-100 scale)",
    )
    risk_colors: dict[RiskLevel, str] = Field(
        default_factory=_default_risk_colors,
        description="Rich colour name per risk tier",
    )
    gauge_width: int = Field(default=30, ge=5, le=120)
    show_insights: bool = Field(default=True)

    def color_for(self, risk_level: RiskLevel) -> str:
        """Colour for *risk_level*, falling back to white when not configured."""
        return self.risk_colors.get(risk_level, "white")


def load_config(path: str | Path) -> PreviewConfig:
    """Load a PreviewConfig from a YAML file.

    An empty file yields the defaults.  Partial ``risk_colors`` mappings
    are merged over the default colours; tier names are case-insensitive.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Malformed YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    colors = raw.get("risk_colors")
    if isinstance(colors, dict):
        merged = {level.value: color for level, color in _default_risk_colors().items()}
        merged.update({str(k).capitalize(): v for k, v in colors.items()})
        raw = {**raw, "risk_colors": merged}

    return PreviewConfig.model_validate(raw)
