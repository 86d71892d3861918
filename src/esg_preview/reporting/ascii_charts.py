# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly visualizations using Unicode characters.

These functions return Rich-markup strings that render as bar charts and
score gauges in the terminal via the Rich library.  Scores are on the
0-1 scale used by the preview and are displayed as percentages.
"""

from __future__ import annotations

_FULL = "█"
_EMPTY = "░"


def _bar(ratio: float, width: int) -> str:
    filled = int(ratio * width)
    return _FULL * filled + _EMPTY * (width - filled)


def _clamp(score: float) -> float:
    return max(0.0, min(1.0, score))


def score_gauge(score: float, color: str, label: str = "", width: int = 30) -> str:
    """Large visual gauge for a 0-1 score.

    Returns something like: [yellow]████████████░░░░░░░░[/] 62% [yellow]Medium[/]
    """
    clamped = _clamp(score)
    suffix = f" [{color}]{label}[/]" if label else ""
    return f"[{color}]{_bar(clamped, width)}[/] {clamped:.0%}{suffix}"


def mini_gauge(score: float, color: str, width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    clamped = _clamp(score)
    return f"[{color}]{_bar(clamped, width)}[/] {clamped:.0%}"


def horizontal_bar(
    label: str,
    value: float,
    max_value: float,
    width: int = 40,
    color: str = "green",
) -> str:
    """Render a horizontal bar chart line using Unicode block characters.

    Returns a Rich-markup string like:
        Completeness........... [green]████████████░░░░░░░░[/]   10/12
    """
    if max_value <= 0:
        return f"  {label:.<30} [dim]no data[/]"
    ratio = _clamp(value / max_value)
    return f"  {label:.<30} [{color}]{_bar(ratio, width)}[/] {value:>6.0f}/{max_value:.0f}"
