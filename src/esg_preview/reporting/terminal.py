"""Rich terminal report renderer.

Composes Rich tables, panels, and ASCII gauges into the primary
user-facing terminal output for the ESG preview.
"""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from esg_preview.completeness.estimator import disclosure_warning
from esg_preview.config import PreviewConfig
from esg_preview.data.models import Factor, SupplierInsights, SupplierReport
from esg_preview.reporting.ascii_charts import horizontal_bar, mini_gauge, score_gauge
from esg_preview.scoring.thresholds import score_to_risk_level


class TerminalRenderer:
    """Renders preview reports to the terminal using Rich."""

    def __init__(
        self, console: Console | None = None, config: PreviewConfig | None = None
    ) -> None:
        self.console = console or Console()
        self.config = config or PreviewConfig()

    def render(self, report: SupplierReport) -> None:
        """Render the full preview report for one supplier."""
        self._render_header(report)
        self._render_overall_score(report)
        self._render_pillar_scores(report)
        self._render_factors("TOP STRENGTHS", report.preview.top_positive)
        self._render_factors("AREAS FOR IMPROVEMENT", report.preview.top_negative)
        self._render_explanation(report)
        self._render_completeness_summary(report)
        if report.insights is not None:
            self._render_insights(report.insights)

    def render_completeness(self, report: SupplierReport) -> None:
        """Render the key-metric checklist for one supplier."""
        self._render_header(report)

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Key Metric", style="bold", min_width=20)
        table.add_column("Status", justify="center", min_width=10)
        for check in report.completeness.checks:
            status = "[green]present[/]" if check.present else "[red]missing[/]"
            table.add_row(check.name, status)

        self.console.print()
        self.console.print(table)
        self._render_completeness_summary(report)

    def render_batch(self, reports: list[SupplierReport]) -> None:
        """Render a one-line-per-supplier summary table."""
        table = Table(
            title="ESG Preview Summary",
            show_header=True,
            header_style="bold",
            padding=(0, 1),
        )
        table.add_column("Supplier", style="bold", min_width=20)
        table.add_column("Overall", justify="left", min_width=16)
        table.add_column("E", justify="right")
        table.add_column("S", justify="right")
        table.add_column("G", justify="right")
        table.add_column("Risk", justify="center")
        table.add_column("Completeness", justify="right")

        for report in reports:
            preview = report.preview
            color = self.config.color_for(preview.risk_level)
            ratio = report.completeness.ratio
            ratio_color = "red" if ratio < self.config.disclosure_threshold else "green"
            table.add_row(
                escape(report.metrics.display_name),
                mini_gauge(preview.overall, color),
                f"{preview.environmental:.2f}",
                f"{preview.social:.2f}",
                f"{preview.governance:.2f}",
                f"[{color}]{preview.risk_level.value}[/]",
                f"[{ratio_color}]{ratio:.0%}[/]",
            )

        self.console.print()
        self.console.print(table)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, report: SupplierReport) -> None:
        metrics = report.metrics
        header_text = Text()
        header_text.append("ESG PREVIEW", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(metrics.display_name, style="bold")
        if metrics.country:
            header_text.append(f" ({metrics.country})", style="dim")
        if metrics.industry:
            header_text.append(" | ", style="dim")
            header_text.append(metrics.industry)

        self.console.print()
        self.console.print(Panel(header_text, title="Supplier ESG Assessment Preview"))

    def _render_overall_score(self, report: SupplierReport) -> None:
        preview = report.preview
        color = self.config.color_for(preview.risk_level)
        gauge = score_gauge(
            preview.overall,
            color,
            label=f"{preview.risk_level.value} risk",
            width=self.config.gauge_width,
        )
        self.console.print()
        self.console.print(f"  [bold]OVERALL SCORE[/bold]: {gauge}")

    def _render_pillar_scores(self, report: SupplierReport) -> None:
        """Render the three pillar scores side by side."""
        panels = []
        for pillar, value in report.preview.pillars.items():
            color = self.config.color_for(score_to_risk_level(value))
            panels.append(
                Panel(
                    score_gauge(value, color, width=15),
                    title=f"[bold]{pillar.value.upper()}[/bold]",
                    border_style=color,
                    width=28,
                )
            )
        self.console.print()
        self.console.print(Columns(panels, padding=(0, 1)))

    def _render_factors(self, title: str, factors: list[Factor]) -> None:
        if not factors:
            return
        self.console.print()
        self.console.print(Rule(f"[bold]{title}[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Metric", style="bold", min_width=22)
        table.add_column("Pillar", min_width=13)
        table.add_column("Value", justify="left", min_width=15)
        table.add_column("Weight", justify="right")
        table.add_column("Impact", justify="right")

        for factor in factors:
            color = "green" if factor.is_positive else "red"
            label = f"{factor.label} (inverted)" if factor.is_risk else factor.label
            table.add_row(
                label,
                factor.pillar.value,
                mini_gauge(factor.value, color),
                f"{factor.weight:.1%}",
                f"{factor.impact:.3f}",
            )
        self.console.print(table)

    def _render_explanation(self, report: SupplierReport) -> None:
        self.console.print()
        self.console.print(
            Panel(
                report.preview.explanation_text,
                title="[bold]EXPLANATION[/bold]",
                border_style="cyan",
                padding=(1, 2),
            )
        )

    def _render_completeness_summary(self, report: SupplierReport) -> None:
        completeness = report.completeness
        below = completeness.ratio < self.config.disclosure_threshold
        color = "red" if below else "green"

        self.console.print()
        self.console.print(
            horizontal_bar(
                "Data completeness",
                completeness.present,
                completeness.total,
                width=20,
                color=color,
            )
        )
        warning = disclosure_warning(
            completeness,
            threshold=self.config.disclosure_threshold,
            cap_score=self.config.disclosure_cap_score,
        )
        if warning:
            self.console.print(f"  [yellow]{warning}[/yellow]")
        if completeness.missing:
            self.console.print(
                f"  [dim]Missing: {', '.join(completeness.missing)}[/dim]"
            )

    def _render_insights(self, insights: SupplierInsights) -> None:
        self.console.print()
        self.console.print(Rule("[bold]INSIGHTS[/bold]"))

        if insights.risk_factors:
            table = Table(show_header=True, header_style="bold", padding=(0, 1))
            table.add_column("Risk Factor", style="bold", min_width=24)
            table.add_column("Severity", justify="center")
            table.add_column("Probability", justify="center")
            table.add_column("Mitigation", min_width=30)
            level_colors = {"High": "red", "Medium": "yellow", "Low": "green"}
            for rf in insights.risk_factors:
                sev = level_colors.get(rf.severity, "white")
                prob = level_colors.get(rf.probability, "white")
                table.add_row(
                    rf.factor,
                    f"[{sev}]{rf.severity}[/{sev}]",
                    f"[{prob}]{rf.probability}[/{prob}]",
                    rf.mitigation,
                )
            self.console.print(table)

        for heading, items in (
            ("Standards met", insights.standards_met),
            ("Likely certifications", insights.certifications),
            ("Compliance gaps", insights.compliance_gaps),
        ):
            if not items:
                continue
            self.console.print()
            self.console.print(f"  [bold]{heading}:[/bold]")
            for item in items:
                self.console.print(f"    [dim]•[/dim] {item}")
