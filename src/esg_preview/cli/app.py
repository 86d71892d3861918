# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for esg-preview."""

from __future__ import annotations

import logging

import click
from pydantic import TypeAdapter
from rich.console import Console
from rich.logging import RichHandler

from esg_preview.config import PreviewConfig, load_config
from esg_preview.data.loader import MetricsFileError, load_records
from esg_preview.data.models import SupplierMetrics, SupplierReport
from esg_preview.report import build_report
from esg_preview.reporting.terminal import TerminalRenderer

SORT_CHOICES = ["overall", "name", "completeness"]

_REPORT_LIST = TypeAdapter(list[SupplierReport])

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(path: str, console: Console) -> list[SupplierMetrics]:
    """Load records, turning input errors into a clean exit."""
    try:
        records = load_records(path)
    except (FileNotFoundError, MetricsFileError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1)
    if not records:
        console.print(f"[red]No supplier records found in {path}[/red]")
        raise SystemExit(1)
    return records


def _select(records: list[SupplierMetrics], index: int, console: Console) -> SupplierMetrics:
    if not 0 <= index < len(records):
        console.print(
            f"[red]Record index {index} out of range (file has {len(records)} record(s))[/red]"
        )
        raise SystemExit(1)
    return records[index]


def _sort_reports(reports: list[SupplierReport], sort: str) -> list[SupplierReport]:
    if sort == "name":
        return sorted(reports, key=lambda r: r.metrics.display_name.lower())
    if sort == "completeness":
        return sorted(reports, key=lambda r: r.completeness.ratio, reverse=True)
    return sorted(reports, key=lambda r: r.preview.overall, reverse=True)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config", "-c", type=click.Path(), default=None,
    help="Display config YAML file",
)
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool, config: str | None) -> None:
    """esg-preview: Supplier ESG Score Preview Tool

    Preview supplier ESG scores from form metrics:

    \b
      Environmental: efficiency, waste, pollution, renewables
      Social:        wages, human rights, diversity, community, safety
      Governance:    transparency, corruption risk, board, ethics, compliance
    """
    ctx.ensure_object(dict)
    console = Console(no_color=no_color)
    _configure_logging(verbose, console)

    preview_config = PreviewConfig()
    if config:
        try:
            preview_config = load_config(config)
        except (FileNotFoundError, ValueError) as exc:
            # pydantic's ValidationError is a ValueError
            console.print(f"[red]Invalid config: {exc}[/red]")
            raise SystemExit(1)
        logger.debug("Loaded display config from %s", config)

    ctx.obj["console"] = console
    ctx.obj["config"] = preview_config


@cli.command()
@click.argument("path", type=click.Path())
@click.option("--index", "-i", type=int, default=0, help="Record to preview when the file holds several")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON instead of tables")
@click.pass_context
def score(ctx: click.Context, path: str, index: int, as_json: bool) -> None:
    """Preview the ESG score of one supplier record."""
    console: Console = ctx.obj["console"]
    config: PreviewConfig = ctx.obj["config"]

    record = _select(_load(path, console), index, console)
    report = build_report(record, config)

    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return
    TerminalRenderer(console, config).render(report)


@cli.command()
@click.argument("path", type=click.Path())
@click.option("--index", "-i", type=int, default=0, help="Record to check when the file holds several")
@click.pass_context
def completeness(ctx: click.Context, path: str, index: int) -> None:
    """Show the key-metric disclosure checklist for one supplier."""
    console: Console = ctx.obj["console"]
    config: PreviewConfig = ctx.obj["config"]

    record = _select(_load(path, console), index, console)
    report = build_report(record, config)
    TerminalRenderer(console, config).render_completeness(report)


@cli.command()
@click.argument("path", type=click.Path())
@click.option(
    "--sort", "-s", type=click.Choice(SORT_CHOICES), default="overall",
    help="Order of the summary table",
)
@click.pass_context
def batch(ctx: click.Context, path: str, sort: str) -> None:
    """Preview every supplier record in a file as one summary table."""
    console: Console = ctx.obj["console"]
    config: PreviewConfig = ctx.obj["config"]

    reports = [build_report(record, config) for record in _load(path, console)]
    TerminalRenderer(console, config).render_batch(_sort_reports(reports, sort))


@cli.command()
@click.argument("path", type=click.Path())
@click.option("--output", "-o", type=click.Path(), required=True, help="Output file path")
@click.pass_context
def export(ctx: click.Context, path: str, output: str) -> None:
    """Export preview reports for every record to JSON."""
    console: Console = ctx.obj["console"]
    config: PreviewConfig = ctx.obj["config"]

    reports = [build_report(record, config) for record in _load(path, console)]
    _export_json(reports, output, console)


def _export_json(reports: list[SupplierReport], path: str, console: Console) -> None:
    """Export to JSON."""
    with open(path, "wb") as f:
        f.write(_REPORT_LIST.dump_json(reports, indent=2))
    console.print(f"  [green]JSON report exported to:[/green] {path}")
