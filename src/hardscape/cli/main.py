from __future__ import annotations

from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hardscape.breakdown.tables import (
    breakdown_dataframe,
    materials_dataframe,
    reconciled_dataframe,
)
from hardscape.calculators import estimate as run_estimate
from hardscape.calculators import list_calculators
from hardscape.calculators.foundation import FoundationDetails
from hardscape.config import (
    EstimationConfig,
    default_config,
    load_estimation_config,
    load_inputs,
)
from hardscape.core.errors import HardscapeValueError
from hardscape.core.types import Estimate, format_amount
from hardscape.matching import (
    ReconciledTask,
    match_template,
    reconcile_breakdown,
    resolve_task_name,
)
from hardscape.telemetry import MatchTelemetryLogger

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _load_config(config: Path | None) -> EstimationConfig:
    if config is None:
        return default_config()
    try:
        return load_estimation_config(config)
    except FileNotFoundError as exc:
        console.print(f"[red]Missing configuration file:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


def _print_estimate(result: Estimate) -> None:
    console.print(
        f"[bold]{result.calculator}[/bold]: {result.quantity.display()} "
        f"({result.total_hours:.2f} h total)"
    )
    breakdown = Table(title="Task breakdown")
    breakdown.add_column("Task")
    breakdown.add_column("Hours", justify="right")
    breakdown.add_column("Amount", justify="right")
    breakdown.add_column("Template")
    for item in result.task_breakdown:
        breakdown.add_row(
            escape(item.name),
            f"{item.hours:.2f}",
            escape(item.display_amount()),
            escape(item.template_id or "-"),
        )
    console.print(breakdown)

    if result.materials:
        materials = Table(title="Materials")
        materials.add_column("Material")
        materials.add_column("Quantity", justify="right")
        materials.add_column("Unit")
        for line in result.materials:
            materials.add_row(escape(line.name), format_amount(line.quantity), escape(line.unit))
        console.print(materials)

    for warning in result.warnings:
        console.print(f"[yellow]warning:[/yellow] {escape(warning)}")


def _print_reconciled(reconciled: tuple[ReconciledTask, ...]) -> None:
    table = Table(title="Reconciliation")
    table.add_column("Task")
    table.add_column("Resolved as")
    table.add_column("Strategy")
    table.add_column("Template")
    table.add_column("h/unit", justify="right")
    for task in reconciled:
        strategy = task.match.strategy.value
        if task.match.low_confidence:
            strategy = f"[yellow]{strategy}[/yellow]"
        elif not task.match.matched:
            strategy = f"[red]{strategy}[/red]"
        template = task.match.template
        table.add_row(
            escape(task.item.name),
            escape(task.resolved_name),
            strategy,
            escape(template.name) if template is not None else "-",
            f"{task.estimated_hours_per_unit:.3f}",
        )
    console.print(table)


@app.command()
def calculators():
    """List the available calculator kinds."""
    for kind in list_calculators():
        console.print(kind)


@app.command()
def tables(
    config: Path | None = typer.Option(
        None, "--config", help="Estimation config YAML (defaults to the bundled tables)"
    ),
):
    """Print the carrier and material capacity tables."""
    rate_tables = _load_config(config).rate_tables

    carriers = Table(title="Carriers")
    carriers.add_column("Size (t)", justify="right")
    carriers.add_column("Speed (m/h)", justify="right")
    for carrier in rate_tables.carriers:
        carriers.add_row(f"{carrier.size_class_t:g}", f"{carrier.speed_m_per_hour:g}")
    console.print(carriers)

    capacities = Table(title="Capacity per trip")
    capacities.add_column("Material")
    capacities.add_column("Capacities (size t → per trip)")
    for material in rate_tables.materials():
        cells = ", ".join(
            f"{size:g}→{rate_tables.material_capacity(material, size):g}"
            for size in rate_tables.capacity_sizes(material)
        )
        capacities.add_row(escape(material), cells)
    console.print(capacities)


@app.command()
def estimate(
    inputs: Path,
    config: Path | None = typer.Option(None, "--config", help="Estimation config YAML"),
    reconcile: bool = typer.Option(
        False, "--reconcile", help="Match breakdown lines against the config catalog"
    ),
    parent: str | None = typer.Option(
        None, "--parent", help="Parent task name used to pick cutting variants"
    ),
    out: Path | None = typer.Option(None, "--out", help="Write the task breakdown CSV"),
    materials_out: Path | None = typer.Option(
        None, "--materials-out", help="Write the materials CSV"
    ),
    telemetry_log: Path | None = typer.Option(
        None,
        "--telemetry-log",
        help="Append match decisions to this JSONL file (requires --reconcile).",
    ),
):
    """Run one calculator from an input YAML and print the estimate."""
    cfg = _load_config(config)
    try:
        payload = load_inputs(inputs)
        result = run_estimate(payload, cfg)
    except FileNotFoundError as exc:
        console.print(f"[red]Missing input file:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    except HardscapeValueError as exc:
        console.print(f"[red]Invalid input:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid input file:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    _print_estimate(result)

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        breakdown_dataframe(result).to_csv(str(out), index=False)
        console.print(f"Breakdown saved to {out}")
    if materials_out is not None:
        materials_out.parent.mkdir(parents=True, exist_ok=True)
        materials_dataframe(result).to_csv(str(materials_out), index=False)
        console.print(f"Materials saved to {materials_out}")

    if not reconcile:
        if telemetry_log is not None:
            console.print("[dim]--telemetry-log ignored without --reconcile.[/]")
        return
    digging_method = None
    if isinstance(result.details, FoundationDetails):
        digging_method = result.details.digging_method
    telemetry = None
    if telemetry_log is not None:
        telemetry = MatchTelemetryLogger(
            telemetry_log, context={"calculator": result.calculator, "inputs": str(inputs)}
        )
    reconciled = reconcile_breakdown(
        result.task_breakdown,
        cfg.catalog,
        parent_name=parent,
        digging_method=digging_method,
        telemetry=telemetry,
    )
    _print_reconciled(reconciled)
    if out is not None:
        reconciled_path = out.with_name(f"{out.stem}_reconciled{out.suffix}")
        reconciled_dataframe(reconciled).to_csv(str(reconciled_path), index=False)
        console.print(f"Reconciliation saved to {reconciled_path}")
    if telemetry is not None:
        console.print(
            f"[dim]{telemetry.records_written} telemetry record(s) written to {telemetry_log}.[/]"
        )


@app.command()
def match(
    task_name: str,
    config: Path = typer.Option(..., "--config", help="Estimation config YAML with a catalog"),
    parent: str | None = typer.Option(None, "--parent", help="Parent task display name"),
    digging_method: str | None = typer.Option(
        None, "--digging-method", help="shovel|small|medium|large (foundation tasks)"
    ),
):
    """Show which catalog template a task name reconciles to."""
    cfg = _load_config(config)
    resolved = resolve_task_name(task_name, parent, digging_method)
    result = match_template(resolved, cfg.catalog)
    if resolved != task_name:
        console.print(f"Resolved as: {escape(resolved)}")
    if result.template is None:
        console.print(f"[red]No template matched[/red] {escape(resolved)}")
        raise typer.Exit(1)
    template = result.template
    console.print(f"Matched: {escape(template.name)}")
    console.print(f"Strategy: {result.strategy.value}")
    console.print(f"Template id: {escape(template.id)}")
    hours = template.estimated_hours_per_unit
    if hours is not None:
        console.print(f"Hours per {escape(template.unit or 'unit')}: {format_amount(hours, 3)}")
    if result.low_confidence:
        console.print("[yellow]warning:[/yellow] partial match; verify before relying on it.")


if __name__ == "__main__":
    app()
