"""Typer CLI for balustrade layout and ordering."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from balustrade.application import CalculateLayoutCommand, CalculationInput, CalculationResult
from balustrade.application.config import ConfigError, config_to_input, load_config
from balustrade.cli.commands import validate_command
from balustrade.domain import GateSpec, StructuralSystem, resolve_spacing, solve_panel_layout
from balustrade.domain.data import CATALOG, get_calculator
from balustrade.domain.value_objects import DEFAULT_GATE_LEAF_WIDTH_MM
from balustrade.infrastructure import (
    ExportError,
    ExporterRegistry,
    ExportManager,
    OrderSubmissionError,
    submit_order_sync,
)
from balustrade.infrastructure.ordering import DEFAULT_ORDER_API_URL

# Console format -> exporter used to render it
CONSOLE_FORMATS = {
    "text": "order-text",
    "csv": "order-csv",
    "json": "layout-json",
}


app = typer.Typer(
    name="balustrade",
    help="Lay out frameless glass balustrades and build hardware order lists.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Lay out frameless glass balustrades and build hardware order lists."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_formats(formats_str: str) -> list[str]:
    if formats_str.lower() == "all":
        return ExporterRegistry.available_formats()
    formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


def _export(formats: list[str], result: CalculationResult, output_dir: Path, project_name: str) -> None:
    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(formats, result, project_name)
    except (ExportError, KeyError, OSError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt}: {path}")


def _exit_on_errors(result: CalculationResult) -> None:
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)


def _side_gates(
    side_count: int,
    gate_sides: list[int] | None,
    gate_boundary: int,
    hinge_right: bool,
) -> list[GateSpec | None]:
    gates: list[GateSpec | None] = [None] * side_count
    for side in gate_sides or []:
        if side < 0 or side >= side_count:
            typer.echo(f"Error: gate side {side} is out of range (0-{side_count - 1})", err=True)
            raise typer.Exit(code=1)
        gates[side] = GateSpec(
            panel_boundary_index=gate_boundary,
            hinge_on_left=not hinge_right,
            leaf_width_mm=DEFAULT_GATE_LEAF_WIDTH_MM,
        )
    return gates


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON project file"),
    ] = None,
    calc_key: Annotated[
        str | None,
        typer.Option("--calc-key", "-k", help="Hardware calculator, e.g. sp12, sd50, vortex"),
    ] = None,
    sides: Annotated[
        list[float] | None,
        typer.Option("--side", "-s", help="Side length in mm (repeat for each side)"),
    ] = None,
    shape: Annotated[
        str | None,
        typer.Option("--shape", help="Shape: inline, corner, u, enclosed, custom"),
    ] = None,
    fence_type: Annotated[
        str | None,
        typer.Option("--fence-type", help="Fence type: balustrade or pool"),
    ] = None,
    thickness: Annotated[
        float | None,
        typer.Option("--thickness", "-t", help="Glass thickness in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Glass height in mm"),
    ] = None,
    zone: Annotated[
        str | None,
        typer.Option("--zone", "-z", help="Wind zone: L, M, H, VH, EH"),
    ] = None,
    fixing: Annotated[
        str | None,
        typer.Option("--fixing", help="Fixing type, e.g. Concrete"),
    ] = None,
    finish: Annotated[
        str | None,
        typer.Option("--finish", help="Hardware finish, e.g. SSS, Black"),
    ] = None,
    handrail: Annotated[
        str | None,
        typer.Option("--handrail", help="Handrail code, e.g. S25"),
    ] = None,
    disc_head: Annotated[
        str | None,
        typer.Option("--disc-head", help="Disc head or clamp variant for standoffs"),
    ] = None,
    spigots: Annotated[
        str | None,
        typer.Option("--spigots", help="Fixings per panel: auto, 2, 3"),
    ] = None,
    gate_sides: Annotated[
        list[int] | None,
        typer.Option("--gate", help="Add a gate on this zero-based side (repeatable)"),
    ] = None,
    gate_boundary: Annotated[
        int,
        typer.Option("--gate-boundary", help="Panel boundary for gates added with --gate"),
    ] = 0,
    hinge_right: Annotated[
        bool,
        typer.Option("--hinge-right", help="Hinge gates added with --gate on the right"),
    ] = False,
    gate_width: Annotated[
        float | None,
        typer.Option("--gate-width", help="Gate leaf width in mm"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Console output: text, csv, json"),
    ] = "text",
    output_formats: Annotated[
        str | None,
        typer.Option("--output-formats", help="Comma-separated export formats (or 'all')"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
    submit: Annotated[
        bool,
        typer.Option("--submit", help="Submit the order list to the order service"),
    ] = False,
    order_api_url: Annotated[
        str,
        typer.Option("--order-api-url", envvar="BALUSTRADE_ORDER_API_URL", help="Order service base URL"),
    ] = DEFAULT_ORDER_API_URL,
    token: Annotated[
        str | None,
        typer.Option("--token", envvar="BALUSTRADE_ORDER_TOKEN", help="Bearer token for the order service"),
    ] = None,
) -> None:
    """Calculate a compliant panel layout and its order list.

    You can provide the layout via CLI options or via a JSON project file.
    When using --config, CLI options override project file values.

    Examples:
        balustrade calculate -k sp12 -s 3000 -t 12 -h 1100 -z VH
        balustrade calculate -k sd50 -s 2400 -s 1800 --shape corner --gate 1
        balustrade calculate --config deck.json --zone H --format json
    """
    if output_format not in CONSOLE_FORMATS:
        typer.echo(f"Error: --format must be one of: {', '.join(CONSOLE_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    config = None
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        calculation_input = config_to_input(config)
    else:
        if calc_key is None or not sides:
            typer.echo("Error: --calc-key and --side are required when --config is not provided", err=True)
            raise typer.Exit(code=1)
        calculation_input = CalculationInput(
            calc_key=calc_key,
            side_lengths_mm=list(sides),
            shape="inline" if len(sides) == 1 else "custom",
        )

    overrides = {
        "calc_key": calc_key,
        "side_lengths_mm": list(sides) if sides else None,
        "shape": shape,
        "fence_type": fence_type,
        "glass_thickness_mm": thickness,
        "glass_height_mm": height,
        "wind_zone": zone,
        "fixing_type": fixing,
        "finish": finish,
        "handrail": handrail,
        "disc_head": disc_head,
        "spigots_per_panel": spigots,
        "gate_leaf_width_mm": gate_width,
    }
    calculation_input = replace(
        calculation_input,
        **{name: value for name, value in overrides.items() if value is not None},
    )
    if gate_sides:
        calculation_input = replace(
            calculation_input,
            side_gates=_side_gates(
                len(calculation_input.side_lengths_mm), gate_sides, gate_boundary, hinge_right
            ),
        )

    result = CalculateLayoutCommand().execute(calculation_input)
    _exit_on_errors(result)

    exporter = ExporterRegistry.get(CONSOLE_FORMATS[output_format])()
    typer.echo(exporter.export_string(result))

    if output_formats is None and config is not None and config.output.formats:
        output_formats = ",".join(config.output.formats)
    if output_formats:
        formats = _parse_formats(output_formats)
        if output_dir is None:
            output_dir = Path(config.output.output_dir) if config and config.output.output_dir else Path(".")
        if project_name is None:
            project_name = config.output.project_name if config else "balustrade"
        _export(formats, result, output_dir, project_name)

    if submit:
        try:
            response = submit_order_sync(result.order_items, base_url=order_api_url, token=token)
        except OrderSubmissionError as e:
            typer.echo(f"Order submission failed: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"\n{response.message or 'Order submitted'}")
        if response.data is not None and response.data.invoice_url:
            typer.echo(f"Invoice: {response.data.invoice_url}")


@app.command()
def spacing(
    calc_key: Annotated[str, typer.Argument(help="Hardware calculator, e.g. sp12")],
    thickness: Annotated[float, typer.Option("--thickness", "-t", help="Glass thickness in mm")],
    height: Annotated[float, typer.Option("--height", "-h", help="Glass height in mm")],
    zone: Annotated[str, typer.Option("--zone", "-z", help="Wind zone: L, M, H, VH, EH")],
    fence_type: Annotated[str, typer.Option("--fence-type", help="Fence type: balustrade or pool")] = "balustrade",
    fixing: Annotated[str | None, typer.Option("--fixing", help="Fixing type, e.g. Concrete")] = None,
) -> None:
    """Look up certified fixing spacing for a calculator."""
    system = StructuralSystem.from_fence_type(fence_type)
    try:
        resolved = resolve_spacing(calc_key, system, thickness, height, zone, fixing)
    except (KeyError, ValueError) as e:
        typer.echo(f"Error: {e.args[0] if e.args else e}", err=True)
        raise typer.Exit(code=1)

    if resolved is None:
        typer.echo(
            f"No compliance data for {calc_key} {system.value}, {thickness:g}mm glass, "
            f"{height:g}mm high, zone {zone.upper()}",
            err=True,
        )
        raise typer.Exit(code=1)
    if not resolved.is_permitted:
        typer.echo(f"Combination not engineered for {calc_key} in zone {zone.upper()}", err=True)
        raise typer.Exit(code=1)

    row = resolved.row
    typer.echo(f"Calculator:       {resolved.calc_key}")
    typer.echo(f"Band:             {row.height_min_mm:g}-{row.height_max_mm:g}mm, {row.thickness_mm:g}mm glass")
    typer.echo(f"Internal spacing: {resolved.internal_spacing_mm:g}mm")
    typer.echo(f"Edge spacing:     {resolved.edge_spacing_mm:g}mm")
    if not resolved.exact_band:
        typer.echo("Note: height outside certified bands; nearest band used")
    if resolved.clamped:
        typer.echo("Note: spacing reduced for this zone/fixing")


@app.command()
def solve(
    run: Annotated[float, typer.Argument(help="Run length in mm")],
    gap_min: Annotated[float, typer.Option("--gap-min", help="Smallest gap in mm")] = 10.0,
    gap_max: Annotated[float, typer.Option("--gap-max", help="Largest gap in mm")] = 30.0,
    max_width: Annotated[float, typer.Option("--max-width", help="Widest panel in mm")] = 1500.0,
    step: Annotated[float, typer.Option("--step", help="Panel width increment in mm")] = 10.0,
    min_width: Annotated[float, typer.Option("--min-width", help="Narrowest panel in mm")] = 200.0,
) -> None:
    """Solve equal-width panels and gaps for a single run."""
    try:
        layout = solve_panel_layout(run, gap_min, gap_max, max_width, step, min_panel_width_mm=min_width)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if layout is None:
        typer.echo(f"Layout not achievable for {run:g}mm with gaps {gap_min:g}-{gap_max:g}mm", err=True)
        raise typer.Exit(code=1)

    widths = ", ".join(f"{w:g}" for w in layout.panel_widths_mm)
    typer.echo(f"Panels: {layout.panel_count} x [{widths}] mm")
    typer.echo(f"Gap:    {layout.gap_mm:g}mm")
    typer.echo(f"Length: {layout.adjusted_length_mm:g}mm")


@app.command()
def export(
    config_file: Annotated[Path, typer.Argument(help="Path to JSON project file")],
    formats: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Comma-separated export formats (or 'all')"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Calculate a project file and export the result."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    formats_str = formats or ",".join(config.output.formats)
    if not formats_str:
        typer.echo("Error: no export formats given (use --format or output.formats)", err=True)
        raise typer.Exit(code=1)

    result = CalculateLayoutCommand().execute(config_to_input(config))
    _exit_on_errors(result)

    if output_dir is None:
        output_dir = Path(config.output.output_dir) if config.output.output_dir else Path(".")
    _export(_parse_formats(formats_str), result, output_dir, project_name or config.output.project_name)


@app.command()
def catalog(
    calc_key: Annotated[str | None, typer.Argument(help="Calculator to describe")] = None,
) -> None:
    """List calculators, or show the options one calculator offers."""
    if calc_key is None:
        for key, spec in sorted(CATALOG.items()):
            typer.echo(f"{key:<16}{spec.family.value}")
        return

    try:
        spec = get_calculator(calc_key)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Calculator:  {spec.calc_key} ({spec.family.value})")
    typer.echo(f"Fence types: {', '.join(option.label for option in spec.fence_types)}")
    typer.echo(f"Wind zones:  {', '.join(spec.wind_zones)}")
    typer.echo(f"Heights:     {', '.join(str(h) for h in spec.glass_heights)}")
    typer.echo(f"Thicknesses: {', '.join(f'{t:g}' for t in spec.glass_thicknesses)}")
    typer.echo(f"Handrails:   {', '.join(spec.handrail_values)}")
    typer.echo(f"Finishes:    {', '.join(spec.finishes)}")
    typer.echo(f"Fixings:     {', '.join(spec.fixing_types)}")
    if spec.head_options:
        typer.echo(f"Heads:       {', '.join(f'{o.value} ({o.label})' for o in spec.head_options)}")


if __name__ == "__main__":
    app()
