"""Typer CLI for quick takeoffs and full project runs."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from takeoff.calculators.drywall import calculate_drywall
from takeoff.calculators.insulation import calculate_insulation
from takeoff.calculators.studs import calculate_studs
from takeoff.models import (
    Area, DrywallSheet, DrywallSheetSize, InsulationProduct, InvalidArgumentError,
    Length, TakeoffReport,
)
from takeoff.rendering.wall_strip import WallStripSvgRenderer, build_wall_strip
from takeoff.services.project_loader import ProjectLoadError
from takeoff.services.takeoff_service import TakeoffService

app = typer.Typer(help="RapidTakeoff: wall drywall, stud and insulation takeoffs.")

RULE = "=" * 40


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> typer.Exit:
    typer.echo(f"[ERROR] {message}", err=True)
    return typer.Exit(code=1)


def parse_lengths(csv: str) -> list[float]:
    """Comma-separated non-negative wall lengths in feet."""
    values: list[float] = []
    for part in (p.strip() for p in csv.split(",")):
        if not part:
            continue
        try:
            value = float(part)
        except ValueError:
            raise InvalidArgumentError("--lengths-feet", f"Invalid number '{part}'.") from None
        if value < 0:
            raise InvalidArgumentError("--lengths-feet", "Lengths cannot be negative.")
        values.append(value)
    if not values:
        raise InvalidArgumentError("--lengths-feet", "At least one wall length is required.")
    return values


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return text or "0"


def _walls_line(lengths: list[float]) -> str:
    return "Walls (ft): " + " + ".join(_fmt(v) for v in lengths)


def _cost_lines(label: str, unit_price: float | None, quantity: int) -> None:
    if unit_price is None:
        return
    typer.echo(f"Price/{label}: ${unit_price:.2f}")
    typer.echo(f"Est. cost:  ${quantity * unit_price:.2f}")


@app.command()
def drywall(
    height_feet: Annotated[float, typer.Option("--height-feet", help="Wall height in feet")],
    lengths_feet: Annotated[str, typer.Option("--lengths-feet", help="Comma-separated wall lengths in feet")],
    sheet: Annotated[str, typer.Option("--sheet", help="Sheet size: 4x8 or 4x12")] = "4x8",
    waste: Annotated[float, typer.Option("--waste", help="Waste factor as fraction")] = 0.10,
    price_per_sheet: Annotated[Optional[float], typer.Option("--price-per-sheet")] = None,
) -> None:
    """Drywall sheet takeoff from wall lengths and height."""
    try:
        lengths = parse_lengths(lengths_feet)
        token = sheet.strip().lower()
        if token not in {s.value for s in DrywallSheetSize}:
            raise InvalidArgumentError("--sheet", "Sheet must be '4x8' or '4x12'.")
        net_area = Area.from_rectangle(Length.from_feet(sum(lengths)), Length.from_feet(height_feet))
        result = calculate_drywall(
            net_area, DrywallSheet.from_size(DrywallSheetSize(token)), waste,
        )
    except InvalidArgumentError as exc:
        raise _fail(exc.message)

    typer.echo(RULE)
    typer.echo("RapidTakeoff - Drywall Takeoff")
    typer.echo(RULE)
    typer.echo(_walls_line(lengths))
    typer.echo(f"Total length: {_fmt(sum(lengths))} ft")
    typer.echo(f"Height: {_fmt(height_feet)} ft")
    typer.echo()
    typer.echo(f"Net area:   {_fmt(result.net_area.square_feet)} sqft")
    typer.echo(f"Waste:      {_fmt(result.waste_factor)}")
    typer.echo(f"Gross area: {_fmt(result.gross_area.square_feet)} sqft")
    typer.echo()
    typer.echo(
        f"Sheet:      {_fmt(result.sheet.width.feet)}x{_fmt(result.sheet.height.feet)} ft "
        f"({_fmt(result.sheet.area.square_feet)} sqft)"
    )
    typer.echo(f"Sheets:     {result.sheet_count}")
    _cost_lines("sheet", price_per_sheet, result.sheet_count)
    typer.echo(RULE)


@app.command()
def studs(
    lengths_feet: Annotated[str, typer.Option("--lengths-feet", help="Comma-separated wall lengths in feet")],
    spacing_in: Annotated[float, typer.Option("--spacing-in", help="Stud spacing in inches")],
    waste: Annotated[float, typer.Option("--waste", help="Waste factor as fraction")] = 0.0,
    price_per_stud: Annotated[Optional[float], typer.Option("--price-per-stud")] = None,
) -> None:
    """Stud takeoff from wall lengths and on-center spacing."""
    try:
        lengths = parse_lengths(lengths_feet)
        result = calculate_studs(
            [Length.from_feet(v) for v in lengths], Length.from_inches(spacing_in), waste,
        )
    except InvalidArgumentError as exc:
        raise _fail(exc.message)

    typer.echo(RULE)
    typer.echo("RapidTakeoff - Stud Takeoff")
    typer.echo(RULE)
    typer.echo(_walls_line(lengths))
    typer.echo(f"Spacing: {_fmt(spacing_in)} in OC")
    typer.echo()
    for i, count in enumerate(result.studs_per_wall):
        typer.echo(f"Wall {i + 1}: {count} studs")
    typer.echo()
    typer.echo(f"Base studs: {result.base_studs}")
    typer.echo(f"Waste:      {_fmt(result.waste_factor)}")
    typer.echo(f"Total studs: {result.total_studs}")
    _cost_lines("stud", price_per_stud, result.total_studs)
    typer.echo(RULE)


@app.command()
def insulation(
    height_feet: Annotated[float, typer.Option("--height-feet", help="Wall height in feet")],
    lengths_feet: Annotated[str, typer.Option("--lengths-feet", help="Comma-separated wall lengths in feet")],
    coverage_sqft: Annotated[float, typer.Option("--coverage-sqft", help="Coverage per roll/bag in sqft")],
    waste: Annotated[float, typer.Option("--waste", help="Waste factor as fraction")] = 0.10,
    name: Annotated[Optional[str], typer.Option("--name", help="Product name")] = None,
    price_per_unit: Annotated[Optional[float], typer.Option("--price-per-unit")] = None,
) -> None:
    """Insulation roll/bag takeoff from wall lengths and height."""
    try:
        lengths = parse_lengths(lengths_feet)
        if not coverage_sqft > 0:
            raise InvalidArgumentError("--coverage-sqft", "Coverage must be greater than zero.")
        net_area = Area.from_rectangle(Length.from_feet(sum(lengths)), Length.from_feet(height_feet))
        product = InsulationProduct(coverage=Area.from_square_feet(coverage_sqft), name=name)
        result = calculate_insulation(net_area, product, waste)
    except InvalidArgumentError as exc:
        raise _fail(exc.message)

    typer.echo(RULE)
    typer.echo("RapidTakeoff - Insulation Takeoff")
    typer.echo(RULE)
    typer.echo(_walls_line(lengths))
    typer.echo(f"Total length: {_fmt(sum(lengths))} ft")
    typer.echo(f"Height: {_fmt(height_feet)} ft")
    typer.echo()
    typer.echo(f"Product:    {result.product.name or 'Insulation'}")
    typer.echo(f"Coverage:   {_fmt(coverage_sqft)} sqft per unit")
    typer.echo(f"Net area:   {_fmt(result.net_area.square_feet)} sqft")
    typer.echo(f"Waste:      {_fmt(result.waste_factor)}")
    typer.echo(f"Gross area: {_fmt(result.gross_area.square_feet)} sqft")
    typer.echo(f"Quantity:   {result.quantity}")
    _cost_lines("unit", price_per_unit, result.quantity)
    typer.echo(RULE)


@app.command()
def project(
    project_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    svg: Annotated[Optional[Path], typer.Option("--svg", help="Write wall strip SVG here")] = None,
) -> None:
    """Full takeoff for a project file, openings included."""
    service = TakeoffService()
    try:
        loaded = service.load(project_file)
        report = service.run(loaded)
    except (ProjectLoadError, InvalidArgumentError) as exc:
        raise _fail(str(exc))

    _print_project_report(report)

    if svg is not None:
        markup = WallStripSvgRenderer().render(build_wall_strip(loaded, report))
        try:
            svg.write_text(markup, encoding="utf-8")
        except OSError as exc:
            raise _fail(f"Cannot write {svg}: {exc.strerror or exc}")
        typer.echo(f"Wrote {svg}")


def _print_project_report(report: TakeoffReport) -> None:
    typer.echo(RULE)
    typer.echo(f"RapidTakeoff - {report.project_name}")
    typer.echo(RULE)
    typer.echo(_walls_line([w.feet for w in report.wall_lengths]))
    typer.echo(f"Height: {_fmt(report.wall_height.feet)} ft")
    typer.echo()
    typer.echo(f"Gross area:    {_fmt(report.gross_area.square_feet)} sqft")
    typer.echo(f"Openings area: {_fmt(report.penetration_area.square_feet)} sqft")
    typer.echo(f"Net area:      {_fmt(report.net_area.square_feet)} sqft")
    typer.echo()
    if report.drywall:
        typer.echo(f"Drywall sheets:   {report.drywall.sheet_count}")
    if report.studs:
        typer.echo(f"Studs:            {report.studs.total_studs} (base {report.studs.base_studs})")
        framing = report.studs.framing
        if framing:
            typer.echo(
                f"  common {framing.common_studs}, king {framing.king_studs}, "
                f"trimmer {framing.trimmer_studs}, cripple top {framing.cripple_top_studs}, "
                f"cripple bottom {framing.cripple_bottom_studs}"
            )
    if report.insulation:
        typer.echo(f"Insulation units: {report.insulation.quantity}")
    for warning in report.warnings:
        typer.echo(f"[WARN] {warning}")
    typer.echo(RULE)


if __name__ == "__main__":
    app()
