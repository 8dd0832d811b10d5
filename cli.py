#!/usr/bin/env python3
"""
bodymass CLI

Command-line interface for BMI calculations for adults and children.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

console = Console()


def setup_paths():
    """Add the project root to sys.path for imports."""
    root = Path(__file__).parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


setup_paths()


DETAIL_STYLES = {
    "info": "cyan",
    "warning": "yellow",
    "danger": "red",
}

CATEGORY_STYLES = {
    "severe-underweight": "red",
    "underweight": "yellow",
    "mild-underweight": "yellow",
    "normal": "green",
    "overweight": "yellow",
    "obese1": "red",
    "obese2": "red",
    "obese3": "bold red",
    "child-underweight": "yellow",
    "child-normal": "green",
    "child-overweight": "yellow",
    "child-obese": "red",
}

FORMAT_CHOICE = click.Choice(["text", "json", "markdown"])


def _gauge_bar(position: float, width: int = 40) -> str:
    """Text rendering of the BMI gauge (12-45)."""
    marker = min(width - 1, int(position / 100 * width))
    return "[dim]12[/dim] " + "─" * marker + "[bold]▲[/bold]" + "─" * (width - marker - 1) + " [dim]45[/dim]"


def _emit(result, fmt: str, output: Optional[str]) -> bool:
    """Write json/markdown output. Returns False for text format."""
    from bodymass.exporters import export_json, export_markdown

    if fmt == "text":
        return False

    output_path = Path(output) if output else None
    if fmt == "json":
        click.echo(export_json(result, output_path))
    else:
        click.echo(export_markdown(result, output_path), nl=False)
    return True


def _print_details(details) -> None:
    for detail in details:
        style = DETAIL_STYLES[detail.level.value]
        console.print(f"  [{style}]•[/{style}] {detail.text}")


def _print_adult(result) -> None:
    style = CATEGORY_STYLES.get(result.category.key.value, "white")
    ideal = result.ideal_weight
    console.print(Panel(
        f"[bold]BMI {result.bmi:.1f}[/bold]\n"
        f"[{style}]{result.category.label}[/{style}]\n\n"
        f"{_gauge_bar(result.gauge_position)}\n\n"
        f"Healthy weight for your height: {ideal.min_kg:.1f}-{ideal.max_kg:.1f} kg",
        title="BMI Result",
        border_style=style,
    ))
    if result.details:
        console.print("\n[bold]Interpretation:[/bold]")
        _print_details(result.details)


def _print_child(result) -> None:
    style = CATEGORY_STYLES.get(result.category.key.value, "white")
    console.print(Panel(
        f"[bold]BMI {result.bmi:.1f}[/bold]\n"
        f"[{style}]{result.category.label}[/{style}]\n\n"
        f"{_gauge_bar(result.gauge_position)}",
        title="Child BMI-for-age",
        border_style=style,
    ))

    table = Table(title="Growth Reference")
    table.add_column("Measure", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Percentile", f"{result.percentile:.1f}")
    table.add_row("Z-score", f"{result.z_score:.2f}")
    table.add_row("Median BMI at this age", f"{result.median_bmi:.1f}")
    table.add_row("Weight at median BMI", f"{result.ideal_weight:.1f} kg")
    console.print(table)

    console.print(
        f"\n{result.percentile:.1f}% of children of the same age and sex have a lower BMI."
    )
    _print_details(result.notes)


@click.group()
@click.version_option(version="0.1.0", prog_name="bodymass")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """
    bodymass - BMI Calculator

    Body Mass Index for adults with age, sex and waist adjustments,
    and CDC BMI-for-age percentiles for children aged 2-20.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True))],
        )


@cli.command()
@click.option("--weight", "-w", type=click.FloatRange(20, 300), required=True,
              help="Weight in kg (20-300)")
@click.option("--height", "-h", "height", type=click.FloatRange(100, 250), required=True,
              help="Height in cm (100-250)")
@click.option("--format", "fmt", type=FORMAT_CHOICE, default="text", help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Write json/markdown output to a file")
def basic(weight: float, height: float, fmt: str, output: Optional[str]):
    """
    Calculate adult BMI from weight and height.

    Example:

        bodymass basic --weight 70 --height 175
    """
    from bodymass.engines import assess_adult

    result = assess_adult(weight, height)
    if not _emit(result, fmt, output):
        _print_adult(result)


@cli.command()
@click.option("--weight", "-w", type=click.FloatRange(20, 300), required=True,
              help="Weight in kg (20-300)")
@click.option("--height", "-h", "height", type=click.FloatRange(100, 250), required=True,
              help="Height in cm (100-250)")
@click.option("--age", type=click.IntRange(18, 120), required=True, help="Age in years (18-120)")
@click.option("--sex", type=click.Choice(["male", "female"]), required=True, help="Sex")
@click.option("--waist", type=click.FloatRange(40, 200), help="Waist circumference in cm (40-200)")
@click.option("--format", "fmt", type=FORMAT_CHOICE, default="text", help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Write json/markdown output to a file")
def adult(
    weight: float,
    height: float,
    age: int,
    sex: str,
    waist: Optional[float],
    fmt: str,
    output: Optional[str],
):
    """
    Adult BMI with age, sex and waist circumference interpretation.

    Example:

        bodymass adult -w 82 -h 180 --age 45 --sex male --waist 96
    """
    from bodymass.engines import assess_adult

    result = assess_adult(weight, height, age_years=age, sex=sex, waist_cm=waist)
    if not _emit(result, fmt, output):
        _print_adult(result)


@cli.command()
@click.option("--weight", "-w", type=click.FloatRange(5, 150), required=True,
              help="Weight in kg (5-150)")
@click.option("--height", "-h", "height", type=click.FloatRange(50, 200), required=True,
              help="Height in cm (50-200)")
@click.option("--sex", type=click.Choice(["male", "female"]), required=True, help="Sex")
@click.option("--age-years", type=click.IntRange(2, 19), required=True, help="Age in years (2-19)")
@click.option("--age-months", type=click.IntRange(0, 11), default=0, help="Additional months (0-11)")
@click.option("--format", "fmt", type=FORMAT_CHOICE, default="text", help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Write json/markdown output to a file")
def child(
    weight: float,
    height: float,
    sex: str,
    age_years: int,
    age_months: int,
    fmt: str,
    output: Optional[str],
):
    """
    Child BMI-for-age percentile (CDC growth charts, ages 2-20).

    Example:

        bodymass child -w 25 -h 128 --sex female --age-years 8 --age-months 6
    """
    from bodymass.engines import calculate_child_bmi

    result = calculate_child_bmi(weight, height, sex, age_years, age_months)
    if result is None:
        console.print("[red]Could not calculate BMI. Please check the values you entered.[/red]")
        sys.exit(1)

    if not _emit(result, fmt, output):
        _print_child(result)


@cli.command()
def info():
    """Show information about bodymass."""
    console.print(Panel(
        "[bold]bodymass[/bold] - BMI Calculator\n\n"
        "Body Mass Index and related health-risk indicators:\n\n"
        "• WHO adult BMI categories (8 levels)\n"
        "• Age-adjusted recommended BMI ranges\n"
        "• Waist circumference risk (WHO European thresholds)\n"
        "• CDC BMI-for-age percentiles for children\n\n"
        "[dim]Results are indicative only and do not replace medical advice.[/dim]",
        title="About",
        border_style="blue",
    ))

    console.print("\n[bold]Quick Start:[/bold]")
    console.print("  bodymass basic --weight 70 --height 175")
    console.print("  bodymass adult -w 82 -h 180 --age 45 --sex male --waist 96")
    console.print("  bodymass child -w 25 -h 128 --sex female --age-years 8")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
