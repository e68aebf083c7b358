#!/usr/bin/env python3
"""
Linked Places transformer - command line entry point.

Usage:
    python -m linked_places.main transform
    python -m linked_places.main transform --dataset heritage_at_risk
    python -m linked_places.main datasets
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from linked_places.config import DATASETS, format_license, settings
from linked_places.exceptions import TransformError
from linked_places.transformer import run_transform


console = Console()


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug):
    """Linked Places transformer for Peripleo datasets"""
    if debug:
        from linked_places.utils.logging import setup_logging
        setup_logging(level="DEBUG")


@cli.command()
@click.option(
    "--dataset",
    type=click.Choice(list(DATASETS.keys())),
    default=settings.dataset,
    show_default=True,
    help="Dataset variant of the input CSV",
)
@click.option("--input", "input_path", type=click.Path(path_type=Path), help="Input CSV (default: dataset's path)")
@click.option("--output", "output_path", type=click.Path(path_type=Path), help="Output JSON (default: dataset's path)")
def transform(dataset: str, input_path: Path | None, output_path: Path | None):
    """
    Transform a CSV of place records into a Linked Places FeatureCollection.
    """
    console.print(f"\n[bold blue]Linked Places - Transform[/bold blue]")
    console.print(f"Dataset: {dataset}\n")

    try:
        result = run_transform(dataset, input_path=input_path, output_path=output_path)
    except TransformError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title="Transform Summary")
    table.add_column("Dataset")
    table.add_column("Read")
    table.add_column("Features")
    table.add_column("Dropped")
    table.add_column("Failed")
    table.add_column("Duration")
    table.add_column("Output")

    duration = f"{result.duration_seconds:.1f}s" if result.duration_seconds is not None else "-"
    table.add_row(
        result.dataset,
        str(result.records_read),
        str(result.features_built),
        str(result.records_dropped),
        str(result.records_failed),
        duration,
        str(result.output_path),
    )
    console.print(table)

    for error in result.errors[:10]:
        console.print(f"[yellow]{error}[/yellow]")


@cli.command()
def datasets():
    """List the configured datasets and their indexing metadata."""
    table = Table(title="Datasets")
    table.add_column("Key")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("License")
    table.add_column("Source")

    for key, dataset in DATASETS.items():
        indexing = dataset.indexing
        table.add_row(
            key,
            indexing.name,
            indexing.description,
            format_license(indexing.license),
            indexing.identifier,
        )

    console.print(table)


if __name__ == "__main__":
    cli()
