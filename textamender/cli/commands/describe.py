"""CLI command for describing one transform."""

import sys

import click

from textamender.core.exceptions import TransformNotFoundError
from textamender.transforms import default_registry


@click.command()
@click.argument("key")
def describe(key: str):
    """Show the description and input hints of a transform.

    Examples:

        textamender describe csv-to-json
    """
    registry = default_registry()
    try:
        summary = registry.get(key).summary()
    except TransformNotFoundError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(f"{summary.name} ({summary.key})")
    click.echo(f"  Category: {summary.category.value}")
    if summary.input_label:
        click.echo(f"  Input: {summary.input_label}")
    if summary.input_example:
        click.echo("  Example input:")
        for line in summary.input_example.split("\n"):
            click.echo(f"    {line}")
    if summary.warning:
        click.echo(f"  Warning: {summary.warning}")
    click.echo("")
    click.echo(summary.description)
