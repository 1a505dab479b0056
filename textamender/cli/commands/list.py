"""CLI command for listing available transforms."""

import json

import click

from textamender.transforms import Category, default_registry


@click.command("list")
@click.option(
    "--category",
    "category_name",
    type=click.Choice([c.name for c in Category], case_sensitive=False),
    help="Only show one category",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print transform summaries as JSON",
)
def list_transforms(category_name: str | None, as_json: bool):
    """List available transforms, grouped by category.

    Examples:

        textamender list
        textamender list --category paths
        textamender list --json
    """
    registry = default_registry()
    groups = registry.by_category()
    if category_name:
        selected = Category[category_name.upper()]
        groups = {selected: groups[selected]}

    if as_json:
        payload = {
            category.value: [t.summary().model_dump(mode="json") for t in transforms]
            for category, transforms in groups.items()
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for category, transforms in groups.items():
        click.echo(f"{category.value}:")
        if not transforms:
            click.echo("  (none)")
        for transform in transforms:
            click.echo(f"  {transform.key:<26} {transform.name}")
