"""CLI command for validating pipe files."""

import sys

import click

from textamender.core.exceptions import PipeConfigError
from textamender.models.loader import load_pipe_config
from textamender.transforms import Pipeline, default_registry


@click.command()
@click.argument("pipe_path", type=click.Path(exists=True, dir_okay=False))
def validate(pipe_path: str):
    """Validate a pipe YAML file.

    Checks:
    - YAML syntax
    - Pipe schema validation
    - Every step names a registered transform

    Examples:

        textamender validate pipe.yaml
    """
    try:
        config = load_pipe_config(pipe_path)
    except PipeConfigError as e:
        click.echo(f"✗ Pipe validation failed: {e}", err=True)
        sys.exit(1)

    registry = default_registry()
    unknown = [key for key in config.steps if key not in registry]
    if unknown:
        click.echo(f"✗ Unknown transforms in '{config.name}': {', '.join(unknown)}", err=True)
        sys.exit(1)

    pipeline = Pipeline.from_keys(registry, config.steps)
    click.echo(f"✓ Pipe '{config.name}' is valid")
    click.echo(f"  Steps: {len(pipeline)}")
    click.echo(f"  Output: {pipeline.output_filename(config.output.basename)}")
