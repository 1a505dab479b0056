"""CLI command for running a pipe over text."""

import sys
from pathlib import Path

import click

from textamender.core.exceptions import (
    PipeConfigError,
    TextAmenderError,
    TransformNotFoundError,
)
from textamender.core.logging import configure_logging
from textamender.models.loader import load_pipe_config
from textamender.transforms import Pipeline, default_registry


@click.command()
@click.option(
    "-s",
    "--step",
    "steps",
    multiple=True,
    help="Transform key to append to the pipe (can be used multiple times)",
)
@click.option(
    "--pipe",
    "pipe_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Pipe YAML file whose steps run before any --step",
)
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Input file (default: stdin)",
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False),
    help="Write the result to OUTPUT_DIR/<basename>.<extension> instead of stdout",
)
@click.option(
    "--basename",
    help="Output file name without extension (default: from pipe file, else 'output')",
)
@click.option(
    "--log-level",
    default="WARNING",
    envvar="TEXTAMENDER_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def run(
    steps: tuple,
    pipe_path: str | None,
    input_file,
    output_dir: str | None,
    basename: str | None,
    log_level: str,
    json_logs: bool,
):
    """Run transforms over text read from a file or stdin.

    Examples:

        echo 'C:\\Users\\a' | textamender run -s git-bash-2
        textamender run --pipe report.yaml -i data.csv -o out/
        textamender run -s csv-to-json -s json-ext -i kv.csv -o . --basename settings
    """
    configure_logging(level=log_level, json_format=json_logs)

    try:
        registry = default_registry()
        pipeline = Pipeline()
        output_basename = "output"

        if pipe_path:
            config = load_pipe_config(pipe_path)
            output_basename = config.output.basename
            for key in config.steps:
                pipeline.append(registry.get(key))

        for key in steps:
            pipeline.append(registry.get(key))

        result = pipeline.run(input_file.read())

        if output_dir:
            target = Path(output_dir) / pipeline.output_filename(basename or output_basename)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(result, encoding="utf-8")
            click.echo(f"Wrote {target}", err=True)
        else:
            click.echo(result, nl=False)

    except PipeConfigError as e:
        click.echo(f"Pipe error: {e}", err=True)
        sys.exit(1)
    except TransformNotFoundError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except TextAmenderError as e:
        click.echo(f"Execution error: {e}", err=True)
        sys.exit(1)
