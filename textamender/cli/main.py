"""Main CLI entry point for textamender."""

import click

from textamender import __version__
from textamender.cli.commands.describe import describe
from textamender.cli.commands.list import list_transforms
from textamender.cli.commands.run import run
from textamender.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """Text Amender - composable text transformation pipes."""
    pass


# Register commands
main.add_command(list_transforms)
main.add_command(describe)
main.add_command(run)
main.add_command(validate)


if __name__ == "__main__":
    main()
