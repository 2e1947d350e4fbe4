"""Command-line interface for rendering table manifests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from .exceptions import MereTableError
from .manifest import load_manifest

LOG_LEVEL_ENV_VAR = "MERE_TABLE_LOG_LEVEL"

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="mere-table")
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV_VAR,
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help=f"Logging verbosity (env: {LOG_LEVEL_ENV_VAR})",
)
def cli(log_level: str) -> None:
    """mere-table box-drawn text table CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or JSON table manifest.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the table to a file instead of stdout.",
)
def render(file_path: str, output: str | None) -> None:
    """Render a table manifest as a box-drawn text table."""
    try:
        table = load_manifest(file_path).build()
        text = table.to_string()
    except MereTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(text)
        logger.info("Wrote %d row(s) to %s", table.num_rows, output)
        click.echo(f"Table written to: {output}")
    else:
        click.echo(text, nl=False)


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or JSON table manifest.",
)
def widths(file_path: str) -> None:
    """Show the negotiated width of every column and subcolumn."""
    try:
        table = load_manifest(file_path).build()
    except MereTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    table.update_width()
    for column in table.columns:
        click.echo(f"{column.title}: {column.width}")
        for subcolumn in column.columns:
            click.echo(f"  {subcolumn.title}: {subcolumn.width}")


if __name__ == "__main__":
    cli()
