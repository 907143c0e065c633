#!/usr/bin/env python3
"""
CEX Parser - CLI Interface.

Usage:
    python main.py labels corpus.cex
    python main.py blocks corpus.cex ctsdata
    python main.py table corpus.cex datamodels --no-header
    python main.py values corpus.cex Collection --key-column Model --key-value urn:cite2:x:y.v1:
    python main.py relations https://example.org/corpus.cex
"""

import sys
from pathlib import Path

import click
from loguru import logger

from cexparser import __version__
from cexparser.config.global_config import DEFAULT_CONFIG_PATH, load_config_or_default
from cexparser.config.models import CexConfig
from cexparser.document import CexDocument
from cexparser.loaders import CexLoadError, is_url
from cexparser.utils.console import console, labels_table, relation_set_panel


def setup_logging(verbose: bool = False) -> None:
    """
    Configures the logger to write to stderr.

    Args:
        verbose: If True, sets log level to DEBUG; otherwise WARNING.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("cexparser")


def load_document(source: str, config: CexConfig) -> CexDocument:
    """
    Loads a document from a URL or a local path.

    Exits with status 1 if the document cannot be loaded.
    """
    document = CexDocument(config)
    try:
        if is_url(source):
            return document.load_from_url(source)
        return document.load_from_file(Path(source))
    except CexLoadError as e:
        logger.debug(f"Failed to load {source}: {e!r}")
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


def common_options(func):
    """Options shared by every command."""
    func = click.option("-v", "--verbose", is_flag=True, help="Verbose logging")(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_CONFIG_PATH,
        show_default=True,
        help="TOML configuration file (defaults are used if it does not exist)",
    )(func)
    return func


def prepare(config_path: Path, verbose: bool) -> CexConfig:
    setup_logging(verbose)
    return load_config_or_default(config_path)


@click.group()
@click.version_option(version=__version__, prog_name="cex")
def cli():
    """Inspect CEX documents."""


@cli.command()
@click.argument("source")
@common_options
def labels(source: str, config_path: Path, verbose: bool):
    """List block labels with their occurrence counts."""
    config = prepare(config_path, verbose)
    document = load_document(source, config)
    if not document.labels():
        click.echo("No blocks found.")
        return
    console.print(labels_table(document.store, title=f"Blocks: {source}"))


@cli.command()
@click.argument("source")
@click.argument("label")
@common_options
def blocks(source: str, label: str, config_path: Path, verbose: bool):
    """Print every body stored under LABEL."""
    config = prepare(config_path, verbose)
    document = load_document(source, config)
    contents = document.block_contents(label)
    if not contents:
        click.echo(f"No '{label}' blocks.", err=True)
        raise SystemExit(1)
    click.echo("\n\n".join(contents))


@cli.command()
@click.argument("source")
@click.argument("label")
@click.option("--header/--no-header", default=True, help="Include the header line")
@common_options
def table(source: str, label: str, header: bool, config_path: Path, verbose: bool):
    """Print the tables of every LABEL block as one table."""
    config = prepare(config_path, verbose)
    document = load_document(source, config)
    data = document.delimited_data(label, include_header=header)
    if data:
        click.echo(data)


@cli.command()
@click.argument("source")
@click.argument("column")
@click.option("-l", "--label", help="Block label (default: datamodels label from config)")
@click.option("--key-column", help="Only rows where this column ...")
@click.option("--key-value", help="... equals this value")
@common_options
def values(
    source: str,
    column: str,
    label: str | None,
    key_column: str | None,
    key_value: str | None,
    config_path: Path,
    verbose: bool,
):
    """Print the distinct values of COLUMN, sorted."""
    if (key_column is None) != (key_value is None):
        raise click.BadParameter("--key-column and --key-value must be used together")
    config = prepare(config_path, verbose)
    document = load_document(source, config)
    result = document.unique_column_values(
        column,
        label=label,
        key_column=key_column,
        key_value=key_value,
    )
    for value in result:
        click.echo(value)


@cli.command()
@click.argument("source")
@click.option("--header/--no-header", default=True, help="Include each data header line")
@common_options
def relations(source: str, header: bool, config_path: Path, verbose: bool):
    """Show the relation sets of a document."""
    config = prepare(config_path, verbose)
    document = load_document(source, config)
    records = document.relation_sets(include_header=header)
    if not records:
        click.echo("No relation sets found.")
    for record in records:
        console.print(relation_set_panel(record))


if __name__ == "__main__":
    cli()
