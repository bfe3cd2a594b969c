"""Click CLI with parse, order, and depends subcommands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from dependency_tree import __version__
from dependency_tree.analysis import bootstrap_order, load_order
from dependency_tree.decoder import DECODER_NAMES
from dependency_tree.exporter import result_to_dict, write_json
from dependency_tree.models import ParseResult, ParserConfig
from dependency_tree.pipeline import run_parse

_TREE_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _decoder_options(func):
    func = click.option("--strict", is_flag=True,
                        help="Reject lines that descend more than one level. Maven trees deeper "
                             "than three levels decode with such jumps and are rejected too")(func)
    func = click.option("--indent-width", type=click.IntRange(min=1), default=2,
                        show_default=True, help="Spaces per level for the indent decoder")(func)
    func = click.option("--decoder", "-d", type=click.Choice(DECODER_NAMES), default="maven",
                        show_default=True, help="Rule for turning line prefixes into depth")(func)
    return func


def _load(tree_file: Path, decoder: str, indent_width: int, strict: bool) -> ParseResult:
    config = ParserConfig(
        tree_file=tree_file,
        level_decoder=decoder,
        indent_width=indent_width,
        strict_descent=strict,
    )
    try:
        return run_parse(config)
    except ValueError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """dependency-tree: Flatten and level build-tool dependency trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("tree_file", type=_TREE_FILE)
@_decoder_options
@click.option("--format", "-f", "output_format", type=click.Choice(["text", "json"]),
              default="text", show_default=True, help="Output format")
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Write JSON to this file instead of stdout")
def parse(
    tree_file: Path,
    decoder: str,
    indent_width: int,
    strict: bool,
    output_format: str,
    output_path: Path | None,
):
    """Parse a dependency tree file and show its levels and flattened dependencies."""
    result = _load(tree_file, decoder, indent_width, strict)

    if output_path is not None:
        write_json(result, output_path)
        click.echo(f"Wrote {output_path}")
        return

    if output_format == "json":
        click.echo(json.dumps(result_to_dict(result), indent=2))
        return

    click.echo(f"\n{len(result.components)} component(s) across {result.depth} level(s)\n")
    for level, level_set in enumerate(result.leveled_dependencies):
        click.echo(click.style(f"Level {level}", fg="cyan"))
        for component in sorted(level_set, key=lambda c: (c.name, c.version)):
            click.echo(f"  {component.name}  {click.style(component.version, dim=True)}")
    click.echo()

    click.echo("Flattened dependencies:")
    if not result.flattened_dependencies:
        click.echo("  (none)")
    for name, deps in sorted(result.flattened_dependencies.items()):
        click.echo(f"  {click.style(name, fg='yellow')} -> {', '.join(sorted(deps))}")


@cli.command()
@click.argument("tree_file", type=_TREE_FILE)
@_decoder_options
@click.option("--reverse", is_flag=True, help="Deepest components first (load order)")
def order(tree_file: Path, decoder: str, indent_width: int, strict: bool, reverse: bool):
    """Print components in resolution order, shallowest level first."""
    result = _load(tree_file, decoder, indent_width, strict)
    components = load_order(result) if reverse else bootstrap_order(result)
    for component in components:
        click.echo(component.coordinate)


@cli.command()
@click.argument("tree_file", type=_TREE_FILE)
@click.argument("name")
@click.argument("other")
@_decoder_options
def depends(tree_file: Path, name: str, other: str, decoder: str, indent_width: int, strict: bool):
    """Check whether NAME depends, directly or transitively, on OTHER."""
    result = _load(tree_file, decoder, indent_width, strict)
    if result.depends_on(name, other):
        click.echo("yes")
        return
    click.echo("no")
    sys.exit(1)


if __name__ == "__main__":
    cli()
