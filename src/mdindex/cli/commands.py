"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdindex.config import Settings, load_config
from mdindex.core.indexer import index_top_level
from mdindex.core.models import Item, new_item
from mdindex.core.parse import populate_blocks
from mdindex.core.report import collect_status, format_tree
from mdindex.errors import MdIndexError, UnknownItemTypeError
from mdindex.log import configure_logging, verbose_to_level


Verbose = Annotated[int, typer.Option("--verbose", "-v", count=True, help="-v for info, -vv for debug logging")]
SkipUnknown = Annotated[
    Optional[bool],
    typer.Option("--skip-unknown/--keep-unknown", help="Drop items whose source is not a known marker file"),
]
ParserConfig = Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, verbose: int = 0) -> Settings:
    """Load config with standard CLI error handling and set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(verbose_to_level(verbose, settings.log_level), settings.log_json)
    return settings


def _index(path: str, settings: Settings) -> tuple[Item, str]:
    """Index path and return (root_item, base_path) or exit when nothing is found."""
    root = Path(path).resolve()
    try:
        items = index_top_level(root, settings)
    except (OSError, MdIndexError) as e:
        _fail(f"Cannot index {path}", e)
    if not items:
        typer.echo(f"No items found under {path}.")
        raise typer.Exit(1)
    if len(items) > 1:
        typer.echo(f"Note: {path} has no root item; showing {items[0].path}, skipping:", err=True)
        for skipped in items[1:]:
            typer.echo(f"  {skipped.path}", err=True)
    return items[0], str(root)


def tree_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Repository root directory (default: config root)")] = None,
    skip_unknown: SkipUnknown = None,
    parser: ParserConfig = None,
    verbose: Verbose = 0,
    ):
    """Print the item tree; rendered items are marked with '*'."""
    settings = _settings({"root": path, "skip_unknown": skip_unknown, "parser_config": parser}, verbose)
    item, base = _index(settings.root, settings)
    for line in format_tree(item, base):
        typer.echo(line)


def status_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Repository root directory (default: config root)")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print rows as JSON")] = False,
    skip_unknown: SkipUnknown = None,
    verbose: Verbose = 0,
    ):
    """List every item with its content hash, rendered state, and type."""
    settings = _settings({"root": path, "skip_unknown": skip_unknown, "extract_blocks": False}, verbose)
    item, base = _index(settings.root, settings)
    rows = collect_status(item, base)

    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json") for r in rows], indent=2))
        return

    for row in rows:
        rendered = "rendered" if row.rendered else "pending"
        typer.echo(f"{row.hash or '-':<12}  {rendered:<8}  {row.type.value:<12}  {row.relative_path}")
    pending = sum(1 for r in rows if not r.rendered)
    typer.echo(f"{len(rows)} item(s), {pending} pending")


def blocks_cmd(
    file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Item source file")],
    parser: ParserConfig = None,
    verbose: Verbose = 0,
    ):
    """Show the blocks extracted from a single item source file."""
    settings = _settings({"parser_config": parser}, verbose)
    try:
        item = new_item(str(file))
    except UnknownItemTypeError as e:
        typer.echo(f"Warning: {e}", err=True)
        item = e.item

    try:
        populate_blocks(item, settings.parser_config)
    except (OSError, ValueError) as e:
        _fail(f"Cannot extract blocks from {file}", e)

    typer.echo(f"type: {item.type.value}")
    for block in item.blocks:
        typer.echo(f"[{block.name}]")
        typer.echo(block.value)
