"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdindex.cli.commands import blocks_cmd, status_cmd, tree_cmd


app = typer.Typer(name="mdindex", no_args_is_help=True, help="Markdown documentation repository indexer")

app.command(name="tree")(tree_cmd)
app.command(name="status")(status_cmd)
app.command(name="blocks")(blocks_cmd)
