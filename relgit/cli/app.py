from __future__ import annotations

import typer

from relgit import __version__
from relgit.cli.commands.discover import discover
from relgit.cli.commands.slug import slug
from relgit.cli.commands.tags import tags

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(discover)
app.command()(tags)
app.command()(slug)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
