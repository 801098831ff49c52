"""Tags command - list tags of a repository, a branch or the remote."""

from __future__ import annotations

from pathlib import Path

import typer

from relgit.cli.commands._helpers import exit_on_error, open_from_context
from relgit.cli.context import build_context
from relgit.core.result import Ok


def tags(
    branch: str = typer.Option(
        "", "--branch", "-b", help="Only tags merged into this branch, newest first"
    ),
    remote: bool = typer.Option(False, "--remote", help="List tags on the default remote"),
    repo_path: Path = typer.Option(Path("."), "--repo", "-r", help="Repository path"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
) -> None:
    """List tags."""
    ctx = build_context(config, verbose=verbose)
    repo = open_from_context(ctx, repo_path)

    if remote:
        result = repo.remote_tags()
    elif branch:
        result = repo.tags_for_branch(branch)
    else:
        result = repo.tags()

    exit_on_error(result, ctx)
    assert isinstance(result, Ok)
    for tag in result.value:
        typer.echo(tag)
