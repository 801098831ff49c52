"""Slug command - turn an org/repo slug into a GitHub URL."""

from __future__ import annotations

import typer

from relgit.cli.commands._helpers import exit_on_error
from relgit.cli.context import build_context
from relgit.core.result import Ok
from relgit.git.urls import get_repo_url, parse_repo_slug


def slug(
    value: str = typer.Argument(..., metavar="ORG/REPO", help="Repository slug"),
    ssh: bool = typer.Option(False, "--ssh", help="Print the SSH URL"),
) -> None:
    """Print the GitHub URL for ORG/REPO.

    A bare ORG uses the configured default repository.
    """
    ctx = build_context()
    parsed = parse_repo_slug(value)
    exit_on_error(parsed, ctx)
    assert isinstance(parsed, Ok)

    org, repo = parsed.value
    typer.echo(get_repo_url(org, repo or ctx.config.github.repo, ssh or ctx.config.github.use_ssh))
