"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from relgit.core.errors import ErrorCode
from relgit.core.result import Err, Ok, Result
from relgit.git.errors import GitError, exit_code_for
from relgit.git.repository import RepoOptions, Repository, open_repo
from relgit.output.console import Style

if TYPE_CHECKING:
    from relgit.cli.context import CLIContext


def exit_on_error[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.GIT_ERROR,
) -> None:
    """Exit with error if result is Err, otherwise return.

    ``GitError`` values pick their exit code from their kind; anything else
    exits with ``error_code``. Expects error objects to have 'message' and
    optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        code = exit_code_for(error) if isinstance(error, GitError) else error_code
        raise typer.Exit(code=int(code))


def open_from_context(ctx: CLIContext, repo_path: Path) -> Repository:
    """Open the repository at ``repo_path`` with the configured options, or exit."""
    result = open_repo(
        repo_path,
        options=RepoOptions.from_config(ctx.config.git),
        console=ctx.console,
    )
    exit_on_error(result, ctx)
    assert isinstance(result, Ok)
    return result.value
