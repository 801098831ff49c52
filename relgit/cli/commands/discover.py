"""Discover command - find the start and end revisions of a release range."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer

from relgit.cli.commands._helpers import exit_on_error, open_from_context
from relgit.cli.context import build_context
from relgit.core.errors import ErrorCode
from relgit.core.result import Err, Ok, Result
from relgit.git.discovery import (
    DiscoverResult,
    latest_non_patch_final_to_minor,
    latest_patch_to_latest,
    latest_patch_to_patch,
    latest_release_branch_merge_base_to_latest,
)
from relgit.git.errors import GitError
from relgit.git.repository import Repository

_SHORT_SHA_LEN = 10


class DiscoverMode(str, Enum):
    BRANCH_TO_LATEST = "branch-to-latest"
    MINOR_TO_MINOR = "minor-to-minor"
    PATCH_TO_PATCH = "patch-to-patch"
    PATCH_TO_LATEST = "patch-to-latest"

    @property
    def needs_branch(self) -> bool:
        return self in (DiscoverMode.PATCH_TO_PATCH, DiscoverMode.PATCH_TO_LATEST)


def run_discovery(
    repo: Repository,
    mode: DiscoverMode,
    branch: str,
) -> Result[DiscoverResult, GitError]:
    match mode:
        case DiscoverMode.BRANCH_TO_LATEST:
            return latest_release_branch_merge_base_to_latest(repo)
        case DiscoverMode.MINOR_TO_MINOR:
            return latest_non_patch_final_to_minor(repo)
        case DiscoverMode.PATCH_TO_PATCH:
            return latest_patch_to_patch(repo, branch)
        case DiscoverMode.PATCH_TO_LATEST:
            return latest_patch_to_latest(repo, branch)


def format_result(result: DiscoverResult, *, short: bool = False) -> list[str]:
    """Render a range as ``key: value`` lines."""

    def sha(value: str) -> str:
        return value[:_SHORT_SHA_LEN] if short else value

    return [
        f"start_rev: {result.start_rev}",
        f"start_sha: {sha(result.start_sha)}",
        f"end_rev: {result.end_rev}",
        f"end_sha: {sha(result.end_sha)}",
    ]


def discover(
    mode: DiscoverMode = typer.Argument(..., help="Discovery mode"),
    branch: str = typer.Option(
        "", "--branch", "-b", help="Branch for patch modes (default: current branch)"
    ),
    repo_path: Path = typer.Option(Path("."), "--repo", "-r", help="Repository path"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
    short: bool = typer.Option(False, "--short", help="Print 10-character SHAs"),
) -> None:
    """Find the start and end revisions of a release range."""
    ctx = build_context(config, verbose=verbose)
    repo = open_from_context(ctx, repo_path)

    if mode.needs_branch and not branch:
        current = repo.current_branch()
        exit_on_error(current, ctx)
        assert isinstance(current, Ok)
        branch = current.value
        if not branch:
            ctx.console.error(f"{mode.value} needs a branch and HEAD is detached")
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        ctx.console.debug(f"Using current branch {branch}")

    result = run_discovery(repo, mode, branch)
    match result:
        case Err(_):
            exit_on_error(result, ctx)
        case Ok(found):
            for line in format_result(found, short=short):
                typer.echo(line)
