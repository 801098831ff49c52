"""In-memory backends for repository and discovery tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

import relgit.git.retry as retry_mod
from relgit.core.result import Err, Ok, Result
from relgit.git.backend import Ref, Remote, Signature
from relgit.git.errors import GitError
from relgit.git.repository import RepoOptions, Repository
from relgit.git.status import GitStatus
from relgit.output.console import MockConsole
from relgit.platform.process import ProcessError

REPO_ROOT = Path("/work/kubernetes")

type Response = Result[str, ProcessError] | list[Result[str, ProcessError]]


def process_error(args: Sequence[str], stderr: str = "", code: int = 128) -> Err[ProcessError]:
    return Err(ProcessError(("git", *args), code, "", stderr))


@dataclass
class RunnerCall:
    args: tuple[str, ...]
    cwd: Path | None
    network: bool
    timeout: float | None


class FakeRunner:
    """CommandRunner with canned responses.

    A response may be a list, consumed one result per call.
    Unknown commands succeed with empty output.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], Response] = {}
        self.calls: list[RunnerCall] = []

    def respond(self, args: Sequence[str], response: Response) -> None:
        self.responses[tuple(args)] = response

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        network: bool = False,
        timeout: float | None = None,
    ) -> Result[str, ProcessError]:
        key = tuple(args)
        self.calls.append(RunnerCall(key, cwd, network, timeout))
        response = self.responses.get(key, Ok(""))
        if isinstance(response, list):
            return response.pop(0)
        return response

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [c.args for c in self.calls]


@dataclass
class FakeStore:
    """ObjectStore over plain dicts."""

    branch_refs: list[Ref] = field(default_factory=list)
    tag_refs: list[Ref] = field(default_factory=list)
    head_ref: Ref = field(default_factory=lambda: Ref("refs/heads/master", "0" * 40))
    revisions: dict[str, str] = field(default_factory=dict)
    merge_bases: dict[tuple[str, str], list[str]] = field(default_factory=dict)
    remote_urls: dict[str, tuple[str, ...]] = field(default_factory=dict)
    remote_refs: list[Ref] = field(default_factory=list)
    remote_ref_errors: list[GitError] = field(default_factory=list)
    merged: dict[str, list[str]] = field(default_factory=dict)
    remotes_error: GitError | None = None
    calls: list[str] = field(default_factory=list)

    def branches(self) -> Result[list[Ref], GitError]:
        return Ok(list(self.branch_refs))

    def tags(self) -> Result[list[Ref], GitError]:
        return Ok(list(self.tag_refs))

    def head(self) -> Result[Ref, GitError]:
        return Ok(self.head_ref)

    def resolve_revision(self, rev: str) -> Result[str, GitError]:
        self.calls.append(f"resolve {rev}")
        if rev in self.revisions:
            return Ok(self.revisions[rev])
        return Err(GitError(kind="not_found", message=f"reference not found: {rev}"))

    def merge_base(self, a: str, b: str) -> Result[list[str], GitError]:
        return Ok(self.merge_bases.get((a, b), []))

    def remotes(self) -> Result[list[Remote], GitError]:
        if self.remotes_error is not None:
            return Err(self.remotes_error)
        return Ok([Remote(name, urls) for name, urls in self.remote_urls.items()])

    def create_remote(self, name: str, urls: Sequence[str]) -> Result[None, GitError]:
        self.calls.append(f"create {name}")
        self.remote_urls[name] = tuple(urls)
        return Ok(None)

    def delete_remote(self, name: str) -> Result[None, GitError]:
        self.calls.append(f"delete {name}")
        if name not in self.remote_urls:
            return Err(GitError(kind="not_found", message=f"no such remote: {name}"))
        del self.remote_urls[name]
        return Ok(None)

    def list_remote_refs(self, name: str) -> Result[list[Ref], GitError]:
        self.calls.append(f"list {name}")
        if self.remote_ref_errors:
            return Err(self.remote_ref_errors.pop(0))
        return Ok(list(self.remote_refs))

    def merged_tags(self, commit: str) -> Result[list[str], GitError]:
        return Ok(list(self.merged.get(commit, [])))


@dataclass
class FakeWorktree:
    added: list[str] = field(default_factory=list)
    commits: list[tuple[str, Signature]] = field(default_factory=list)
    current_status: GitStatus = field(default_factory=lambda: GitStatus(branch="master"))
    checked_out: list[str] = field(default_factory=list)
    checkout_error: GitError | None = None

    def add(self, path: str) -> Result[None, GitError]:
        self.added.append(path)
        return Ok(None)

    def commit(self, message: str, author: Signature) -> Result[str, GitError]:
        self.commits.append((message, author))
        return Ok(f"{len(self.commits):040d}")

    def checkout(self, rev: str) -> Result[None, GitError]:
        if self.checkout_error is not None:
            return Err(self.checkout_error)
        self.checked_out.append(rev)
        return Ok(None)

    def status(self) -> Result[GitStatus, GitError]:
        return Ok(self.current_status)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def worktree() -> FakeWorktree:
    return FakeWorktree()


@pytest.fixture
def console() -> MockConsole:
    return MockConsole()


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    recorded: list[float] = []
    monkeypatch.setattr(retry_mod, "sleep", recorded.append)
    return recorded


@pytest.fixture
def repo(
    runner: FakeRunner,
    store: FakeStore,
    worktree: FakeWorktree,
    console: MockConsole,
) -> Repository:
    return Repository(
        REPO_ROOT,
        options=RepoOptions(),
        runner=runner,
        store=store,
        worktree=worktree,
        console=console,
    )
