"""Backend capabilities behind the repository handle.

The handle talks to git through three independent capabilities so that
each can be replaced by a test double on its own:

- ``ObjectStore``: structured queries and ref/remote edits (branches, tags,
  revision resolution, merge bases, remotes, merged tags).
- ``Worktree``: the checked-out tree (add, commit, checkout, status).
- ``CommandRunner``: literal ``git`` invocations for everything else
  (checkout with extra flags, rebase, merge, rm, push, fetch, ls-remote,
  clone).

The default implementations all drive the ``git`` executable through
``relgit.platform.process.run``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from relgit.constants import GIT_EXECUTABLE, GIT_NETWORK_TIMEOUT_SECONDS, GIT_TIMEOUT_SECONDS
from relgit.core.result import Err, Ok, Result
from relgit.git.errors import GitError
from relgit.git.status import GitStatus, parse_status
from relgit.platform.process import ProcessError
from relgit.platform.process import run as run_process

__all__ = [
    "CliObjectStore",
    "CliWorktree",
    "CommandRunner",
    "GitCommandRunner",
    "ObjectStore",
    "Ref",
    "Remote",
    "Signature",
    "Worktree",
]

_REF_PREFIXES = ("refs/heads/", "refs/tags/", "refs/remotes/")
_REMOTE_URL_RE = re.compile(r"^remote\.(.+)\.url (.*)$")
_FIELD_SEP = "\t"


@dataclass(frozen=True, slots=True)
class Ref:
    """A named reference and the object it points at.

    Attributes:
        name: Full ref name (refs/heads/main, refs/tags/v1.0.0, HEAD)
        sha: Object id the ref points at
    """

    name: str
    sha: str

    @property
    def short(self) -> str:
        for prefix in _REF_PREFIXES:
            if self.name.startswith(prefix):
                return self.name[len(prefix) :]
        return self.name

    @property
    def is_branch(self) -> bool:
        return self.name.startswith("refs/heads/")

    @property
    def is_tag(self) -> bool:
        return self.name.startswith("refs/tags/")


@dataclass(frozen=True, slots=True)
class Remote:
    """A git remote: its name and configured URLs, in order."""

    name: str
    urls: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Signature:
    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class CommandRunner(Protocol):
    """Literal git command execution."""

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        network: bool = False,
        timeout: float | None = None,
    ) -> Result[str, ProcessError]:
        """Run ``git <args>`` and return its stdout.

        Args:
            args: Arguments after the executable
            cwd: Working directory
            network: Use the network timeout instead of the local one
            timeout: Explicit timeout, overrides ``network``
        """
        ...


class ObjectStore(Protocol):
    """Structured access to refs, commits and remotes."""

    def branches(self) -> Result[list[Ref], GitError]: ...

    def tags(self) -> Result[list[Ref], GitError]: ...

    def head(self) -> Result[Ref, GitError]:
        """HEAD as a ref; its name is the branch ref, or "HEAD" when detached."""
        ...

    def resolve_revision(self, rev: str) -> Result[str, GitError]:
        """Resolve ``rev`` to the full SHA of a commit."""
        ...

    def merge_base(self, a: str, b: str) -> Result[list[str], GitError]:
        """All best common ancestors of two commits (empty if unrelated)."""
        ...

    def remotes(self) -> Result[list[Remote], GitError]: ...

    def create_remote(self, name: str, urls: Sequence[str]) -> Result[None, GitError]: ...

    def delete_remote(self, name: str) -> Result[None, GitError]: ...

    def list_remote_refs(self, name: str) -> Result[list[Ref], GitError]:
        """Refs advertised by a remote. Touches the network."""
        ...

    def merged_tags(self, commit: str) -> Result[list[str], GitError]:
        """Tags reachable from ``commit``, newest creation date first."""
        ...


class Worktree(Protocol):
    """The checked-out working tree."""

    def add(self, path: str) -> Result[None, GitError]: ...

    def commit(self, message: str, author: Signature) -> Result[str, GitError]:
        """Commit the index and return the new commit's SHA."""
        ...

    def checkout(self, rev: str) -> Result[None, GitError]: ...

    def status(self) -> Result[GitStatus, GitError]: ...


class GitCommandRunner:
    """``CommandRunner`` backed by the git executable."""

    def __init__(
        self,
        executable: str = GIT_EXECUTABLE,
        env: dict[str, str] | None = None,
    ) -> None:
        self.executable = executable
        self.env = env

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        network: bool = False,
        timeout: float | None = None,
    ) -> Result[str, ProcessError]:
        if timeout is None:
            timeout = GIT_NETWORK_TIMEOUT_SECONDS if network else GIT_TIMEOUT_SECONDS
        return run_process([self.executable, *args], cwd=cwd, env=self.env, timeout=timeout)


def _git(
    runner: CommandRunner,
    root: Path,
    args: Sequence[str],
    *,
    network: bool = False,
) -> Result[str, GitError]:
    result = runner.run(args, cwd=root, network=network)
    if isinstance(result, Err):
        return Err(GitError.from_process(result.error, f"running git {_subcommand(args)}"))
    return result


def _subcommand(args: Sequence[str]) -> str:
    # Skip "-c key=value" pairs placed before the subcommand.
    it = iter(args)
    for arg in it:
        if arg == "-c":
            next(it, None)
            continue
        return arg
    return ""


def _parse_ref_lines(output: str) -> list[Ref]:
    refs: list[Ref] = []
    for line in output.splitlines():
        name, sep, sha = line.strip().partition(_FIELD_SEP)
        if sep and name and sha:
            refs.append(Ref(name=name, sha=sha))
    return refs


class CliObjectStore:
    """``ObjectStore`` implemented with git plumbing commands."""

    def __init__(self, root: Path, runner: CommandRunner) -> None:
        self.root = root
        self.runner = runner

    def _for_each_ref(self, pattern: str) -> Result[list[Ref], GitError]:
        result = _git(
            self.runner,
            self.root,
            ["for-each-ref", f"--format=%(refname){_FIELD_SEP}%(objectname)", pattern],
        )
        return result.map(_parse_ref_lines)

    def branches(self) -> Result[list[Ref], GitError]:
        return self._for_each_ref("refs/heads")

    def tags(self) -> Result[list[Ref], GitError]:
        return self._for_each_ref("refs/tags")

    def head(self) -> Result[Ref, GitError]:
        sha = self.resolve_revision("HEAD")
        if isinstance(sha, Err):
            return sha

        # symbolic-ref exits 1 on a detached HEAD
        symbolic = self.runner.run(["symbolic-ref", "-q", "HEAD"], cwd=self.root)
        name = symbolic.value.strip() if isinstance(symbolic, Ok) else "HEAD"
        return Ok(Ref(name=name or "HEAD", sha=sha.value))

    def resolve_revision(self, rev: str) -> Result[str, GitError]:
        result = self.runner.run(
            ["rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}"],
            cwd=self.root,
        )
        if isinstance(result, Err):
            return Err(
                GitError(
                    kind="not_found",
                    message=f"reference not found: {rev}",
                    hint=result.error.stderr.strip() or None,
                )
            )
        return Ok(result.value.strip())

    def merge_base(self, a: str, b: str) -> Result[list[str], GitError]:
        result = self.runner.run(["merge-base", "--all", a, b], cwd=self.root)
        if isinstance(result, Err):
            e = result.error
            # Exit 1 with no diagnostics means the histories are unrelated.
            if e.returncode == 1 and not e.stderr.strip():
                return Ok([])
            return Err(GitError.from_process(e, "running git merge-base"))
        return Ok(result.value.split())

    def remotes(self) -> Result[list[Remote], GitError]:
        result = self.runner.run(
            ["config", "--get-regexp", r"^remote\..*\.url$"],
            cwd=self.root,
        )
        if isinstance(result, Err):
            # Exit 1: no remote configured
            if result.error.returncode == 1:
                return Ok([])
            return Err(GitError.from_process(result.error, "reading remotes"))

        urls: dict[str, list[str]] = {}
        for line in result.value.splitlines():
            m = _REMOTE_URL_RE.match(line.strip())
            if m is None:
                continue
            urls.setdefault(m.group(1), []).append(m.group(2))

        return Ok([Remote(name=name, urls=tuple(u)) for name, u in urls.items()])

    def create_remote(self, name: str, urls: Sequence[str]) -> Result[None, GitError]:
        if not urls:
            return Err(GitError(kind="invalid_input", message=f"remote {name} needs a URL"))

        result = _git(self.runner, self.root, ["remote", "add", name, urls[0]])
        if isinstance(result, Err):
            return result
        for url in urls[1:]:
            extra = _git(self.runner, self.root, ["remote", "set-url", "--add", name, url])
            if isinstance(extra, Err):
                return extra
        return Ok(None)

    def delete_remote(self, name: str) -> Result[None, GitError]:
        return _git(self.runner, self.root, ["remote", "remove", name]).map(lambda _: None)

    def list_remote_refs(self, name: str) -> Result[list[Ref], GitError]:
        result = _git(self.runner, self.root, ["ls-remote", name], network=True)
        if isinstance(result, Err):
            return result

        refs: list[Ref] = []
        for line in result.value.splitlines():
            sha, sep, ref = line.strip().partition(_FIELD_SEP)
            if sep:
                refs.append(Ref(name=ref, sha=sha))
        return Ok(refs)

    def merged_tags(self, commit: str) -> Result[list[str], GitError]:
        result = _git(
            self.runner,
            self.root,
            [
                "for-each-ref",
                f"--merged={commit}",
                "--sort=-creatordate",
                "--format=%(refname)",
                "refs/tags",
            ],
        )
        return result.map(
            lambda out: [Ref(name=ln.strip(), sha="").short for ln in out.splitlines() if ln.strip()]
        )


class CliWorktree:
    """``Worktree`` implemented with porcelain git commands."""

    def __init__(self, root: Path, runner: CommandRunner) -> None:
        self.root = root
        self.runner = runner

    def add(self, path: str) -> Result[None, GitError]:
        return _git(self.runner, self.root, ["add", path]).map(lambda _: None)

    def commit(self, message: str, author: Signature) -> Result[str, GitError]:
        result = _git(
            self.runner,
            self.root,
            [
                "-c",
                f"user.name={author.name}",
                "-c",
                f"user.email={author.email}",
                "commit",
                "--author",
                str(author),
                "-m",
                message,
            ],
        )
        if isinstance(result, Err):
            return result
        return _git(self.runner, self.root, ["rev-parse", "HEAD"]).map(str.strip)

    def checkout(self, rev: str) -> Result[None, GitError]:
        return _git(self.runner, self.root, ["checkout", rev]).map(lambda _: None)

    def status(self) -> Result[GitStatus, GitError]:
        return _git(self.runner, self.root, ["status", "--porcelain=v1", "-b"]).map(parse_status)
