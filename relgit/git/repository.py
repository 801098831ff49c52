"""Repository handle for release automation.

``Repository`` owns a working tree on disk plus the dry-run and retry
settings used for remote operations. Structured queries go through its
``ObjectStore``, working-tree changes through its ``Worktree`` and
everything else through its ``CommandRunner`` (see ``relgit.git.backend``).
Every operation that can fail returns a ``Result``.

Usage:
    match clone_or_open_github_repo(None, "kubernetes", "kubernetes"):
        case Ok(repo):
            repo.max_retries = 3
            print(repo.rev_parse_short("master"))
        case Err(e):
            print(f"error: {e.message}")

A handle is not thread-safe. Give each concurrent release job its own
handle.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from relgit.constants import (
    DEFAULT_BRANCH,
    DEFAULT_COMMIT_AUTHOR_EMAIL,
    DEFAULT_COMMIT_AUTHOR_NAME,
    DEFAULT_GITHUB_ORG,
    DEFAULT_GITHUB_REPO,
    DEFAULT_REMOTE,
    GIT_CLONE_TIMEOUT_SECONDS,
    GIT_EXECUTABLE,
    TEMP_DIR_PREFIX,
)
from relgit.core.config import GitConfig
from relgit.core.result import Err, Ok, Result
from relgit.git.backend import (
    CliObjectStore,
    CliWorktree,
    CommandRunner,
    GitCommandRunner,
    ObjectStore,
    Remote,
    Signature,
    Worktree,
)
from relgit.git.errors import GitError
from relgit.git.retry import is_transient, resilient_call
from relgit.git.status import GitStatus
from relgit.git.urls import get_repo_url, looks_like_release_tag, remotify
from relgit.output.console import ConsoleProtocol, NullConsole
from relgit.platform.process import is_available

__all__ = [
    "DEFAULT_COMMIT_AUTHOR",
    "RepoOptions",
    "Repository",
    "clean_clone_github_repo",
    "clone_or_open_default_github_repo_ssh",
    "clone_or_open_github_repo",
    "clone_or_open_repo",
    "get_user_email",
    "get_user_name",
    "ls_remote_exec",
    "open_repo",
]

DEFAULT_COMMIT_AUTHOR = Signature(DEFAULT_COMMIT_AUTHOR_NAME, DEFAULT_COMMIT_AUTHOR_EMAIL)

_TAG_REF_PREFIX = "refs/tags/"
_PEELED_SUFFIX = "^{}"


@dataclass(frozen=True, slots=True)
class RepoOptions:
    """Settings applied to a handle when it is opened.

    Attributes:
        dry_run: Push with --dry-run instead of mutating remotes
        max_retries: Extra attempts for remote operations (0 disables retry)
        remote: Remote used to qualify bare branch names
        default_branch: Trunk branch name
    """

    dry_run: bool = False
    max_retries: int = 0
    remote: str = DEFAULT_REMOTE
    default_branch: str = DEFAULT_BRANCH

    @classmethod
    def from_config(cls, config: GitConfig) -> RepoOptions:
        return cls(
            dry_run=config.dry_run,
            max_retries=config.max_retries,
            remote=config.remote,
            default_branch=config.default_branch,
        )


class Repository:
    """Handle to a local clone.

    Attributes:
        path: Repository root (the directory containing .git)
        dry_run: If True, push variants run with --dry-run
        max_retries: Extra attempts for push, fetch and remote listing
        remote: Default remote name
        default_branch: Trunk branch name
        store: Structured backend
        worktree: Working-tree backend
        runner: Literal git command execution
        console: Output sink
    """

    def __init__(
        self,
        path: Path,
        *,
        options: RepoOptions = RepoOptions(),
        runner: CommandRunner | None = None,
        store: ObjectStore | None = None,
        worktree: Worktree | None = None,
        console: ConsoleProtocol | None = None,
    ) -> None:
        self.path = path
        self.dry_run = options.dry_run
        self.max_retries = options.max_retries
        self.remote = options.remote
        self.default_branch = options.default_branch
        self.runner: CommandRunner = runner or GitCommandRunner()
        self.store: ObjectStore = store or CliObjectStore(path, self.runner)
        self.worktree: Worktree = worktree or CliWorktree(path, self.runner)
        self.console: ConsoleProtocol = console or NullConsole()

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r}, dry_run={self.dry_run}, max_retries={self.max_retries})"

    def cleanup(self) -> Result[None, GitError]:
        """Delete the repository from disk."""
        self.console.debug(f"Deleting {self.path}")
        try:
            shutil.rmtree(self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            return Err(GitError(kind="operation", message=f"removing {self.path}: {e}"))
        return Ok(None)

    # -------------------------------------------------------------------------
    # Revisions
    # -------------------------------------------------------------------------

    def rev_parse(self, rev: str) -> Result[str, GitError]:
        """Resolve a revision to a full commit SHA.

        Names that do not look like release tags are qualified with the
        default remote first (``master`` -> ``origin/master``).
        """
        if not looks_like_release_tag(rev):
            rev = remotify(rev, self.remote)
        return self.store.resolve_revision(rev)

    def rev_parse_short(self, rev: str) -> Result[str, GitError]:
        """Like ``rev_parse`` but trimmed to 10 characters."""
        return self.rev_parse(rev).map(lambda sha: sha[:10])

    def head(self) -> Result[str, GitError]:
        """SHA of the current HEAD."""
        return self.store.head().map(lambda ref: ref.sha)

    def current_branch(self) -> Result[str, GitError]:
        """Name of the checked-out branch.

        On a detached HEAD this is the last local branch pointing at the
        same commit, or an empty string if there is none.
        """
        head = self.store.head()
        if isinstance(head, Err):
            return head
        if head.value.is_branch:
            return Ok(head.value.short)

        branches = self.store.branches()
        if isinstance(branches, Err):
            return branches

        branch = ""
        for ref in branches.value:
            if ref.sha == head.value.sha:
                branch = ref.short
        return Ok(branch)

    def merge_base(self, from_: str, to: str) -> Result[str, GitError]:
        """Nearest common ancestor of two branches on the default remote."""
        main_ref = remotify(from_, self.remote)
        release_ref = remotify(to, self.remote)
        self.console.debug(f"MainRef: {main_ref}, releaseRef: {release_ref}")

        shas: list[str] = []
        for rev in (main_ref, release_ref):
            resolved = self.store.resolve_revision(rev)
            if isinstance(resolved, Err):
                return resolved
            shas.append(resolved.value)

        bases = self.store.merge_base(shas[0], shas[1])
        if isinstance(bases, Err):
            return bases
        if not bases.value:
            return Err(
                GitError(
                    kind="not_found",
                    message=f"could not find a merge base between {from_} and {to}",
                )
            )

        merge_base = bases.value[0]
        self.console.info(f"Merge base is {merge_base}")
        return Ok(merge_base)

    # -------------------------------------------------------------------------
    # Branches and tags
    # -------------------------------------------------------------------------

    def has_branch(self, branch: str) -> Result[bool, GitError]:
        """Check whether a local branch exists."""
        self.console.info(f"Verifying {branch} branch exists in the repo")
        branches = self.store.branches()
        if isinstance(branches, Err):
            return Err(branches.error.wrap("getting branches from repository"))

        if any(ref.short == branch for ref in branches.value):
            self.console.info(f"Branch {branch} found in the repository")
            return Ok(True)
        return Ok(False)

    def has_remote_branch(self, branch: str) -> Result[bool, GitError]:
        """Check whether a branch exists on the default remote. Retried."""
        self.console.info(f"Verifying {branch} branch exists on the remote")
        refs = self._remote_call(
            "Error listing remote references",
            lambda: self.store.list_remote_refs(self.remote),
        )
        if isinstance(refs, Err):
            return refs

        for ref in refs.value:
            if ref.is_branch and ref.short == branch:
                self.console.info(f"Found branch {ref.short}")
                return Ok(True)
        self.console.info(f"Branch {branch} not found")
        return Ok(False)

    def branch(self, *args: str) -> Result[str, GitError]:
        """Run ``git branch`` with ``args``."""
        return self._git("branch", *args)

    def tags(self) -> Result[list[str], GitError]:
        """All tag names in the repository."""
        result = self.store.tags()
        if isinstance(result, Err):
            return Err(result.error.wrap("get tags"))
        return Ok([ref.short for ref in result.value])

    def tags_for_branch(self, branch: str) -> Result[list[str], GitError]:
        """Tags merged into ``branch``, newest creation date first.

        The branch is resolved to a commit and its tags are read from the
        object graph, so the working tree is left untouched. A bare name
        that is not a local branch is looked up on the default remote.
        """
        sha = self.store.resolve_revision(branch)
        if isinstance(sha, Err):
            sha = self.store.resolve_revision(remotify(branch, self.remote))
        if isinstance(sha, Err):
            return Err(sha.error.wrap(f"resolving branch {branch}"))

        tags = self.store.merged_tags(sha.value)
        if isinstance(tags, Err):
            return Err(tags.error.wrap(f"retrieving merged tags for branch {branch}"))
        return tags

    def remote_tags(self) -> Result[list[str], GitError]:
        """Tags present on the default remote. Retried."""
        self.console.debug("Listing remote tags with ls-remote")
        output = self.ls_remote("--tags", self.remote)
        if isinstance(output, Err):
            return Err(output.error.wrap("while listing tags using ls-remote"))

        tags: list[str] = []
        for word in output.value.split():
            if not word.startswith(_TAG_REF_PREFIX) or word.endswith(_PEELED_SUFFIX):
                continue
            tags.append(word.removeprefix(_TAG_REF_PREFIX))

        self.console.debug(f"Remote repository contains {len(tags)} tags")
        return Ok(tags)

    def has_remote_tag(self, tag: str) -> Result[bool, GitError]:
        remote_tags = self.remote_tags()
        if isinstance(remote_tags, Err):
            return Err(remote_tags.error.wrap("getting tags to check if tag exists"))
        if tag in remote_tags.value:
            self.console.info(f"Tag {tag} found in default remote")
            return Ok(True)
        return Ok(False)

    # -------------------------------------------------------------------------
    # Working tree
    # -------------------------------------------------------------------------

    def checkout(self, rev: str, *args: str) -> Result[None, GitError]:
        """Check out any revision, passing extra flags through to git."""
        if args:
            result: Result[object, GitError] = self._git("checkout", rev, *args)
        else:
            result = self.worktree.checkout(rev)
        if isinstance(result, Err):
            return Err(result.error.wrap(f"checking out {rev}"))
        return Ok(None)

    def add(self, filename: str) -> Result[None, GitError]:
        """Stage a file."""
        return self.worktree.add(filename).map_err(
            lambda e: e.wrap(f"adding file {filename} to repository")
        )

    def rm(self, force: bool, *files: str) -> Result[None, GitError]:
        """Remove files from the index and the working tree."""
        args = ["-f", *files] if force else list(files)
        result = self._git("rm", *args)
        if isinstance(result, Err):
            return Err(result.error.wrap(f"removing {' '.join(files)}"))
        return Ok(None)

    def commit(self, message: str) -> Result[str, GitError]:
        """Commit the index as the automation identity."""
        return self.commit_with_options(message, DEFAULT_COMMIT_AUTHOR)

    def user_commit(self, message: str) -> Result[str, GitError]:
        """Commit as the local git user, adding a Signed-off-by trailer."""
        name = get_user_name(self.runner, self.path)
        if isinstance(name, Err):
            return Err(name.error.wrap("getting the user's name"))
        email = get_user_email(self.runner, self.path)
        if isinstance(email, Err):
            return Err(email.error.wrap("getting the user's email"))

        author = Signature(name.value, email.value)
        message += f"\n\nSigned-off-by: {author}"
        return self.commit_with_options(message, author).map_err(
            lambda e: e.wrap("commit changes")
        )

    def commit_with_options(self, message: str, author: Signature) -> Result[str, GitError]:
        """Commit the index with an explicit author. Returns the new SHA."""
        return self.worktree.commit(message, author)

    def merge(self, from_: str) -> Result[None, GitError]:
        """Merge ``from_`` into the current branch, preferring our side on conflicts."""
        result = self._git("merge", "-X", "ours", from_)
        if isinstance(result, Err):
            return Err(result.error.wrap(f"merging {from_}"))
        return Ok(None)

    def rebase(self, branch: str) -> Result[None, GitError]:
        """Rebase the current branch onto ``branch``."""
        if not branch:
            return Err(
                GitError(
                    kind="invalid_input",
                    message="cannot rebase repository, branch is empty",
                )
            )
        self.console.info(f"Rebasing repository to {branch}")
        result = self._git("rebase", branch)
        if isinstance(result, Err):
            return Err(result.error.wrap("rebasing repository"))
        return Ok(None)

    def status(self) -> Result[GitStatus, GitError]:
        return self.worktree.status().map_err(
            lambda e: e.wrap("getting the repository status")
        )

    def is_dirty(self) -> Result[bool, GitError]:
        """True if the working tree has any change, untracked files included."""
        status = self.status()
        if isinstance(status, Err):
            return Err(status.error.wrap("retrieving worktree status"))
        return Ok(not status.value.is_clean)

    def show_last_commit(self) -> Result[str, GitError]:
        """Output of ``git show`` for HEAD."""
        return self._git("show").map_err(lambda e: e.wrap("getting last commit log"))

    # -------------------------------------------------------------------------
    # Remotes
    # -------------------------------------------------------------------------

    def remotes(self) -> Result[list[Remote], GitError]:
        """Configured remotes, sorted by name."""
        result = self.store.remotes()
        if isinstance(result, Err):
            return Err(result.error.wrap("unable to list remotes"))
        return Ok(sorted(result.value, key=lambda r: r.name))

    def has_remote(self, name: str, expected_url: str) -> bool:
        """True if remote ``name`` exists and has ``expected_url`` among its URLs."""
        remotes = self.remotes()
        if isinstance(remotes, Err):
            self.console.warning(f"Unable to get repository remotes: {remotes.error}")
            return False

        return any(r.name == name and expected_url in r.urls for r in remotes.value)

    def add_remote(self, name: str, owner: str, repo: str) -> Result[None, GitError]:
        """Add a GitHub remote using the SSH URL."""
        url = get_repo_url(owner, repo, use_ssh=True)
        result = self._git("remote", "add", name, url)
        if isinstance(result, Err):
            return Err(result.error.wrap(f"adding remote {name}"))
        return Ok(None)

    def set_url(self, remote: str, new_url: str) -> Result[None, GitError]:
        """Point ``remote`` at ``new_url`` by deleting and recreating it."""
        deleted = self.store.delete_remote(remote)
        if isinstance(deleted, Err):
            return Err(deleted.error.wrap("delete remote"))
        created = self.store.create_remote(remote, [new_url])
        if isinstance(created, Err):
            return Err(created.error.wrap("create remote"))
        return Ok(None)

    def fetch_remote(self, remote_name: str) -> Result[None, GitError]:
        """Fetch objects from a configured remote. Retried."""
        if not remote_name:
            return Err(
                GitError(
                    kind="invalid_input",
                    message="error fetching, remote repository name is empty",
                )
            )

        remotes = self.remotes()
        if isinstance(remotes, Err):
            return Err(remotes.error.wrap("getting repository remotes"))
        if not any(r.name == remote_name for r in remotes.value):
            return Err(
                GitError(
                    kind="not_found",
                    message="cannot fetch repository, the specified remote does not exist",
                    hint=remote_name,
                )
            )

        result = self._remote_call(
            f"Error fetching {remote_name}",
            lambda: self._git("fetch", remote_name, network=True),
        )
        if isinstance(result, Err):
            return Err(result.error.wrap(f"fetching objects from {remote_name}"))
        return Ok(None)

    def pull_rebase(self) -> Result[None, GitError]:
        """``git pull --rebase`` from the tracked upstream. Retried."""
        result = self._remote_call(
            "Error pulling from remote",
            lambda: self._git("pull", "--rebase", network=True),
        )
        if isinstance(result, Err):
            return Err(result.error.wrap("unable to pull from remote"))
        return Ok(None)

    def ls_remote(self, *args: str) -> Result[str, GitError]:
        """Run ``git ls-remote`` with ``args``. Retried."""
        return self._remote_call(
            "Executing ls-remote",
            lambda: self._git("ls-remote", *args, network=True),
        )

    def push(self, remote_branch: str) -> Result[None, GitError]:
        """Push a branch to the default remote. Retried.

        In dry-run mode the push still runs, with --dry-run.
        """
        args = ["push", *self._dry_run_flag(), self.remote, remote_branch]
        result = self._remote_call(
            f"Error pushing {remote_branch}",
            lambda: self._git(*args, network=True),
        )
        if isinstance(result, Err):
            # Only an exhausted transient failure made every attempt.
            if result.error.kind == "network":
                attempts = self.max_retries + 1
                return Err(result.error.wrap(f"trying to push {remote_branch} {attempts} times"))
            return Err(result.error.wrap(f"pushing {remote_branch}"))
        if not self.dry_run:
            self.console.success(f"Pushed {remote_branch} to {self.remote}")
        return Ok(None)

    def push_to_remote(self, remote: str, remote_branch: str) -> Result[None, GitError]:
        """Push and set upstream on an explicit remote. Retried.

        In dry-run mode the push still runs, with --dry-run.
        """
        args = ["push", "--set-upstream", *self._dry_run_flag(), remote, remote_branch]
        result = self._remote_call(
            f"Error pushing {remote_branch} to {remote}",
            lambda: self._git(*args, network=True),
        )
        if isinstance(result, Err):
            return Err(result.error.wrap(f"pushing {remote_branch} to {remote}"))
        if not self.dry_run:
            self.console.success(f"Pushed {remote_branch} to {remote}")
        return Ok(None)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _dry_run_flag(self) -> list[str]:
        if not self.dry_run:
            return []
        self.console.info("Won't push due to dry run repository")
        return ["--dry-run"]

    def _git(self, cmd: str, *args: str, network: bool = False) -> Result[str, GitError]:
        """Run ``git <cmd> <args>`` in the repository root.

        Returns stdout without its trailing newline.
        """
        result = self.runner.run([cmd, *args], cwd=self.path, network=network)
        if isinstance(result, Err):
            return Err(GitError.from_process(result.error, f"running git {cmd}"))
        return Ok(result.value.rstrip("\n"))

    def _remote_call[T](
        self,
        description: str,
        operation: Callable[[], Result[T, GitError]],
    ) -> Result[T, GitError]:
        result = resilient_call(
            operation,
            max_retries=self.max_retries,
            can_retry=is_transient,
            description=description,
            console=self.console,
        )
        if isinstance(result, Err) and is_transient(result.error):
            return Err(replace(result.error, kind="network"))
        return result


# -----------------------------------------------------------------------------
# Opening and cloning
# -----------------------------------------------------------------------------


def _default_runner(runner: CommandRunner | None) -> Result[CommandRunner, GitError]:
    if runner is not None:
        return Ok(runner)
    if not is_available(GIT_EXECUTABLE):
        return Err(
            GitError(
                kind="invalid_input",
                message=f"{GIT_EXECUTABLE} executable is not available in $PATH",
            )
        )
    return Ok(GitCommandRunner())


def open_repo(
    repo_path: Path | str,
    *,
    options: RepoOptions = RepoOptions(),
    runner: CommandRunner | None = None,
    console: ConsoleProtocol | None = None,
) -> Result[Repository, GitError]:
    """Open an existing repository at or above ``repo_path``."""
    console = console or NullConsole()
    resolved_runner = _default_runner(runner)
    if isinstance(resolved_runner, Err):
        return resolved_runner

    raw = str(repo_path)
    if raw.startswith("~/"):
        home = os.environ.get("HOME") or str(Path.home())
        raw = home + raw[1:]
        console.warning(f"Normalizing repository to: {raw}")

    toplevel = resolved_runner.value.run(["rev-parse", "--show-toplevel"], cwd=Path(raw))
    if isinstance(toplevel, Err):
        return Err(GitError.from_process(toplevel.error, "opening repo"))

    return Ok(
        Repository(
            Path(toplevel.value.strip()),
            options=options,
            runner=resolved_runner.value,
            console=console,
        )
    )


def clone_or_open_repo(
    repo_path: Path | str | None,
    repo_url: str,
    *,
    options: RepoOptions = RepoOptions(),
    runner: CommandRunner | None = None,
    console: ConsoleProtocol | None = None,
) -> Result[Repository, GitError]:
    """Clone ``repo_url`` or update an existing clone.

    - No ``repo_path``: clone into a fresh temporary directory.
    - ``repo_path`` exists: open it and ``git pull --rebase``.
    - ``repo_path`` missing: clone into it.
    """
    console = console or NullConsole()
    resolved_runner = _default_runner(runner)
    if isinstance(resolved_runner, Err):
        return resolved_runner
    git = resolved_runner.value

    console.debug(f"Using repository url {repo_url!r}")
    temporary = not repo_path
    if repo_path:
        console.debug(f"Using existing repository path {str(repo_path)!r}")
        target = Path(repo_path)
        if target.exists():
            return _update_repo(target, options=options, runner=git, console=console)
    else:
        try:
            target = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
        except OSError as e:
            return Err(GitError(kind="operation", message=f"unable to create temp dir: {e}"))

    cloned = git.run(
        ["clone", "--progress", repo_url, str(target)],
        timeout=GIT_CLONE_TIMEOUT_SECONDS,
    )
    if isinstance(cloned, Err):
        if temporary:
            shutil.rmtree(target, ignore_errors=True)
        # Progress is only worth showing when it explains a failure.
        if not console.verbose:
            console.error(f"Clone repository failed. Tracked progress:\n{cloned.error.details}")
        return Err(GitError.from_process(cloned.error, "unable to clone repo"))

    updated = _update_repo(target, options=options, runner=git, console=console)
    if isinstance(updated, Err) and temporary:
        shutil.rmtree(target, ignore_errors=True)
    return updated


def _update_repo(
    repo_path: Path,
    *,
    options: RepoOptions,
    runner: CommandRunner,
    console: ConsoleProtocol,
) -> Result[Repository, GitError]:
    opened = open_repo(repo_path, options=options, runner=runner, console=console)
    if isinstance(opened, Err):
        return opened

    pulled = opened.value.pull_rebase()
    if isinstance(pulled, Err):
        return pulled
    return opened


def clone_or_open_github_repo(
    repo_path: Path | str | None,
    owner: str,
    repo: str,
    use_ssh: bool = False,
    *,
    options: RepoOptions = RepoOptions(),
    runner: CommandRunner | None = None,
    console: ConsoleProtocol | None = None,
) -> Result[Repository, GitError]:
    """``clone_or_open_repo`` for a GitHub ``owner/repo``."""
    return clone_or_open_repo(
        repo_path,
        get_repo_url(owner, repo, use_ssh),
        options=options,
        runner=runner,
        console=console,
    )


def clean_clone_github_repo(
    owner: str,
    repo: str,
    use_ssh: bool = False,
    *,
    options: RepoOptions = RepoOptions(),
    runner: CommandRunner | None = None,
    console: ConsoleProtocol | None = None,
) -> Result[Repository, GitError]:
    """Fresh clone into a temporary directory; call ``cleanup()`` when done."""
    return clone_or_open_github_repo(
        None, owner, repo, use_ssh, options=options, runner=runner, console=console
    )


def clone_or_open_default_github_repo_ssh(
    repo_path: Path | str | None,
    *,
    options: RepoOptions = RepoOptions(),
    runner: CommandRunner | None = None,
    console: ConsoleProtocol | None = None,
) -> Result[Repository, GitError]:
    return clone_or_open_github_repo(
        repo_path,
        DEFAULT_GITHUB_ORG,
        DEFAULT_GITHUB_REPO,
        True,
        options=options,
        runner=runner,
        console=console,
    )


# -----------------------------------------------------------------------------
# Repository-independent commands
# -----------------------------------------------------------------------------


def ls_remote_exec(
    repo_url: str,
    *args: str,
    runner: CommandRunner | None = None,
) -> Result[str, GitError]:
    """``git ls-remote <repo_url> <args>`` without a local clone."""
    git = runner or GitCommandRunner()
    result = git.run(["ls-remote", repo_url, *args], network=True)
    if isinstance(result, Err):
        return Err(
            GitError.from_process(result.error, "failed to execute the ls-remote command")
        )
    return Ok(result.value.strip())


def _config_value(key: str, runner: CommandRunner | None, cwd: Path | None) -> Result[str, GitError]:
    git = runner or GitCommandRunner()
    result = git.run(["config", "--get", key], cwd=cwd)
    if isinstance(result, Err):
        return Err(GitError.from_process(result.error, f"reading {key} from git"))
    return Ok(result.value.rstrip("\n"))


def get_user_name(
    runner: CommandRunner | None = None,
    cwd: Path | None = None,
) -> Result[str, GitError]:
    """The configured ``user.name``."""
    return _config_value("user.name", runner, cwd)


def get_user_email(
    runner: CommandRunner | None = None,
    cwd: Path | None = None,
) -> Result[str, GitError]:
    """The configured ``user.email``."""
    return _config_value("user.email", runner, cwd)
