"""Release boundary discovery.

Each ``latest_*`` function inspects the tags and branches of a repository
and returns a ``DiscoverResult``: the start and end revisions of a release
range, both resolved to commit SHAs. Tags that are not semantic versions are
ignored. Any failure to resolve either end fails the whole discovery.

Modes:
    latest_release_branch_merge_base_to_latest
        Merge base of the newest vX.Y.0 release branch with the trunk, up
        to the next release branch (or the trunk).
    latest_non_patch_final_to_minor
        Previous vX.Y.0 to the newest vX.Y.0.
    latest_patch_to_patch
        Previous patch release to the newest one on a branch.
    latest_patch_to_latest
        Newest patch release on a branch to the head of its release branch
        (or the trunk).
"""

from __future__ import annotations

from dataclasses import dataclass

from relgit.core.result import Err, Ok, Result
from relgit.git.errors import GitError
from relgit.git.repository import Repository
from relgit.git.semver import SemVer, parse_tag, parse_version
from relgit.git.urls import release_branch_name

__all__ = [
    "DiscoverResult",
    "latest_non_patch_final_to_minor",
    "latest_non_patch_final_versions",
    "latest_patch_to_latest",
    "latest_patch_to_patch",
    "latest_release_branch_merge_base_to_latest",
    "latest_tag_for_branch",
    "previous_tag",
]


@dataclass(frozen=True, slots=True)
class DiscoverResult:
    """A resolved release range.

    Attributes:
        start_sha: Commit the range starts at
        start_rev: Human-readable name of the start (tag or branch)
        end_sha: Commit the range ends at
        end_rev: Human-readable name of the end (tag or branch)
    """

    start_sha: str
    start_rev: str
    end_sha: str
    end_rev: str


def latest_non_patch_final_versions(repo: Repository) -> Result[list[SemVer], GitError]:
    """All vX.Y.0 final releases in the repository, newest first.

    Duplicates (tags differing only by build metadata) are collapsed.
    """
    tags = repo.tags()
    if isinstance(tags, Err):
        return tags

    versions: set[SemVer] = set()
    for tag in tags.value:
        version = parse_tag(tag)
        if version is not None and version.is_non_patch_final:
            versions.add(version)

    if not versions:
        return Err(GitError(kind="not_found", message="unable to find latest non patch release"))
    return Ok(sorted(versions, reverse=True))


def _release_branch_or_main_ref(
    repo: Repository,
    major: int,
    minor: int,
) -> Result[tuple[str, str], GitError]:
    """SHA and name of ``release-<major>.<minor>``, or of the trunk if that branch is missing."""
    release_branch = release_branch_name(major, minor)
    sha = repo.rev_parse(release_branch)
    if isinstance(sha, Ok):
        repo.console.debug(f"Found release branch {release_branch}")
        return Ok((sha.value, release_branch))

    sha = repo.rev_parse(repo.default_branch)
    if isinstance(sha, Ok):
        repo.console.debug(f"No release branch found, using {repo.default_branch}")
        return Ok((sha.value, repo.default_branch))
    return sha


def latest_release_branch_merge_base_to_latest(repo: Repository) -> Result[DiscoverResult, GitError]:
    """From where the newest release branch forked off the trunk, to the next branch or trunk."""
    versions = latest_non_patch_final_versions(repo)
    if isinstance(versions, Err):
        return versions

    version = versions.value[0]
    version_tag = version.to_tag()
    repo.console.debug(f"Latest non patch version {version_tag}")

    base = repo.merge_base(repo.default_branch, version.release_branch())
    if isinstance(base, Err):
        return base

    end = _release_branch_or_main_ref(repo, version.major, version.minor + 1)
    if isinstance(end, Err):
        return end
    end_sha, end_rev = end.value

    return Ok(
        DiscoverResult(
            start_sha=base.value,
            start_rev=version_tag,
            end_sha=end_sha,
            end_rev=end_rev,
        )
    )


def latest_non_patch_final_to_minor(repo: Repository) -> Result[DiscoverResult, GitError]:
    """From the previous vX.Y.0 release to the newest one."""
    versions = latest_non_patch_final_versions(repo)
    if isinstance(versions, Err):
        return versions
    if len(versions.value) < 2:
        return Err(
            GitError(kind="not_found", message="unable to find two latest non patch versions")
        )

    latest_tag = versions.value[0].to_tag()
    repo.console.debug(f"Latest non patch version {latest_tag}")
    end = repo.rev_parse(latest_tag)
    if isinstance(end, Err):
        return end

    previous = versions.value[1].to_tag()
    repo.console.debug(f"Previous non patch version {previous}")
    start = repo.rev_parse(previous)
    if isinstance(start, Err):
        return start

    return Ok(
        DiscoverResult(
            start_sha=start.value,
            start_rev=previous,
            end_sha=end.value,
            end_rev=latest_tag,
        )
    )


def latest_tag_for_branch(repo: Repository, branch: str) -> Result[SemVer, GitError]:
    """Newest tag merged into ``branch``, parsed as a version."""
    tags = repo.tags_for_branch(branch)
    if isinstance(tags, Err):
        return tags
    if not tags.value:
        return Err(GitError(kind="not_found", message="no tags found on branch", hint=branch))
    return parse_version(tags.value[0])


def latest_patch_to_patch(repo: Repository, branch: str) -> Result[DiscoverResult, GitError]:
    """From the previous patch release on ``branch`` to the newest one."""
    latest = latest_tag_for_branch(repo, branch)
    if isinstance(latest, Err):
        return latest

    version = latest.value.attributed_release()
    if version.patch == 0:
        return Err(
            GitError(
                kind="invariant",
                message=f"found non-patch version {version} as latest tag on branch {branch}",
            )
        )
    previous = version.previous_patch()

    latest_tag = version.to_tag()
    repo.console.debug(f"Parsing latest tag {latest_tag}")
    end = repo.rev_parse(latest_tag)
    if isinstance(end, Err):
        return Err(end.error.wrap(f"parsing version {version}"))

    previous_tag_name = previous.to_tag()
    repo.console.debug(f"Parsing previous tag {previous_tag_name}")
    start = repo.rev_parse(previous_tag_name)
    if isinstance(start, Err):
        return Err(start.error.wrap(f"parsing previous version {previous}"))

    return Ok(
        DiscoverResult(
            start_sha=start.value,
            start_rev=previous_tag_name,
            end_sha=end.value,
            end_rev=latest_tag,
        )
    )


def latest_patch_to_latest(repo: Repository, branch: str) -> Result[DiscoverResult, GitError]:
    """From the newest patch release on ``branch`` to the head of its release branch."""
    latest = latest_tag_for_branch(repo, branch)
    if isinstance(latest, Err):
        return latest

    version = latest.value.attributed_release()
    latest_tag = version.to_tag()
    repo.console.debug(f"Parsing latest tag {latest_tag}")
    start = repo.rev_parse(latest_tag)
    if isinstance(start, Err):
        return Err(start.error.wrap(f"parsing version {version}"))

    end = _release_branch_or_main_ref(repo, version.major, version.minor)
    if isinstance(end, Err):
        return Err(end.error.wrap(f"getting release branch for {version}"))
    end_sha, end_rev = end.value

    return Ok(
        DiscoverResult(
            start_sha=start.value,
            start_rev=latest_tag,
            end_sha=end_sha,
            end_rev=end_rev,
        )
    )


def previous_tag(repo: Repository, tag: str, branch: str) -> Result[str, GitError]:
    """The tag created just before ``tag`` on ``branch``."""
    tags = repo.tags_for_branch(branch)
    if isinstance(tags, Err):
        return tags

    try:
        idx = tags.value.index(tag)
    except ValueError:
        return Err(
            GitError(kind="not_found", message="could not find specified tag in branch", hint=tag)
        )
    if idx + 1 >= len(tags.value):
        return Err(GitError(kind="not_found", message="unable to find previous tag", hint=tag))
    return Ok(tags.value[idx + 1])
