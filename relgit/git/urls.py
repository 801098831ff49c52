"""Naming conventions: GitHub URLs, repository slugs, remote and branch names."""

from __future__ import annotations

import re

from relgit.constants import (
    DEFAULT_BRANCH,
    DEFAULT_GITHUB_ORG,
    DEFAULT_GITHUB_REPO,
    DEFAULT_REMOTE,
    GITHUB_AUTH_ROOT,
    GITHUB_HOST,
    RELEASE_BRANCH_PREFIX,
)
from relgit.core.result import Err, Ok, Result
from relgit.git.errors import GitError

__all__ = [
    "RELEASE_TAG_RE",
    "get_default_kubernetes_repo_url",
    "get_kubernetes_repo_url",
    "get_repo_url",
    "is_release_branch",
    "looks_like_release_tag",
    "parse_repo_slug",
    "release_branch_name",
    "remotify",
]

# Revisions matching this are tags and are never prefixed with a remote.
RELEASE_TAG_RE = re.compile(r"v\d+\.\d+\.\d+.*")

_SLUG_RE = re.compile(r"[a-z0-9/-]+", re.IGNORECASE)
_RELEASE_BRANCH_RE = re.compile(rf"{RELEASE_BRANCH_PREFIX}\d+\.\d+(?:\.\d+)*")


def get_repo_url(org: str, repo: str, use_ssh: bool = False) -> str:
    """Build a GitHub URL.

    Returns one of:
    - https://github.com/<org>/<repo>
    - git@github.com:<org>/<repo>
    """
    slug = "/".join(part for part in (org, repo) if part)
    if use_ssh:
        return f"{GITHUB_AUTH_ROOT}{slug}"
    return f"https://{GITHUB_HOST}/{slug}"


def get_kubernetes_repo_url(org: str = "", use_ssh: bool = False) -> str:
    """URL of the default repository under ``org`` (default org when empty)."""
    return get_repo_url(org or DEFAULT_GITHUB_ORG, DEFAULT_GITHUB_REPO, use_ssh)


def get_default_kubernetes_repo_url() -> str:
    return get_kubernetes_repo_url(DEFAULT_GITHUB_ORG, use_ssh=False)


def parse_repo_slug(slug: str) -> Result[tuple[str, str], GitError]:
    """Split ``org/repo`` (or just ``org``) into its parts.

    Only letters, digits, ``-`` and a single ``/`` are accepted. The repo
    part is empty when the slug has no ``/``.
    """
    if not _SLUG_RE.fullmatch(slug):
        return Err(
            GitError(
                kind="invalid_input",
                message="repository slug contains invalid characters",
                hint=slug,
            )
        )

    parts = slug.split("/")
    if len(parts) > 2:
        return Err(
            GitError(
                kind="invalid_input",
                message="string is not a well formed org/repo slug",
                hint=slug,
            )
        )

    org = parts[0]
    repo = parts[1] if len(parts) > 1 else ""
    return Ok((org, repo))


def remotify(name: str, remote: str = DEFAULT_REMOTE) -> str:
    """Prefix a bare name with the remote; names containing ``/`` are kept."""
    if "/" in name:
        return name
    return f"{remote}/{name}"


def looks_like_release_tag(rev: str) -> bool:
    return RELEASE_TAG_RE.search(rev) is not None


def release_branch_name(major: int, minor: int) -> str:
    return f"{RELEASE_BRANCH_PREFIX}{major}.{minor}"


def is_release_branch(branch: str, default_branch: str = DEFAULT_BRANCH) -> bool:
    """True for the trunk and for ``release-<major>.<minor>[.<patch>]`` branches."""
    return branch == default_branch or _RELEASE_BRANCH_RE.fullmatch(branch) is not None
