"""Git repository management for release automation.

This module provides:
- Repository: handle over a local clone (query, commit, push, fetch)
- Discovery: release range detection from tags and release branches
- SemVer: tag parsing and ordering
- resilient_call: retry with backoff for transient network failures

Usage:
    from relgit.git import open_repo, latest_patch_to_patch

    repo = open_repo("~/go/src/k8s.io/kubernetes").unwrap()
    result = latest_patch_to_patch(repo, "release-1.20")
    if result.is_ok():
        print(result.unwrap().start_rev)
"""

from relgit.git.backend import Ref, Remote, Signature
from relgit.git.discovery import (
    DiscoverResult,
    latest_non_patch_final_to_minor,
    latest_non_patch_final_versions,
    latest_patch_to_latest,
    latest_patch_to_patch,
    latest_release_branch_merge_base_to_latest,
    latest_tag_for_branch,
    previous_tag,
)
from relgit.git.errors import GitError, NetworkError
from relgit.git.repository import (
    RepoOptions,
    Repository,
    clean_clone_github_repo,
    clone_or_open_default_github_repo_ssh,
    clone_or_open_github_repo,
    clone_or_open_repo,
    get_user_email,
    get_user_name,
    ls_remote_exec,
    open_repo,
)
from relgit.git.retry import resilient_call
from relgit.git.semver import SemVer, parse_tag, parse_version
from relgit.git.status import GitStatus, StatusEntry
from relgit.git.urls import (
    get_default_kubernetes_repo_url,
    get_kubernetes_repo_url,
    get_repo_url,
    is_release_branch,
    parse_repo_slug,
    remotify,
)

__all__ = [
    # Repository
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
    # Models
    "GitStatus",
    "Ref",
    "Remote",
    "Signature",
    "StatusEntry",
    # Errors
    "GitError",
    "NetworkError",
    "resilient_call",
    # Versions
    "SemVer",
    "parse_tag",
    "parse_version",
    # Discovery
    "DiscoverResult",
    "latest_non_patch_final_to_minor",
    "latest_non_patch_final_versions",
    "latest_patch_to_latest",
    "latest_patch_to_patch",
    "latest_release_branch_merge_base_to_latest",
    "latest_tag_for_branch",
    "previous_tag",
    # URLs
    "get_default_kubernetes_repo_url",
    "get_kubernetes_repo_url",
    "get_repo_url",
    "is_release_branch",
    "parse_repo_slug",
    "remotify",
]
