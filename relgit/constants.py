"""Project-wide names and defaults: GitHub, branch and tag conventions, timeouts."""

from __future__ import annotations

# GitHub defaults
DEFAULT_GITHUB_ORG = "kubernetes"
DEFAULT_GITHUB_REPO = "kubernetes"
GITHUB_HOST = "github.com"
GITHUB_AUTH_ROOT = "git@github.com:"

# Repository conventions
DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "master"
TAG_PREFIX = "v"
RELEASE_BRANCH_PREFIX = "release-"

GIT_EXECUTABLE = "git"
TEMP_DIR_PREFIX = "relgit-"

# Identity used by Repository.commit()
DEFAULT_COMMIT_AUTHOR_NAME = "relgit"
DEFAULT_COMMIT_AUTHOR_EMAIL = "nobody@relgit.invalid"

# A pre-release tag of patch N (v1.2.4-beta.1) is attributed to the patch
# release it follows (v1.2.3) by the patch discovery algorithms.
PRERELEASE_ROLLS_BACK_PATCH = True

# Local git operations (rev-parse, for-each-ref, checkout, add, commit)
GIT_TIMEOUT_SECONDS = 30.0

# Network-bound git operations (clone, pull, fetch, push, ls-remote)
GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0
GIT_CLONE_TIMEOUT_SECONDS = 15 * 60.0
