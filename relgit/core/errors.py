"""Exit codes for the relgit CLI.

Each ``GitError`` kind maps onto one of these codes so release pipelines can
tell a missing tag apart from a flaky network.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are stable.

    - 0: Success
    - 1: User error (bad slug, bad arguments)
    - 2: Environment error (git missing, unreadable config)
    - 3: Not found (no matching tag, branch or remote)
    - 4: Network error (transient failure that exhausted its retries)
    - 5: Git error (command failed for a non-transient reason)
    - 6: Invariant violation (e.g. latest tag is not a patch release)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NOT_FOUND = 3
    NETWORK_ERROR = 4
    GIT_ERROR = 5
    INVARIANT_ERROR = 6

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
