"""Error values for git operations.

``GitError`` is the error half of every ``Result`` returned by the
repository handle and the discovery functions. ``NetworkError`` is the
classifier consulted by the retry loop: it decides from the failure text
alone whether another attempt is worth making, because failures come from a
spawned ``git`` process and carry no structured error code.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from relgit.core.errors import ErrorCode
from relgit.platform.process import ProcessError

__all__ = [
    "GitError",
    "GitErrorKind",
    "NetworkError",
    "TRANSIENT_MARKERS",
    "exit_code_for",
]

GitErrorKind = Literal[
    "not_found",
    "network",
    "operation",
    "invalid_input",
    "invariant",
]

# Substrings of failures that are expected to go away on a later attempt.
# Matching is case-sensitive.
TRANSIENT_MARKERS: tuple[str, ...] = (
    "dial tcp",
    "read udp",
    "connection refused",
    "ssh: connect to host",
    "Could not read from remote",
)


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a repository or discovery operation.

    Attributes:
        kind: Taxonomy bucket, used for exit codes and retry decisions
        message: Context-chained description, outermost context first
        hint: Optional raw detail (usually git's stderr)
    """

    kind: GitErrorKind
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        return self.message

    def wrap(self, context: str) -> GitError:
        """Return a copy with ``context`` prepended to the message."""
        return replace(self, message=f"{context}: {self.message}")

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message

    @classmethod
    def from_process(cls, error: ProcessError, context: str) -> GitError:
        """Build an operation error from a failed git invocation."""
        return cls(
            kind="operation",
            message=f"{context}: {error}",
            hint=error.details,
        )


@dataclass(frozen=True, slots=True)
class NetworkError:
    """Failure of a remote-touching operation, classified by its text."""

    message: str

    def __str__(self) -> str:
        return self.message

    def can_retry(self) -> bool:
        """True if the message contains one of ``TRANSIENT_MARKERS``."""
        return any(marker in self.message for marker in TRANSIENT_MARKERS)

    @classmethod
    def of(cls, error: GitError | ProcessError | str) -> NetworkError:
        match error:
            case GitError(message=message, hint=hint):
                return cls(f"{message}\n{hint}" if hint else message)
            case ProcessError():
                return cls(f"{error}\n{error.stderr}\n{error.stdout}".strip())
            case str():
                return cls(error)


def exit_code_for(error: GitError) -> ErrorCode:
    """Map an error kind onto a CLI exit code."""
    match error.kind:
        case "not_found":
            return ErrorCode.NOT_FOUND
        case "network":
            return ErrorCode.NETWORK_ERROR
        case "invalid_input":
            return ErrorCode.USER_ERROR
        case "invariant":
            return ErrorCode.INVARIANT_ERROR
        case "operation":
            return ErrorCode.GIT_ERROR
