"""Bounded retry with exponential backoff for remote operations.

``resilient_call`` takes any fallible operation returning a ``Result`` and a
predicate deciding whether a given error is worth another attempt. The
repository handle routes push, ls-remote and fetch through it with
``is_transient`` as the predicate.

Usage:
    result = resilient_call(
        lambda: runner.run(["push", "origin", "main"], cwd=root, network=True),
        max_retries=3,
        can_retry=is_transient,
        description="Error pushing main",
        console=console,
    )
"""

from __future__ import annotations

from collections.abc import Callable
from time import sleep

from relgit.core.result import Ok, Result
from relgit.git.errors import GitError, NetworkError
from relgit.output.console import ConsoleProtocol

__all__ = ["backoff_seconds", "is_transient", "resilient_call"]


def backoff_seconds(max_retries: int, remaining: int) -> float:
    """Wait before the next attempt, given the attempts left including the failed one.

    ``remaining`` starts at ``max_retries + 1`` so the first wait is half a
    second and each following wait doubles.
    """
    return 2.0 ** (max_retries - remaining)


def is_transient(error: GitError) -> bool:
    return NetworkError.of(error).can_retry()


def resilient_call[T, E](
    operation: Callable[[], Result[T, E]],
    *,
    max_retries: int,
    can_retry: Callable[[E], bool],
    description: str,
    console: ConsoleProtocol,
) -> Result[T, E]:
    """Run ``operation`` up to ``max_retries + 1`` times.

    The error is returned without sleeping as soon as it is not retryable,
    retrying is disabled (``max_retries == 0``) or the last attempt failed.
    Each retried failure is reported through ``console.error``.

    Args:
        operation: Zero-argument callable performing one attempt
        max_retries: Extra attempts allowed after the first (>= 0)
        can_retry: Classifier for the operation's error values
        description: Prefix for the retry notice
        console: Output sink for retry notices

    Returns:
        The first Ok, or the last Err.
    """
    if max_retries < 0:
        raise ValueError(f"max_retries must be >= 0, got {max_retries}")

    remaining = max_retries + 1
    while True:
        result = operation()
        if isinstance(result, Ok):
            return result

        error = result.error
        if not can_retry(error) or max_retries == 0 or remaining == 1:
            return result

        wait = backoff_seconds(max_retries, remaining)
        console.error(
            f"{description} (will retry {remaining - 1} more times in {wait:g} secs): {error}"
        )
        sleep(wait)
        remaining -= 1
