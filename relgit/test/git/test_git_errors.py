"""Tests for relgit.git.errors module."""

from __future__ import annotations

import pytest

from relgit.core.errors import ErrorCode
from relgit.git.errors import GitError, NetworkError, exit_code_for
from relgit.platform.process import ProcessError


class TestGitError:
    def test_str_is_message(self) -> None:
        assert str(GitError(kind="operation", message="boom")) == "boom"

    def test_wrap_prepends_context(self) -> None:
        error = GitError(kind="not_found", message="reference not found: v1.2.3", hint="x")
        wrapped = error.wrap("parsing version 1.2.3")

        assert wrapped.message == "parsing version 1.2.3: reference not found: v1.2.3"
        assert wrapped.kind == "not_found"
        assert wrapped.hint == "x"
        assert error.message == "reference not found: v1.2.3"

    def test_wrap_chain_outermost_first(self) -> None:
        error = GitError(kind="operation", message="inner").wrap("middle").wrap("outer")
        assert error.message == "outer: middle: inner"

    def test_pretty(self) -> None:
        assert GitError(kind="operation", message="m").pretty() == "m"
        assert GitError(kind="operation", message="m", hint="h").pretty() == "m (hint: h)"

    def test_from_process(self) -> None:
        process_error = ProcessError(("git", "fetch", "origin"), 128, "", "fatal: nope\n")
        error = GitError.from_process(process_error, "running git fetch")

        assert error.kind == "operation"
        assert error.message == "running git fetch: git fetch origin failed (exit 128)"
        assert error.hint == "fatal: nope"


class TestNetworkError:
    @pytest.mark.parametrize(
        "message",
        [
            "dial tcp 10.0.0.1:443: i/o timeout",
            "read udp 10.0.0.1:53: no such host",
            "connect: connection refused",
            "ssh: connect to host github.com port 22: Network is unreachable",
            "fatal: Could not read from remote repository.",
        ],
    )
    def test_transient_messages_can_retry(self, message: str) -> None:
        assert NetworkError(message).can_retry()

    @pytest.mark.parametrize(
        "message",
        [
            "",
            "fatal: authentication failed",
            "Connection Refused",
            "could not read from remote repository",
            "! [rejected] master -> master (non-fast-forward)",
        ],
    )
    def test_other_messages_cannot_retry(self, message: str) -> None:
        assert not NetworkError(message).can_retry()

    def test_of_git_error_includes_hint(self) -> None:
        error = GitError(
            kind="operation",
            message="running git push: git push origin ... failed (exit 128)",
            hint="fatal: Could not read from remote repository.",
        )
        assert NetworkError.of(error).can_retry()

    def test_of_process_error_includes_stderr(self) -> None:
        error = ProcessError(("git", "ls-remote"), 128, "", "ssh: connect to host x port 22")
        assert NetworkError.of(error).can_retry()

    def test_of_string(self) -> None:
        assert str(NetworkError.of("dial tcp: x")) == "dial tcp: x"


class TestExitCodeFor:
    @pytest.mark.parametrize(
        ("kind", "code"),
        [
            ("not_found", ErrorCode.NOT_FOUND),
            ("network", ErrorCode.NETWORK_ERROR),
            ("operation", ErrorCode.GIT_ERROR),
            ("invalid_input", ErrorCode.USER_ERROR),
            ("invariant", ErrorCode.INVARIANT_ERROR),
        ],
    )
    def test_mapping(self, kind: str, code: ErrorCode) -> None:
        assert exit_code_for(GitError(kind=kind, message="x")) == code  # type: ignore[arg-type]
