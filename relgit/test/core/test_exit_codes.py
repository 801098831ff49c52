"""Tests for relgit.core.errors module."""

from relgit.core.errors import ErrorCode


class TestErrorCode:
    def test_values_are_stable(self) -> None:
        assert int(ErrorCode.OK) == 0
        assert int(ErrorCode.USER_ERROR) == 1
        assert int(ErrorCode.ENV_ERROR) == 2
        assert int(ErrorCode.NOT_FOUND) == 3
        assert int(ErrorCode.NETWORK_ERROR) == 4
        assert int(ErrorCode.GIT_ERROR) == 5
        assert int(ErrorCode.INVARIANT_ERROR) == 6

    def test_str(self) -> None:
        assert str(ErrorCode.NOT_FOUND) == "not found"

    def test_success_flags(self) -> None:
        assert ErrorCode.OK.is_success
        assert not ErrorCode.OK.is_error
        assert ErrorCode.GIT_ERROR.is_error
