"""Tests for relname.core.errors module."""

from relname.core.errors import ErrorCode


class TestErrorCodeValues:
    """Test that error codes have expected numeric values."""

    def test_ok_is_zero(self) -> None:
        assert ErrorCode.OK == 0

    def test_user_error_is_one(self) -> None:
        assert ErrorCode.USER_ERROR == 1

    def test_env_error_is_two(self) -> None:
        assert ErrorCode.ENV_ERROR == 2

    def test_build_error_is_three(self) -> None:
        assert ErrorCode.BUILD_ERROR == 3

    def test_io_error_is_five(self) -> None:
        assert ErrorCode.IO_ERROR == 5


def test_usable_as_exit_code() -> None:
    code: int = ErrorCode.IO_ERROR
    assert code == 5
