"""Operation Result - tests for the success-or-error value."""

import pytest

from scoreboard.core.errors import MatchNotFoundError
from scoreboard.core.result import OperationResult


def test_ok_result():
    result = OperationResult.ok(5)
    assert result.is_ok
    assert result.value == 5
    assert result.error is None
    assert result.error_code is None
    assert result.unwrap() == 5


def test_failed_result():
    error = MatchNotFoundError("id-1")
    result = OperationResult.fail(error)
    assert not result.is_ok
    assert result.error is error
    assert result.error_code == "MATCH_NOT_FOUND"


def test_unwrap_raises_carried_error():
    result = OperationResult.fail(MatchNotFoundError("id-1"))
    with pytest.raises(MatchNotFoundError, match="id-1"):
        result.unwrap()
