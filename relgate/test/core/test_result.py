"""Tests for relgate.core.result module."""

import pytest

from relgate.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_ok_holds_value(self) -> None:
        result = Ok("1.2.3")
        assert result.value == "1.2.3"
        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.unwrap() == "1.2.3"

    def test_ok_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok(42).unwrap_err()

    def test_ok_map(self) -> None:
        assert Ok("v1.2.3").map(lambda t: t[1:]) == Ok("1.2.3")

    def test_ok_flat_map(self) -> None:
        result: Result[str, str] = Ok("")
        chained = result.flat_map(lambda v: Err("empty") if not v else Ok(v))
        assert chained == Err("empty")

    def test_ok_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]


class TestErr:
    def test_err_holds_error(self) -> None:
        result = Err("boom")
        assert result.error == "boom"
        assert result.is_ok() is False
        assert result.is_err() is True
        assert result.unwrap_err() == "boom"

    def test_err_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_err_map_and_flat_map_are_noops(self) -> None:
        result: Result[int, str] = Err("boom")
        assert result.map(lambda x: x + 1) == Err("boom")
        assert result.flat_map(lambda x: Ok(x + 1)) == Err("boom")

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"
        assert repr(Ok(1)) == "Ok(1)"


def test_type_guards() -> None:
    assert is_ok(Ok(1))
    assert not is_ok(Err(1))
    assert is_err(Err(1))
    assert not is_err(Ok(1))
    assert Ok(1) != Err(1)
