"""Unit tests for number normalization."""

from __future__ import annotations

import pytest

from remarshal.model import INT64_MAX, INT64_MIN, JsonNumber
from remarshal.normalization import convert_number, normalize, normalize_numbers


class TestConvertNumber:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("0", 0),
            ("42", 42),
            ("-17", -17),
            ("-0", 0),
            (str(INT64_MAX), INT64_MAX),
            (str(INT64_MIN), INT64_MIN),
        ],
    )
    def test_integers_in_range(self, token: str, expected: int) -> None:
        result = convert_number(JsonNumber(token))
        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("1.5", 1.5),
            ("1.0", 1.0),
            ("1e3", 1000.0),
            ("-2.5E-3", -0.0025),
            (str(INT64_MAX + 1), float(INT64_MAX + 1)),
            ("10000000000000000000", 1e19),
        ],
    )
    def test_everything_else_becomes_float(self, token: str, expected: float) -> None:
        result = convert_number(JsonNumber(token))
        assert result == expected
        assert type(result) is float

    def test_overflowing_number_is_left_unconverted(self) -> None:
        number = JsonNumber("1e400")
        result = convert_number(number)
        assert result is number

    def test_never_raises_on_garbage(self) -> None:
        number = JsonNumber("not-a-number")
        assert convert_number(number) is number


class TestNormalizeNumbers:
    def test_walks_mappings_and_sequences(self) -> None:
        tree = {
            "a": JsonNumber("1"),
            "b": [JsonNumber("2.5"), {"c": JsonNumber("3")}],
            "d": "4",
            "e": None,
            "f": True,
        }
        assert normalize_numbers(tree) == {
            "a": 1,
            "b": [2.5, {"c": 3}],
            "d": "4",
            "e": None,
            "f": True,
        }

    def test_strings_are_not_numbers(self) -> None:
        result = normalize_numbers(["42"])
        assert result == ["42"]
        assert type(result[0]) is str

    def test_plain_numbers_pass_through(self) -> None:
        assert normalize_numbers([1, 2.0]) == [1, 2.0]

    def test_root_number(self) -> None:
        assert normalize_numbers(JsonNumber("7")) == 7


class TestNormalize:
    def test_runs_both_passes(self) -> None:
        tree = {"outer": [{"inner": JsonNumber("10")}]}
        assert normalize(tree) == {"outer": [{"inner": 10}]}
