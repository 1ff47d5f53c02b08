from __future__ import annotations

import pytest

from remarshal.model import JsonNumber, format_float


class TestJsonNumber:
    def test_is_text(self) -> None:
        number = JsonNumber("12.50")
        assert isinstance(number, str)
        assert number == "12.50"
        assert repr(number) == "JsonNumber('12.50')"

    def test_to_int(self) -> None:
        assert JsonNumber("-12").to_int() == -12

    @pytest.mark.parametrize("token", ["1.0", "1e2", "9223372036854775808", "+1", " 1"])
    def test_to_int_rejects(self, token: str) -> None:
        with pytest.raises(ValueError):
            JsonNumber(token).to_int()

    def test_to_float(self) -> None:
        assert JsonNumber("1e2").to_float() == 100.0

    def test_to_float_rejects_overflow(self) -> None:
        with pytest.raises(ValueError, match="float range"):
            JsonNumber("-1e999").to_float()


class TestFormatFloat:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1e19, "10000000000000000000.0"),
            (1e16, "10000000000000000.0"),
            (-2e17, "-200000000000000000.0"),
            (1e23, "100000000000000000000000.0"),
        ],
    )
    def test_large_integral_floats_are_positional(
        self, value: float, expected: str
    ) -> None:
        assert format_float(value) == expected

    @pytest.mark.parametrize(
        "value", [0.5, 1.0, 123456.0, 1e-7, 1.25e-20, float("inf"), float("nan")]
    )
    def test_other_floats_are_left_to_the_encoder(self, value: float) -> None:
        assert format_float(value) is None

    def test_huge_integral_float_has_no_exponent(self) -> None:
        text = format_float(1.5e300)
        assert text is not None
        assert "e" not in text
        assert text.endswith(".0")
