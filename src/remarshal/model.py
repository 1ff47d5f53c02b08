"""
model.py – Intermediate Value
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Format-neutral value tree shared by every decoder and encoder.

A tree is made of plain Python values: ``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` and ``dict``. Two extra leaf kinds only exist
between decoding and normalization:

* ``JsonNumber`` – the literal text of a JSON number, kept so that the
  integer/float decision is made once, without premature float rounding;
* mappings with non-string keys, as produced by the YAML decoder.

TOML may also carry ``date`` / ``datetime`` / ``time`` leaves.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Final, TypeAlias

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_INTEGER_TOKEN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


class JsonNumber(str):
    """Undecided JSON number, stored as the token text from the document."""

    __slots__ = ()

    def to_int(self) -> int:
        """
        Parse the token as a 64-bit signed integer.

        Raises:
            ValueError: If the token has a fraction/exponent or is out of range
        """
        if not _INTEGER_TOKEN.fullmatch(self):
            raise ValueError(f"{str(self)!r} is not an integer literal")
        value = int(self)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"{str(self)!r} is out of the 64-bit integer range")
        return value

    def to_float(self) -> float:
        """
        Parse the token as a 64-bit float.

        Raises:
            ValueError: If the token is not a number or overflows to infinity
        """
        value = float(self)
        if math.isinf(value):
            raise ValueError(f"{str(self)!r} is out of the 64-bit float range")
        return value

    def __repr__(self) -> str:
        return f"JsonNumber({str(self)!r})"


Scalar: TypeAlias = None | bool | int | float | str | date | datetime | time
Value: TypeAlias = Scalar | list["Value"] | dict[Any, "Value"]

TEMPORAL_TYPES: Final[tuple[type, ...]] = (date, datetime, time)


def format_float(value: float) -> str | None:
    """
    Return positional text for integral floats that ``repr`` would print
    in scientific notation, ``None`` for every other float.

    ``1e19`` becomes ``"10000000000000000000.0"``. The digits are those of
    the shortest ``repr``, not of the exact binary value.
    """
    if not math.isfinite(value) or not value.is_integer():
        return None
    text = repr(value)
    if "e" not in text:
        return None
    return f"{Decimal(text):f}.0"
