"""
Number normalization for trees decoded from JSON.

The JSON decoder keeps each number as a ``JsonNumber`` token. This pass
settles each one on an exact ``int`` when the token fits in 64 bits and on a
``float`` otherwise, so that encoders neither quote numbers nor print large
integers in scientific notation.
"""

from __future__ import annotations

import logging
from typing import Any

from ..model import JsonNumber, Value

logger = logging.getLogger(__name__)


def convert_number(number: JsonNumber) -> int | float | JsonNumber:
    """
    Convert one token: 64-bit integer first, then float.

    When neither conversion succeeds the token is returned unchanged; this
    function never raises.
    """
    try:
        return number.to_int()
    except ValueError:
        pass
    try:
        return number.to_float()
    except ValueError:
        logger.debug("Leaving number %s unconverted", number)
        return number


def normalize_numbers(item: Any) -> Value:
    """Return ``item`` with every ``JsonNumber`` leaf converted."""
    if isinstance(item, dict):
        return {key: normalize_numbers(value) for key, value in item.items()}

    if isinstance(item, list):
        return [normalize_numbers(value) for value in item]

    if isinstance(item, JsonNumber):
        return convert_number(item)

    return item
