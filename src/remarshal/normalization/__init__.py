"""Normalization passes run between decoding and encoding."""

from __future__ import annotations

from typing import Any

from ..model import Value
from .keys import normalize_keys
from .numbers import convert_number, normalize_numbers

__all__ = ["normalize", "normalize_keys", "normalize_numbers", "convert_number"]


def normalize(tree: Any) -> Value:
    """Apply key normalization, then number normalization."""
    return normalize_numbers(normalize_keys(tree))
