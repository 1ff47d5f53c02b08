"""TOML codec built on ``tomlkit``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import tomlkit

from ..config import ConversionOptions
from ..exceptions import EncodeError
from ..formats import Format
from ..model import INT64_MAX, INT64_MIN, JsonNumber, Value, format_float
from .base import BaseCodec


def _is_null(item: Any) -> bool:
    return item is None


def _is_wide_int(item: Any) -> bool:
    return (
        isinstance(item, int)
        and not isinstance(item, bool)
        and not INT64_MIN <= item <= INT64_MAX
    )


def _find_leaf(
    item: Any, predicate: Callable[[Any], bool], path: str = "$"
) -> str | None:
    """Return the path of the first leaf matching ``predicate``, if any."""
    if isinstance(item, dict):
        for key, value in item.items():
            found = _find_leaf(value, predicate, f"{path}.{key}")
            if found:
                return found
    elif isinstance(item, list):
        for i, value in enumerate(item):
            found = _find_leaf(value, predicate, f"{path}[{i}]")
            if found:
                return found
    elif predicate(item):
        return path
    return None


def _prepare(item: Any) -> Any:
    """
    Swap integral floats for TOML items that keep their positional text and
    unconverted JSON numbers for plain strings.
    """
    if isinstance(item, dict):
        return {key: _prepare(value) for key, value in item.items()}
    if isinstance(item, list):
        return [_prepare(value) for value in item]
    if isinstance(item, JsonNumber):
        return str(item)
    if isinstance(item, float):
        text = format_float(item)
        if text is not None:
            return tomlkit.value(text)
    return item


class TomlCodec(BaseCodec):
    """TOML 1.0: tables at the root, no null values."""

    format = Format.TOML

    def _decode(self, text: str) -> Any:
        return tomlkit.parse(text).unwrap()

    def validate_tree(self, tree: Value) -> None:
        if not isinstance(tree, dict):
            raise EncodeError(
                f"TOML document root must be a table, got {type(tree).__name__}",
                self.format.value,
            )
        null_path = _find_leaf(tree, _is_null)
        if null_path:
            raise EncodeError(
                f"TOML has no null value (found one at {null_path})",
                self.format.value,
            )
        wide_path = _find_leaf(tree, _is_wide_int)
        if wide_path:
            raise EncodeError(
                f"TOML integers are 64-bit (out of range at {wide_path})",
                self.format.value,
            )

    def _encode(self, tree: Value, options: ConversionOptions) -> str:
        return tomlkit.dumps(_prepare(tree), sort_keys=options.sort_keys)
