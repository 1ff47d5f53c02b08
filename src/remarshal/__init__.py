"""
Package façade – convert documents between TOML, YAML and JSON.

    >>> from remarshal import convert
    >>> print(convert(b'{"answer": 42}', "JSON", "TOML"))
    answer = 42
    <BLANKLINE>

Design
------
* Thin wrapper around ConversionPipeline (keeps public API tiny).
* Re-exports only what external callers should see.
"""

from __future__ import annotations

from .config import ConversionOptions
from .exceptions import (
    ConfigError,
    DecodeError,
    EncodeError,
    KeyTypeError,
    RemarshalError,
)
from .formats import Format
from .model import JsonNumber
from .pipeline import ConversionPipeline, convert

__all__ = [
    "convert",
    "ConversionPipeline",
    "ConversionOptions",
    "Format",
    "JsonNumber",
    "RemarshalError",
    "ConfigError",
    "DecodeError",
    "KeyTypeError",
    "EncodeError",
]
