"""JSON codec built on the standard library ``json`` module."""

from __future__ import annotations

import json
from typing import Any

from ..config import ConversionOptions
from ..formats import Format
from ..model import TEMPORAL_TYPES, JsonNumber, Value
from .base import BaseCodec


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _encode_default(obj: Any) -> Any:
    if isinstance(obj, TEMPORAL_TYPES):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JsonCodec(BaseCodec):
    """JSON (RFC 8259), numbers decoded without float rounding."""

    format = Format.JSON

    def _decode(self, text: str) -> Any:
        return json.loads(
            text,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )

    def _encode(self, tree: Value, options: ConversionOptions) -> str:
        if options.indent_json:
            indent: int | None = options.json_indent
            separators = (",", ": ")
        else:
            indent = None
            separators = (",", ":")

        return json.dumps(
            tree,
            indent=indent,
            separators=separators,
            ensure_ascii=False,
            allow_nan=False,
            sort_keys=options.sort_keys,
            default=_encode_default,
        )
