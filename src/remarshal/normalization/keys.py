"""Key normalization: every mapping in the tree must be keyed by strings."""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import KeyTypeError
from ..model import Value

logger = logging.getLogger(__name__)


def normalize_keys(item: Any, path: str = "$") -> Value:
    """
    Rebuild ``item`` so that every mapping key is a plain ``str``.

    Keys are never stringified: a boolean, numeric, null or date key aborts
    the conversion, because no other format could read it back as the same
    key.

    Args:
        item: Decoded value tree
        path: Location of ``item`` inside the document, used in errors

    Raises:
        KeyTypeError: On the first mapping key that is not a string
    """
    if isinstance(item, dict):
        result: dict[str, Value] = {}
        for key, value in item.items():
            if not isinstance(key, str):
                logger.debug("Rejecting %s key %r at %s", type(key).__name__, key, path)
                raise KeyTypeError(
                    f"Mapping key {key!r} is a {type(key).__name__}, not a string",
                    key=key,
                    path=path,
                )
            result[str(key)] = normalize_keys(value, f"{path}.{key}")
        return result

    if isinstance(item, list):
        return [normalize_keys(value, f"{path}[{i}]") for i, value in enumerate(item)]

    return item
