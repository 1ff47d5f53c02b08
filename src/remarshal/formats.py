"""Supported serialization formats."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final


class Format(str, Enum):
    """Closed set of formats a document can be converted from and to."""

    TOML = "TOML"
    YAML = "YAML"
    JSON = "JSON"

    @classmethod
    def parse(cls, name: str) -> "Format":
        """
        Return the member whose canonical name is exactly ``name``.

        The lookup is case-sensitive and knows no aliases.

        Raises:
            ValueError: If ``name`` is not one of TOML, YAML, JSON
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown format {name!r}. Supported: {', '.join(cls.names())}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_path(cls, path: str | Path) -> "Format":
        """
        Infer the format from a file extension.

        Raises:
            ValueError: If the extension is not recognised
        """
        suffix = Path(path).suffix.lower()
        try:
            return _EXTENSIONS[suffix]
        except KeyError:
            raise ValueError(
                f"Cannot infer format from extension '{suffix}'. "
                f"Supported: {', '.join(sorted(_EXTENSIONS))}"
            ) from None


_EXTENSIONS: Final[dict[str, Format]] = {
    ".toml": Format.TOML,
    ".yaml": Format.YAML,
    ".yml": Format.YAML,
    ".json": Format.JSON,
}
