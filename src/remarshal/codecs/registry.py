"""Codec registry mapping each format to its codec class."""

from __future__ import annotations

import logging
from typing import Any

from ..formats import Format
from .base import BaseCodec
from .json_codec import JsonCodec
from .toml_codec import TomlCodec
from .yaml_codec import YamlCodec

logger = logging.getLogger(__name__)


class CodecRegistry:
    """
    Registry for format codecs.

    Maps every ``Format`` member to the codec class that reads and writes
    it. Built-in codecs are registered on construction.
    """

    _BUILTIN: tuple[type[BaseCodec], ...] = (TomlCodec, YamlCodec, JsonCodec)

    def __init__(self) -> None:
        self._codecs: dict[Format, type[BaseCodec]] = {}
        self._logger = logger.getChild(self.__class__.__name__)
        for codec_class in self._BUILTIN:
            self.register_codec(codec_class)

    def register_codec(self, codec_class: type[BaseCodec]) -> None:
        """
        Register a codec class for the format it declares.

        Raises:
            ValueError: If the class does not declare a ``Format``
        """
        fmt = getattr(codec_class, "format", None)
        if not isinstance(fmt, Format):
            raise ValueError(
                f"Codec class {codec_class.__name__} does not declare a Format"
            )

        if fmt in self._codecs:
            self._logger.debug(
                f"Overwriting codec registration for format '{fmt.value}'"
            )

        self._codecs[fmt] = codec_class

    def get_codec_class(self, fmt: Format) -> type[BaseCodec]:
        """
        Return the codec class for ``fmt``.

        Raises:
            ValueError: If no codec is registered for the format
        """
        try:
            return self._codecs[fmt]
        except KeyError:
            available = ", ".join(f.value for f in self.get_available_formats())
            raise ValueError(
                f"No codec registered for format {fmt!r}. Available: {available}"
            ) from None

    def create_codec(self, fmt: Format) -> BaseCodec:
        """Create a fresh codec instance for ``fmt``."""
        return self.get_codec_class(fmt)()

    def get_available_formats(self) -> list[Format]:
        return [fmt for fmt in Format if fmt in self._codecs]

    def get_codec_info(self, fmt: Format) -> dict[str, Any]:
        return self.create_codec(fmt).get_codec_info()
