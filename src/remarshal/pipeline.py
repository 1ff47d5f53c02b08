"""
ConversionPipeline – decode, normalize and encode one document.

Responsibilities
----------------
1.   Validate the format selection (same format, unknown input, unknown
     output – in that order).
2.   Decode the input with the codec of the input format.
3.   Normalize the tree: string keys first, then JSON numbers.
4.   Encode the tree with the codec of the output format.

Every error aborts the conversion; nothing is partially written. The
pipeline holds no state shared between conversions, so instances and the
``convert`` helper are safe to use from several threads.
"""

from __future__ import annotations

import logging

from .codecs import CodecRegistry
from .config import DEFAULT_OPTIONS, ConversionOptions
from .exceptions import ConfigError
from .formats import Format
from .normalization import normalize

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """End-to-end converter for a single (input format, output format) pair."""

    def __init__(
        self,
        input_format: str | Format,
        output_format: str | Format,
        options: ConversionOptions | None = None,
        registry: CodecRegistry | None = None,
    ) -> None:
        """
        Parameters
        ----------
        input_format, output_format
            Exact, case-sensitive format names: "TOML", "YAML" or "JSON".
        options
            Presentation settings for the output (JSON indentation, key sort).
        registry
            Codec registry; a fresh one with the built-in codecs by default.

        Raises
        ------
        ConfigError
            If the formats are identical or either name is unknown.
        """
        if input_format == output_format:
            same = getattr(input_format, "value", input_format)
            raise ConfigError("same format", format_name=same)
        try:
            self.input_format = Format.parse(input_format)
        except ValueError:
            raise ConfigError(
                "invalid input format", format_name=input_format
            ) from None
        try:
            self.output_format = Format.parse(output_format)
        except ValueError:
            raise ConfigError(
                "invalid output format", format_name=output_format
            ) from None

        self.options = options or DEFAULT_OPTIONS
        registry = registry or CodecRegistry()
        self._decoder = registry.create_codec(self.input_format)
        self._encoder = registry.create_codec(self.output_format)
        self._logger = logger.getChild(self.__class__.__name__)

    def run(self, data: bytes | str) -> str:
        """
        Convert ``data`` and return the encoded document.

        Raises
        ------
        DecodeError
            If the input is not a valid document of the input format.
        KeyTypeError
            If a mapping key is not a string.
        EncodeError
            If the output format cannot represent the document.
        """
        self._logger.debug(
            "Converting %s → %s", self.input_format.value, self.output_format.value
        )
        tree = normalize(self._decoder.decode(data))
        return self._encoder.encode(tree, self.options)


def convert(
    data: bytes | str,
    input_format: str | Format,
    output_format: str | Format,
    options: ConversionOptions | None = None,
) -> str:
    """
    Convert a document from ``input_format`` to ``output_format``.

    JSON output is indented with two spaces unless ``options`` says
    otherwise; TOML and YAML use their encoder's block layout.
    """
    return ConversionPipeline(input_format, output_format, options).run(data)
