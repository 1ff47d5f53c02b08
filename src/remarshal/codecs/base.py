"""Base implementation for format codecs."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..config import DEFAULT_OPTIONS, ConversionOptions
from ..exceptions import DecodeError, EncodeError
from ..formats import Format
from ..model import Value

logger = logging.getLogger(__name__)


class BaseCodec(ABC):
    """
    Abstract base class for format codecs.

    A codec turns document text into an intermediate value tree and back.
    The base class owns error handling so that every library failure leaves
    the codec as a ``DecodeError`` or ``EncodeError``.

    Subclasses must implement:
    - _decode(): Parse document text with the format library
    - _encode(): Render a normalized tree with the format library

    Subclasses can optionally override:
    - validate_tree(): Reject trees the format cannot represent
    """

    format: Format

    def __init__(self) -> None:
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def _decode(self, text: str) -> Any:
        """
        Parse ``text`` into a value tree.

        Any exception raised here is reported as a ``DecodeError``.
        """

    @abstractmethod
    def _encode(self, tree: Value, options: ConversionOptions) -> str:
        """
        Render ``tree`` as document text.

        Any exception raised here is reported as an ``EncodeError``.
        """

    def validate_tree(self, tree: Value) -> None:
        """Hook for format-level constraints; raise ``EncodeError`` to reject."""

    def decode(self, data: bytes | str) -> Any:
        """
        Decode a document into a (not yet normalized) value tree.

        Raises:
            DecodeError: If the bytes are not UTF-8 or the document is malformed
        """
        fmt = self.format.value
        if isinstance(data, (bytes, bytearray)):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Input is not valid UTF-8: {e}", fmt) from e

        try:
            tree = self._decode(data)
        except DecodeError:
            raise
        except Exception as e:
            self._logger.debug(f"{fmt} decoder failed: {e}")
            raise DecodeError(f"Cannot parse {fmt} input: {e}", fmt) from e

        self._logger.debug(f"Decoded {fmt} document ({type(tree).__name__} root)")
        return tree

    def encode(self, tree: Value, options: ConversionOptions | None = None) -> str:
        """
        Encode a normalized value tree.

        Raises:
            EncodeError: If the format cannot represent the tree
        """
        fmt = self.format.value
        self.validate_tree(tree)

        try:
            text = self._encode(tree, options or DEFAULT_OPTIONS)
        except EncodeError:
            raise
        except Exception as e:
            self._logger.debug(f"{fmt} encoder failed: {e}")
            raise EncodeError(f"Cannot encode {fmt} output: {e}", fmt) from e

        self._logger.debug(f"Encoded {fmt} document ({len(text)} characters)")
        return text

    def get_codec_info(self) -> dict[str, Any]:
        """Describe this codec, for debugging and ``--list-formats``."""
        return {
            "class_name": self.__class__.__name__,
            "format": self.format.value,
            "description": (self.__class__.__doc__ or "").strip().splitlines()[0],
        }
