"""
exceptions.py

Typed exception hierarchy shared by the decode → normalize → encode pipeline.
"""

from __future__ import annotations

from typing import Any

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class RemarshalError(Exception):
    """Root of all errors raised by a conversion."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg

    def get_recovery_hint(self) -> str:
        """Provide a short hint for fixing the error."""
        return "Check the input document and the selected formats"


class ConfigError(RemarshalError):
    """
    Raised when the format selection is invalid.

    Examples
    --------
    * Input and output formats are identical
    * Unknown input or output format name
    """

    def __init__(self, message: str, format_name: str | None = None) -> None:
        context = {}
        if format_name is not None:
            context["format_name"] = repr(format_name)
        super().__init__(message, "CONFIG_ERROR", context)

    def get_recovery_hint(self) -> str:
        return "Use two different formats among: TOML, YAML, JSON"


class DecodeError(RemarshalError):
    """Raised when the input document cannot be parsed by its decoder."""

    def __init__(self, message: str, format_name: str | None = None) -> None:
        context = {}
        if format_name:
            context["format"] = format_name
        super().__init__(message, "DECODE_ERROR", context)

    def get_recovery_hint(self) -> str:
        fmt = self.context.get("format", "input")
        return f"Make sure the input is a well-formed {fmt} document"


class KeyTypeError(RemarshalError, TypeError):
    """
    Raised when a mapping key is not a string.

    Only YAML can produce such keys (``true: x``, ``1: y``, ``~: z``); no
    other format can represent them, so the conversion is aborted instead
    of inventing a string form for the key.
    """

    def __init__(self, message: str, key: Any = None, path: str | None = None) -> None:
        context: dict[str, Any] = {}
        if path:
            context["path"] = path
        context["key"] = repr(key)
        context["key_type"] = type(key).__name__
        super().__init__(message, "KEY_TYPE_ERROR", context)
        self.key = key
        self.path = path

    def get_recovery_hint(self) -> str:
        return f"Quote the key {self.context['key']} so it is read as a string"


class EncodeError(RemarshalError):
    """Raised when the output encoder rejects the normalized tree."""

    def __init__(self, message: str, format_name: str | None = None) -> None:
        context = {}
        if format_name:
            context["format"] = format_name
        super().__init__(message, "ENCODE_ERROR", context)

    def get_recovery_hint(self) -> str:
        if self.context.get("format") == "TOML":
            return "TOML needs a table at the document root and has no null value"
        return "The document uses a value the output format cannot represent"
