"""Encoding options passed through the conversion pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConversionOptions(BaseModel):
    """Presentation settings for the encoded output."""

    indent_json: bool = Field(
        True, description="Pretty-print JSON output instead of one compact line."
    )
    json_indent: int = Field(
        2, ge=1, description="Number of spaces per JSON indentation level."
    )
    sort_keys: bool = Field(
        False,
        description="Emit mapping keys sorted, for byte-for-byte reproducible output.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)


DEFAULT_OPTIONS = ConversionOptions()
