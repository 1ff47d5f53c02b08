"""YAML codec built on ``ruamel.yaml`` (YAML 1.2)."""

from __future__ import annotations

from datetime import time
from io import StringIO
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.representer import SafeRepresenter

from ..config import ConversionOptions
from ..formats import Format
from ..model import JsonNumber, Value, format_float
from .base import BaseCodec


class _Constructor(SafeConstructor):
    """Safe constructor without the timestamp type of YAML 1.1."""


# The 1.2 core schema has no timestamps: 2024-01-01 is a string
_Constructor.add_constructor(
    "tag:yaml.org,2002:timestamp", SafeConstructor.construct_yaml_str
)


class _Representer(SafeRepresenter):
    """Safe representer that keeps large integral floats out of exponent form."""

    def represent_float(self, data: float) -> Any:
        text = format_float(data)
        if text is None:
            return super().represent_float(data)
        return self.represent_scalar("tag:yaml.org,2002:float", text)

    def represent_time(self, data: time) -> Any:
        return self.represent_str(data.isoformat())

    def represent_json_number(self, data: JsonNumber) -> Any:
        # Lossy fallback leaves are written the way they were read: as text
        return self.represent_str(str(data))


_Representer.add_representer(float, _Representer.represent_float)
_Representer.add_representer(time, _Representer.represent_time)
_Representer.add_representer(JsonNumber, _Representer.represent_json_number)


class YamlCodec(BaseCodec):
    """YAML 1.2, safe subset: no custom tags, no arbitrary objects."""

    format = Format.YAML

    def _decode(self, text: str) -> Any:
        parser = YAML(typ="safe", pure=True)
        parser.Constructor = _Constructor
        return parser.load(text)

    def _encode(self, tree: Value, options: ConversionOptions) -> str:
        stream = StringIO()
        self._make_serializer(options).dump(tree, stream)
        return stream.getvalue()

    def _make_serializer(self, options: ConversionOptions) -> YAML:
        serializer = YAML(typ="safe", pure=True)
        serializer.Representer = _Representer
        serializer.sort_base_mapping_type_on_output = options.sort_keys
        serializer.indent(mapping=2, sequence=4, offset=2)
        serializer.default_flow_style = False
        serializer.allow_unicode = True
        serializer.width = 4096
        return serializer
