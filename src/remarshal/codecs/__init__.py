"""Format codecs: one decoder and one encoder per supported format."""

from .base import BaseCodec
from .json_codec import JsonCodec
from .registry import CodecRegistry
from .toml_codec import TomlCodec
from .yaml_codec import YamlCodec

__all__ = ["BaseCodec", "CodecRegistry", "JsonCodec", "TomlCodec", "YamlCodec"]
