"""Unit tests for the TOML codec."""

from __future__ import annotations

import pytest

from remarshal.codecs import TomlCodec
from remarshal.config import ConversionOptions
from remarshal.exceptions import DecodeError, EncodeError


@pytest.fixture
def codec() -> TomlCodec:
    return TomlCodec()


class TestTomlDecode:
    def test_plain_python_values(self, codec: TomlCodec) -> None:
        tree = codec.decode(
            'title = "x"\n'
            "n = 42\n"
            "f = 0.5\n"
            "ok = true\n"
            "\n"
            "[owner]\n"
            'tags = ["a", "b"]\n'
        )
        assert tree == {
            "title": "x",
            "n": 42,
            "f": 0.5,
            "ok": True,
            "owner": {"tags": ["a", "b"]},
        }
        assert type(tree) is dict
        assert type(tree["owner"]) is dict
        assert type(tree["n"]) is int
        assert type(tree["title"]) is str

    def test_array_of_tables(self, codec: TomlCodec) -> None:
        tree = codec.decode('[[servers]]\nname = "a"\n\n[[servers]]\nname = "b"\n')
        assert tree == {"servers": [{"name": "a"}, {"name": "b"}]}

    @pytest.mark.parametrize("text", ["a = ", "a = 1\na = 2\n", "[t\n"])
    def test_malformed(self, codec: TomlCodec, text: str) -> None:
        with pytest.raises(DecodeError) as exc_info:
            codec.decode(text)
        assert exc_info.value.context["format"] == "TOML"


class TestTomlEncode:
    def test_simple_table(self, codec: TomlCodec) -> None:
        assert codec.encode({"answer": 42}) == "answer = 42\n"

    def test_large_integral_float_is_positional(self, codec: TomlCodec) -> None:
        assert codec.encode({"x": 1e19}) == "x = 10000000000000000000.0\n"

    def test_nested_round_trip(self, codec: TomlCodec) -> None:
        tree = {
            "name": "demo",
            "servers": [
                {"host": "a", "ports": [1, 2], "meta": {"zone": "eu"}},
                {"host": "b", "ports": [], "meta": {"zone": "us"}},
            ],
            "owner": {"name": "x", "limits": {"cpu": 1.5}},
        }
        assert codec.decode(codec.encode(tree)) == tree

    def test_sort_keys(self, codec: TomlCodec) -> None:
        out = codec.encode({"b": 1, "a": 2}, ConversionOptions(sort_keys=True))
        assert out == "a = 2\nb = 1\n"

    @pytest.mark.parametrize("tree", [[1, 2], "text", 3, None])
    def test_root_must_be_table(self, codec: TomlCodec, tree: object) -> None:
        with pytest.raises(EncodeError, match="root must be a table"):
            codec.encode(tree)

    def test_null_rejected_with_location(self, codec: TomlCodec) -> None:
        with pytest.raises(EncodeError, match=r"\$\.a\[1\]"):
            codec.encode({"a": [1, None]})

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1, 10**20])
    def test_integer_beyond_64_bits_rejected(
        self, codec: TomlCodec, value: int
    ) -> None:
        with pytest.raises(EncodeError, match=r"64-bit \(out of range at \$\.t\.n\)"):
            codec.encode({"t": {"n": value}})

    def test_int64_bounds_accepted(self, codec: TomlCodec) -> None:
        out = codec.encode({"lo": -(2**63), "hi": 2**63 - 1, "flag": True})
        assert out == (
            "lo = -9223372036854775808\nhi = 9223372036854775807\nflag = true\n"
        )
