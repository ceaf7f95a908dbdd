"""
Tests for the tweak value codec.
"""

from typing import Dict, List

import pytest

from tptweak.core.codec import DecodeError, EncodeError, TweakError, decode, encode


class TestEncode:
    """Tests for encode()."""

    def test_scalars_are_json(self):
        assert encode(True) == b"true"
        assert encode("fast") == b'"fast"'
        assert encode(30.0) == b"30.0"

    def test_tuple_encodes_as_list(self):
        assert decode(encode((1.0, 2.5)), List[float]) == [1.0, 2.5]

    def test_nested_structures(self):
        value = {"hosts": ["a", "b"], "retries": 3, "verbose": False}
        assert decode(encode(value), dict) == value

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), [1.0, float("-inf")]])
    def test_rejects_non_finite_numbers(self, value):
        with pytest.raises(EncodeError):
            encode(value)

    def test_rejects_unsupported_objects(self):
        with pytest.raises(EncodeError):
            encode(object())
        with pytest.raises(EncodeError):
            encode({"when": {1, 2}})

    def test_rejects_non_string_keys(self):
        with pytest.raises(EncodeError):
            encode({1: "one"})

    def test_errors_share_base_class(self):
        assert issubclass(EncodeError, TweakError)
        assert issubclass(DecodeError, TweakError)


class TestDecode:
    """Tests for decode()."""

    def test_float_accepts_integral_json(self):
        value = decode(b"30", float)
        assert value == 30.0
        assert isinstance(value, float)

    def test_string_does_not_decode_as_number(self):
        with pytest.raises(DecodeError):
            decode(encode("fast"), float)

    def test_number_does_not_decode_as_string(self):
        with pytest.raises(DecodeError):
            decode(encode(10.0), str)

    def test_bool_is_not_a_number(self):
        with pytest.raises(DecodeError):
            decode(encode(True), int)
        with pytest.raises(DecodeError):
            decode(encode(True), float)

    def test_number_is_not_a_bool(self):
        with pytest.raises(DecodeError):
            decode(encode(1), bool)

    def test_int_rejects_fraction(self):
        with pytest.raises(DecodeError):
            decode(encode(2.5), int)

    def test_typed_list(self):
        assert decode(encode(["a", "b"]), List[str]) == ["a", "b"]
        assert decode(encode([5, 10.5]), list[float]) == [5.0, 10.5]

    def test_typed_list_rejects_wrong_item(self):
        with pytest.raises(DecodeError):
            decode(encode(["a", 1]), List[str])

    def test_bare_list_keeps_items(self):
        assert decode(encode(["a", 1, True]), list) == ["a", 1, True]

    def test_typed_dict(self):
        assert decode(encode({"a": 1.5}), Dict[str, float]) == {"a": 1.5}

    def test_typed_dict_rejects_wrong_value(self):
        with pytest.raises(DecodeError):
            decode(encode({"a": "b"}), Dict[str, float])

    def test_list_is_not_a_scalar(self):
        with pytest.raises(DecodeError):
            decode(encode([True]), bool)

    def test_invalid_json(self):
        with pytest.raises(DecodeError):
            decode(b"{not json", str)

    def test_invalid_utf8(self):
        with pytest.raises(DecodeError):
            decode(b"\xff\xfe", str)

    def test_unsupported_type(self):
        with pytest.raises(DecodeError):
            decode(encode("x"), bytes)
        with pytest.raises(DecodeError):
            decode(encode("x"), None)


def _nested_list(depth):
    value = []
    for _ in range(depth):
        value = [value]
    return value


class TestLimits:
    """Tests for values at the edges of what JSON and Python can hold."""

    def test_huge_int_as_float(self):
        with pytest.raises(DecodeError):
            decode(encode(10 ** 400), float)

    def test_huge_int_as_int(self):
        assert decode(encode(10 ** 400), int) == 10 ** 400

    def test_huge_int_inside_float_list(self):
        with pytest.raises(DecodeError):
            decode(encode([1.0, 10 ** 400]), List[float])

    def test_deep_nesting_on_encode(self):
        with pytest.raises(EncodeError):
            encode(_nested_list(5000))

    def test_deep_nesting_on_decode(self):
        data = b"[" * 5000 + b"]" * 5000
        with pytest.raises(DecodeError):
            decode(data, list)
