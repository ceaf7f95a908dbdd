"""
Value codec for stored tweaks.

Values are serialized as UTF-8 JSON. Decoding is strict about the
requested type: a stored string never reads back as a number and a
stored bool never reads back as an int.
"""

import json
import math
import typing
from typing import Any


class TweakError(Exception):
    """Base class for tweak storage errors."""
    pass


class EncodeError(TweakError):
    """Raised when a value cannot be serialized for storage."""
    pass


class DecodeError(TweakError):
    """Raised when stored data does not decode as the requested type."""
    pass


def encode(value: Any) -> bytes:
    """
    Serialize a value for storage.

    Supports bool, int, float, str, and lists/tuples or str-keyed dicts
    of those.

    Raises:
        EncodeError: If the value (or anything nested in it) is unsupported
    """
    try:
        _check_encodable(value, "$")
        return json.dumps(value, allow_nan=False).encode("utf-8")
    except RecursionError:
        raise EncodeError("Value is nested too deeply to serialize")
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Failed to serialize value: {e}")


def decode(data: bytes, value_type: Any) -> Any:
    """
    Deserialize stored bytes as value_type.

    Args:
        data: Bytes previously produced by encode()
        value_type: bool, int, float, str, list, dict, or a
            parameterized list[...] / dict[str, ...]

    Raises:
        DecodeError: If the data is not valid JSON or does not match value_type
    """
    try:
        raw = json.loads(data.decode("utf-8"))
        return _coerce(raw, value_type, "$")
    except RecursionError:
        raise DecodeError("Stored data is nested too deeply to decode")
    except (UnicodeDecodeError, ValueError) as e:
        # JSONDecodeError and the int digit limit are both ValueErrors
        raise DecodeError(f"Stored data is not valid JSON: {e}")


def _check_encodable(value: Any, path: str) -> None:
    if isinstance(value, (bool, int, str)):
        return
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodeError(f"Non-finite number at {path}")
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_encodable(item, f"{path}[{i}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodeError(f"Non-string key {key!r} at {path}")
            _check_encodable(item, f"{path}.{key}")
        return
    raise EncodeError(f"Unsupported type {type(value).__name__} at {path}")


def _coerce(value: Any, value_type: Any, path: str) -> Any:
    if value_type is bool:
        if isinstance(value, bool):
            return value
    elif value_type is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif value_type is float:
        # JSON does not keep 30 and 30.0 apart
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError:
                raise DecodeError(f"Integer at {path} is too large for a float")
    elif value_type is str:
        if isinstance(value, str):
            return value
    else:
        origin = typing.get_origin(value_type) or value_type
        args = typing.get_args(value_type)

        if origin is list:
            if isinstance(value, list):
                if not args:
                    return value
                return [_coerce(item, args[0], f"{path}[{i}]") for i, item in enumerate(value)]
        elif origin is dict:
            if isinstance(value, dict):
                if not args:
                    return value
                key_type, item_type = args
                if key_type is not str:
                    raise DecodeError(f"Unsupported dict key type: {key_type!r}")
                return {k: _coerce(v, item_type, f"{path}.{k}") for k, v in value.items()}
        else:
            raise DecodeError(f"Unsupported value type: {value_type!r}")

    raise DecodeError(
        f"Expected {_type_name(value_type)} at {path}, got {type(value).__name__}"
    )


def _type_name(value_type: Any) -> str:
    return getattr(value_type, "__name__", None) or repr(value_type)
