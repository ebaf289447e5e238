"""Conversion of raw environment strings into typed field values.

``classify`` decides how a field type is handled and is used when the field
table is built, so unsupported types fail before anything is read.
``decode_value`` performs the conversion in the fixed precedence order:
custom hooks first (``decode``, ``set``, ``unmarshal_binary``), then the
built-in kinds.
"""

import base64
import binascii
import copy
import dataclasses
import re
import types
from datetime import datetime, timedelta
from typing import Annotated, Any, Callable, Dict, Optional, Tuple, Union, get_args, get_origin

from ..values.numbers import Float32, SizedInt
from .base import BinaryUnmarshaler, Decoder, Setter
from .duration import parse_duration
from .models import Env, FieldKind

# Builtins that carry methods named like the hooks (bytes.decode) but are
# decoded by kind.
_BUILTIN_TYPES = (bool, int, float, str, bytes, bytearray, timedelta, datetime, list, dict)

_HOOKS = (
    (Decoder, "decode"),
    (Setter, "set"),
    (BinaryUnmarshaler, "unmarshal_binary"),
)

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def split_annotated(hint: Any) -> Tuple[Any, Env]:
    """Return the bare type and the ``Env`` settings carried by ``hint``."""
    if get_origin(hint) is Annotated:
        tp, *extras = get_args(hint)
        for extra in extras:
            if isinstance(extra, Env):
                return tp, extra
        return tp, Env()
    return hint, Env()


def optional_inner(tp: Any) -> Optional[Any]:
    """``T`` for ``Optional[T]``, otherwise ``None``."""
    if get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1 and len(get_args(tp)) == 2:
            return split_annotated(args[0])[0]
    return None


def hook_name(tp: Any) -> Optional[str]:
    if not isinstance(tp, type) or issubclass(tp, _BUILTIN_TYPES):
        return None
    for protocol, name in _HOOKS:
        if issubclass(tp, protocol):
            return name
    return None


def _scalar_parser(tp: Any) -> Optional[Callable[[str], Any]]:
    if not isinstance(tp, type):
        return None
    if issubclass(tp, bool):
        return parse_bool
    if issubclass(tp, int):
        return lambda value: parse_int(tp, value)
    if issubclass(tp, float):
        return lambda value: parse_float(tp, value)
    if issubclass(tp, str):
        return tp
    if issubclass(tp, timedelta):
        return parse_duration
    if issubclass(tp, datetime):
        return parse_datetime
    return None


def classify(tp: Any) -> Optional[FieldKind]:
    """Return the kind of ``tp``, or ``None`` when no decoding path exists."""
    if optional_inner(tp) is not None:
        return FieldKind.POINTER if classify(optional_inner(tp)) else None
    if hook_name(tp):
        return FieldKind.CUSTOM
    if tp in (bytes, bytearray):
        return FieldKind.BYTES

    origin = get_origin(tp)
    if origin is list:
        args = get_args(tp)
        if len(args) == 1 and _is_leaf(split_annotated(args[0])[0]):
            return FieldKind.SLICE
        return None
    if origin is dict:
        args = get_args(tp)
        if len(args) == 2 and all(_is_leaf(split_annotated(arg)[0]) for arg in args):
            return FieldKind.MAP
        return None

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return FieldKind.STRUCT
    if _scalar_parser(tp):
        return FieldKind.PRIMITIVE
    return None


def _is_leaf(tp: Any) -> bool:
    return classify(tp) in (FieldKind.PRIMITIVE, FieldKind.CUSTOM, FieldKind.BYTES)


def parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f'invalid boolean "{value}"')


def parse_int(tp: type, value: str) -> int:
    if not _INT_RE.match(value):
        raise ValueError(f'invalid integer "{value}"')
    if issubclass(tp, SizedInt):
        if not tp.signed and value.startswith("-"):
            raise ValueError(f'invalid unsigned integer "{value}"')
        return tp.check(int(value, 10))
    return tp(int(value, 10))


def parse_float(tp: type, value: str) -> float:
    if not value or value != value.strip() or "_" in value:
        raise ValueError(f'invalid float "{value}"')
    number = float(value)
    if issubclass(tp, Float32):
        return tp.check(number)
    return tp(number)


def parse_datetime(value: str) -> datetime:
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_bytes(value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc


def decode_value(tp: Any, value: str, current: Any = None) -> Any:
    """Decode ``value`` into a new value of type ``tp``.

    ``current`` is the attribute's present value; hook types decode into a
    copy of it when it is set, otherwise into a freshly constructed instance.
    """
    tp = split_annotated(tp)[0]
    inner = optional_inner(tp)
    if inner is not None:
        return decode_value(inner, value, current)

    hook = hook_name(tp)
    if hook:
        target = copy.copy(current) if current is not None else tp()
        if hook == "unmarshal_binary":
            target.unmarshal_binary(value.encode("utf-8"))
        else:
            getattr(target, hook)(value)
        return target

    if tp in (bytes, bytearray):
        return tp(parse_bytes(value))

    origin = get_origin(tp)
    if origin is list:
        (elem,) = get_args(tp)
        if value == "":
            return []
        return [decode_value(elem, part) for part in value.split(",")]
    if origin is dict:
        return _decode_map(tp, value)

    parser = _scalar_parser(tp)
    if parser is None:
        raise TypeError(f"no decoder for type {tp!r}")
    return parser(value)


def _decode_map(tp: Any, value: str) -> Dict[Any, Any]:
    key_type, value_type = get_args(tp)
    result: Dict[Any, Any] = {}
    if value == "":
        return result
    for pair in value.split(";"):
        key, sep, item = pair.partition(":")
        if not sep:
            raise ValueError(f'invalid map item: "{pair}"')
        result[decode_value(key_type, key)] = decode_value(value_type, item)
    return result
