from dataclasses import dataclass
import types
from enum import Enum
from typing import Any, Optional, Union, get_args, get_origin


class FieldKind(Enum):
    PRIMITIVE = "primitive"
    SLICE = "slice"
    MAP = "map"
    BYTES = "bytes"
    POINTER = "pointer"
    STRUCT = "struct"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Env:
    """Per-field binding settings, attached with ``typing.Annotated``.

    Example::

        @dataclass
        class Config:
            port: Annotated[int, Env("PORT", default="8080")] = 0
            token: Annotated[str, Env(required=True, desc="API token")] = ""
    """

    name: Optional[str] = None
    default: Optional[str] = None
    required: bool = False
    ignored: bool = False
    flatten: bool = False
    desc: Optional[str] = None


@dataclass
class FieldInfo:
    name: str
    key: str
    type: Any
    kind: FieldKind
    owner: Any
    alt_name: Optional[str] = None
    default: Optional[str] = None
    required: bool = False
    ignored: bool = False
    desc: Optional[str] = None

    @property
    def type_name(self) -> str:
        return type_name(self.type)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "key": self.key,
            "type": self.type_name,
            "kind": self.kind.value,
            "default": self.default,
            "required": self.required,
            "desc": self.desc,
        }


def type_name(tp: Any) -> str:
    origin = get_origin(tp)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        return type_name(args[0]) if len(args) == 1 else " | ".join(type_name(a) for a in args)
    if origin in (list, dict):
        return f"{origin.__name__}[{', '.join(type_name(a) for a in get_args(tp))}]"
    return getattr(tp, "__name__", repr(tp))
