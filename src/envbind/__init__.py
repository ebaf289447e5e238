"""Bind environment variables into annotated dataclasses."""

from .core.base import BinaryUnmarshaler, Decoder, Setter
from .core.binder import Binder, bind, check_disallowed, gather, must_bind, usage
from .core.errors import (
    EnvBindError,
    InvalidSpecificationError,
    ParseError,
    RequiredFieldError,
    UnknownVariableError,
    UnsupportedTypeError,
)
from .core.models import Env, FieldInfo, FieldKind

__version__ = "0.1.0"

__all__ = [
    "BinaryUnmarshaler",
    "Binder",
    "Decoder",
    "Env",
    "EnvBindError",
    "FieldInfo",
    "FieldKind",
    "InvalidSpecificationError",
    "ParseError",
    "RequiredFieldError",
    "Setter",
    "UnknownVariableError",
    "UnsupportedTypeError",
    "__version__",
    "bind",
    "check_disallowed",
    "gather",
    "must_bind",
    "usage",
]
