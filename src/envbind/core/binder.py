import copy
import dataclasses
import logging
import os
from typing import Any, List, Mapping, Optional, get_type_hints

import structlog

from ..usage import render_usage
from .coercion import classify, decode_value, optional_inner, split_annotated
from .errors import (
    EnvBindError,
    InvalidSpecificationError,
    ParseError,
    RequiredFieldError,
    UnknownVariableError,
    UnsupportedTypeError,
)
from .models import FieldInfo, FieldKind, type_name
from .naming import derive_segment, join_key

logging.getLogger("envbind").addHandler(logging.NullHandler())
logger = structlog.wrap_logger(logging.getLogger(__name__))


def _check_target(target: Any) -> None:
    if isinstance(target, type) or not dataclasses.is_dataclass(target):
        raise InvalidSpecificationError(target)
    if type(target).__dataclass_params__.frozen:
        raise InvalidSpecificationError(target)


def _gather(prefix: str, owner: Any, infos: List[FieldInfo]) -> None:
    _check_target(owner)
    hints = get_type_hints(type(owner), include_extras=True)

    for field in dataclasses.fields(owner):
        tp, env = split_annotated(hints.get(field.name, field.type))
        if env.ignored:
            continue

        key = join_key(prefix, derive_segment(field.name, env.name))
        kind = classify(tp)
        if kind is None:
            raise UnsupportedTypeError(field.name, type_name(tp), key)

        struct_type = None
        if kind is FieldKind.STRUCT:
            struct_type = tp
        elif kind is FieldKind.POINTER and classify(optional_inner(tp)) is FieldKind.STRUCT:
            struct_type = optional_inner(tp)

        if struct_type is not None:
            nested = getattr(owner, field.name, None)
            if nested is None:
                nested = struct_type()
                setattr(owner, field.name, nested)
            elif nested is getattr(type(owner), field.name, None):
                # class-level default, shared by every instance
                nested = copy.copy(nested)
                setattr(owner, field.name, nested)
            inner_prefix = prefix if env.flatten and not env.name else key
            _gather(inner_prefix, nested, infos)
            continue

        infos.append(
            FieldInfo(
                name=field.name,
                key=key,
                type=tp,
                kind=kind,
                owner=owner,
                alt_name=env.name,
                default=env.default,
                required=env.required,
                desc=env.desc,
            )
        )


class Binder:
    """Binds environment variables under ``prefix`` into dataclass instances.

    ``environ`` defaults to ``os.environ``; a snapshot of it is taken at the
    start of every call.
    """

    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix.upper()
        self._environ = environ
        self.logger = logger.bind(component="binder", prefix=self.prefix)

    def _snapshot(self) -> dict:
        return dict(os.environ if self._environ is None else self._environ)

    def gather(self, target: Any) -> List[FieldInfo]:
        """Build the field table of ``target``, allocating nested dataclasses left as ``None``."""
        infos: List[FieldInfo] = []
        _gather(self.prefix, target, infos)
        return infos

    def bind(self, target: Any) -> None:
        """Populate ``target`` in place.

        Raises:
            InvalidSpecificationError: target is not a mutable dataclass instance
            UnsupportedTypeError: a field type has no decoding path
            ParseError: the first value that failed to decode
            RequiredFieldError: every required key that is absent or blank
        """
        infos = self.gather(target)
        environ = self._snapshot()
        missing: List[str] = []

        for info in infos:
            source = "environment"
            if info.key in environ:
                value = environ[info.key]
                if info.required and value == "":
                    missing.append(info.key)
                    continue
            elif info.default is not None:
                value = info.default
                source = "default"
            else:
                if info.required:
                    missing.append(info.key)
                continue

            current = getattr(info.owner, info.name, None)
            try:
                decoded = decode_value(info.type, value, current)
            except Exception as exc:
                raise ParseError(info.name, info.key, info.type_name, value, exc) from exc
            setattr(info.owner, info.name, decoded)
            self.logger.debug("Bound environment variable", key=info.key, source=source)

        if missing:
            self.logger.warning("Required environment variables missing", keys=missing)
            raise RequiredFieldError(missing)

    def must_bind(self, target: Any) -> None:
        """Like ``bind``, but any failure terminates the process."""
        try:
            self.bind(target)
        except EnvBindError as e:
            self.logger.critical("Environment binding failed", error=str(e))
            raise SystemExit(str(e)) from e

    def check_disallowed(self, target: Any) -> None:
        """Raise ``UnknownVariableError`` for the first variable under the prefix
        that is not a key of ``target``.

        Keys of ignored fields are not known keys.
        """
        known = {info.key for info in self.gather(target)}
        prefix = f"{self.prefix}_" if self.prefix else ""
        for key in sorted(self._snapshot()):
            if key.startswith(prefix) and key not in known:
                self.logger.warning("Unknown environment variable", key=key)
                raise UnknownVariableError(key)

    def usage(self, target: Any) -> str:
        return render_usage(self.gather(target))


def bind(prefix: str, target: Any) -> None:
    Binder(prefix).bind(target)


def must_bind(prefix: str, target: Any) -> None:
    Binder(prefix).must_bind(target)


def check_disallowed(prefix: str, target: Any) -> None:
    Binder(prefix).check_disallowed(target)


def gather(prefix: str, target: Any) -> List[FieldInfo]:
    return Binder(prefix).gather(target)


def usage(prefix: str, target: Any) -> str:
    return Binder(prefix).usage(target)
