"""Duration parsing for ``datetime.timedelta`` fields.

The grammar is a signed sequence of decimal numbers, each with an optional
fraction and a unit suffix, such as ``300ms``, ``-1.5h`` or ``2h45m``. Valid
units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. A bare
``0`` is also accepted.

A leading day count (``10d``, ``1d12h``) is multiplied out to hours before the
rest of the string is parsed.
"""

import re
from datetime import timedelta

_UNIT_MICROSECONDS = {
    "ns": 0.001,
    "us": 1,
    "µs": 1,
    "μs": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60 * 1_000_000,
    "h": 3600 * 1_000_000,
}

_DAYS_RE = re.compile(r"^([0-9]+)d")
_COMPONENT_RE = re.compile(r"([0-9]*(?:\.[0-9]*)?)([^0-9.]+)")


class DurationError(ValueError):
    pass


def expand_days(value: str) -> str:
    match = _DAYS_RE.match(value)
    if not match:
        return value
    hours = int(match.group(1)) * 24
    return f"{hours}h{value[match.end():]}"


def parse_go_duration(value: str) -> timedelta:
    original = value
    if not value:
        raise DurationError(f'invalid duration "{original}"')

    negative = False
    if value[0] in "+-":
        negative = value[0] == "-"
        value = value[1:]

    if value == "0":
        return timedelta(0)
    if not value:
        raise DurationError(f'invalid duration "{original}"')

    total = 0.0
    pos = 0
    while pos < len(value):
        match = _COMPONENT_RE.match(value, pos)
        if not match:
            raise DurationError(f'invalid duration "{original}"')
        number, unit = match.groups()
        if number in ("", "."):
            raise DurationError(f'invalid duration "{original}"')
        if unit not in _UNIT_MICROSECONDS:
            raise DurationError(f'unknown unit "{unit}" in duration "{original}"')
        total += float(number) * _UNIT_MICROSECONDS[unit]
        pos = match.end()

    micros = round(total)
    return timedelta(microseconds=-micros if negative else micros)


def parse_duration(value: str) -> timedelta:
    return parse_go_duration(expand_days(value))
