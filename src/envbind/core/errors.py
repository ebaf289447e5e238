"""Exceptions raised while binding the environment into a dataclass."""

from typing import List, Optional


class EnvBindError(Exception):
    """Base class for every error raised by envbind."""


class InvalidSpecificationError(EnvBindError, TypeError):
    """The bind target is not a mutable dataclass instance."""

    def __init__(self, target: object):
        self.target = target
        super().__init__(
            f"specification must be a mutable dataclass instance, got {type(target).__name__}"
        )


class ParseError(EnvBindError, ValueError):
    """A single field failed to decode."""

    def __init__(self, field_name: str, key_name: str, type_name: str, value: str, err: Exception):
        self.field_name = field_name
        self.key_name = key_name
        self.type_name = type_name
        self.value = value
        self.err = err
        super().__init__(
            f"assigning {key_name} to {field_name}: converting '{value}' to type {type_name}. "
            f"details: {err}"
        )


class RequiredFieldError(EnvBindError):
    """One or more required variables are absent or blank."""

    def __init__(self, keys: List[str]):
        self.keys = list(keys)
        super().__init__("; ".join(f"required key {key} missing value" for key in self.keys))


class UnsupportedTypeError(EnvBindError, TypeError):
    def __init__(self, field_name: str, type_name: str, key_name: Optional[str] = None):
        self.field_name = field_name
        self.type_name = type_name
        self.key_name = key_name
        super().__init__(f"field {field_name} has unsupported type {type_name}")


class UnknownVariableError(EnvBindError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"unknown environment variable {key}")
