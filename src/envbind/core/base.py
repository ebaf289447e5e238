from typing import Protocol, runtime_checkable


@runtime_checkable
class Decoder(Protocol):
    """Types that parse their own environment value.

    Takes precedence over every other decoding path.
    """

    def decode(self, value: str) -> None: ...


@runtime_checkable
class Setter(Protocol):
    """Flag-style value types, such as the bundled Google identifiers."""

    def set(self, value: str) -> None: ...


@runtime_checkable
class BinaryUnmarshaler(Protocol):
    """Types that decode themselves from the raw bytes of the value."""

    def unmarshal_binary(self, data: bytes) -> None: ...
