"""Sized numeric marker types.

Annotating a field with one of these makes the binder range-check the parsed
value the way a fixed-width integer or a 32-bit float would. The parsed value
is an instance of the marker, which is a plain ``int`` or ``float`` subclass.
"""

import math
import struct


class SizedInt(int):
    bits = 64
    signed = True

    @classmethod
    def bounds(cls):
        if cls.signed:
            return -(1 << (cls.bits - 1)), (1 << (cls.bits - 1)) - 1
        return 0, (1 << cls.bits) - 1

    @classmethod
    def check(cls, value: int) -> "SizedInt":
        low, high = cls.bounds()
        if value < low or value > high:
            raise ValueError(f"value {value} out of range for {cls.__name__}")
        return cls(value)


class Int8(SizedInt):
    bits = 8


class Int16(SizedInt):
    bits = 16


class Int32(SizedInt):
    bits = 32


class Int64(SizedInt):
    bits = 64


class UInt(SizedInt):
    bits = 64
    signed = False


class UInt8(UInt):
    bits = 8


class UInt16(UInt):
    bits = 16


class UInt32(UInt):
    bits = 32


class UInt64(UInt):
    bits = 64


class Float32(float):
    @classmethod
    def check(cls, value: float) -> "Float32":
        if math.isfinite(value):
            try:
                value = struct.unpack("f", struct.pack("f", value))[0]
            except OverflowError:
                raise ValueError(f"value {value} out of range for Float32") from None
        return cls(value)
