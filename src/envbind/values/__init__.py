"""Value types that decode themselves from environment variables."""

from .google import (
    GoogleFirestoreDatabase,
    GooglePubSubTopic,
    InvalidGoogleFirestoreIDError,
    InvalidGoogleTopicIDError,
)
from .loglevel import LogLevel
from .numbers import (
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    SizedInt,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    "Float32",
    "GoogleFirestoreDatabase",
    "GooglePubSubTopic",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidGoogleFirestoreIDError",
    "InvalidGoogleTopicIDError",
    "LogLevel",
    "SizedInt",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
