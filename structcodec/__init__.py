# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This module exports the types and functions that make up the public API.

>>> from structcodec import u32
>>> encode(5, u32)
b'\\x00\\x00\\x00\\x05'
>>> decode(list[u32], b'\\x00\\x00\\x00\\x01\\x00\\x00\\x00\\x05\\xff')
([5], 8)
"""

from typing import Any

from structcodec.codecs import Codec, make_codec
from structcodec.serializable import serializable
from structcodec.serialization import (
    BadDataError,
    InvalidDiscriminantError,
    InvalidTextEncodingError,
    InvalidValueError,
    OutOfDataError,
    SerializationError,
    TooLongError,
    UnsupportedTypeError,
)
from structcodec.serialization.types import Buffer
from structcodec.types import Array, SocketAddress, f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128
from structcodec.version import __version__


def encode(value: Any, type_: Any, /) -> bytes:
    """Encode a value as the given type."""
    return make_codec(type_).encode(value)


def decode(type_: Any, data: Buffer, /) -> tuple[Any, int]:
    """Decode a value of the given type from the start of `data`, returns the value and how many bytes were consumed."""
    return make_codec(type_).decode(data)


__all__ = [
    'Array',
    'BadDataError',
    'Codec',
    'InvalidDiscriminantError',
    'InvalidTextEncodingError',
    'InvalidValueError',
    'OutOfDataError',
    'SerializationError',
    'SocketAddress',
    'TooLongError',
    'UnsupportedTypeError',
    '__version__',
    'decode',
    'encode',
    'f32',
    'f64',
    'i8',
    'i16',
    'i32',
    'i64',
    'i128',
    'make_codec',
    'serializable',
    'u8',
    'u16',
    'u32',
    'u64',
    'u128',
]
