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

r"""
This module implements a byte sequence with a 4-byte length prefix.

It is byte-for-byte the same as a sequence of `u8` values, a count followed by each byte, it's just faster to handle
`bytes` directly.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'\x01\x02\x03')
>>> bytes(se.finalize()).hex()
'00000003010203'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000003010203ff'))
>>> decode_bytes(de)
b'\x01\x02\x03'
>>> bytes(de.read_all())
b'\xff'
"""

from typing import Optional

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.consts import LENGTH_PREFIX_SIZE, MAX_LENGTH_PREFIX
from structcodec.serialization.exceptions import TooLongError
from structcodec.serialization.types import Buffer

from .int import decode_int, encode_int


def encode_bytes(serializer: Serializer, data: Buffer, *, max_length: Optional[int] = None) -> None:
    view = memoryview(data)
    limit = MAX_LENGTH_PREFIX if max_length is None else min(max_length, MAX_LENGTH_PREFIX)
    if view.nbytes > limit:
        raise TooLongError(f'byte sequence too long: {view.nbytes} bytes, maximum is {limit}')
    encode_int(serializer, view.nbytes, length=LENGTH_PREFIX_SIZE, signed=False)
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer, *, max_length: Optional[int] = None) -> bytes:
    length = decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False)
    limit = MAX_LENGTH_PREFIX if max_length is None else min(max_length, MAX_LENGTH_PREFIX)
    if length > limit:
        raise TooLongError(f'byte sequence too long: {length} bytes, maximum is {limit}')
    return bytes(deserializer.read_bytes(length))
