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
This module implements utf-8 text with a length prefix.

The prefix is a 4-byte big-endian unsigned integer holding the number of encoded bytes (not characters), followed by
exactly that many utf-8 bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'Hello world')
>>> encode_utf8(se, 'ハトホル')
>>> bytes(se.finalize()).hex()
'0000000b48656c6c6f20776f726c640000000ce3838fe38388e3839be383ab'

>>> data = bytes.fromhex('0000000b48656c6c6f20776f726c640000000ce3838fe38388e3839be383ab')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_utf8(de)
'Hello world'
>>> decode_utf8(de)
'ハトホル'
>>> de.finalize()

A declared length larger than what's left fails as truncated input:

>>> from structcodec.serialization.exceptions import OutOfDataError

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x05abc')
>>> try:
...     decode_utf8(de)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read: need 5, have 3

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x01\xff')
>>> try:
...     decode_utf8(de)
... except InvalidTextEncodingError as e:
...     print(*e.args)
invalid utf-8 text
"""

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.consts import LENGTH_PREFIX_SIZE, MAX_LENGTH_PREFIX
from structcodec.serialization.exceptions import InvalidTextEncodingError, TooLongError

from .int import decode_int, encode_int


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a 4-byte length prefix.

    This module's docstring has more details and examples.
    """
    if not isinstance(value, str):
        raise TypeError(f'expected str, got {type(value).__name__}')
    data = value.encode('utf-8')
    if len(data) > MAX_LENGTH_PREFIX:
        raise TooLongError(f'text too long: {len(data)} bytes')
    encode_int(serializer, len(data), length=LENGTH_PREFIX_SIZE, signed=False)
    serializer.write_bytes(data)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a 4-byte length prefix.

    This module's docstring has more details and examples.
    """
    length = decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False)
    data = deserializer.read_bytes(length)
    try:
        return bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidTextEncodingError('invalid utf-8 text') from e
