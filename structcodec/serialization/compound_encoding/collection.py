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
A collection is any sized iterable of homogeneous values, a `list[T]` or a `tuple[T, ...]`.

Layout: [N: u32 big-endian][value_0]...[value_N-1]

>>> from structcodec.serialization.encoding.int import decode_int, encode_int
>>> enc_u8 = lambda se, v: encode_int(se, v, length=1, signed=False)
>>> dec_u8 = lambda de: decode_int(de, length=1, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, list(range(1, 10)), enc_u8)
>>> bytes(se.finalize()).hex()
'00000009010203040506070809'

The builder decides what is built with the decoded elements, it only needs to accept a list:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000009010203040506070809'))
>>> decode_collection(de, dec_u8, tuple)
(1, 2, 3, 4, 5, 6, 7, 8, 9)
>>> de.finalize()

Exactly N elements are decoded. Elements of zero width consume no input, so N alone decides how much work a decode
does, `max_length` is what bounds it. Decoding fails when the window runs out before N elements:

>>> from structcodec.serialization.exceptions import OutOfDataError

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000030102'))
>>> try:
...     decode_collection(de, dec_u8, list)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read: need 1, have 0
"""

from collections.abc import Collection
from typing import Callable, Optional, TypeVar

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.consts import LENGTH_PREFIX_SIZE, MAX_LENGTH_PREFIX
from structcodec.serialization.encoding.int import decode_int, encode_int
from structcodec.serialization.exceptions import TooLongError

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def _check_length(length: int, max_length: Optional[int]) -> None:
    limit = MAX_LENGTH_PREFIX if max_length is None else min(max_length, MAX_LENGTH_PREFIX)
    if length > limit:
        raise TooLongError(f'collection too long: {length} elements, maximum is {limit}')


def encode_collection(
    serializer: Serializer,
    values: Collection[T],
    encoder: Encoder[T],
    *,
    max_length: Optional[int] = None,
) -> None:
    _check_length(len(values), max_length)
    encode_int(serializer, len(values), length=LENGTH_PREFIX_SIZE, signed=False)
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[list[T]], R],
    *,
    max_length: Optional[int] = None,
) -> R:
    length = decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False)
    _check_length(length, max_length)
    items = [decoder(deserializer) for _ in range(length)]
    return builder(items)
