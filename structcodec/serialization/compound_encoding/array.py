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
A fixed-size array is N homogeneous values with no prefix, N is part of the type and known to both sides.

Layout: [value_0]...[value_N-1]

>>> from structcodec.serialization.encoding.int import decode_int, encode_int
>>> enc_u16 = lambda se, v: encode_int(se, v, length=2, signed=False)
>>> dec_u16 = lambda de: decode_int(de, length=2, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1, 2, 3], enc_u16, size=3)
>>> bytes(se.finalize()).hex()
'000100020003'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000100020003'))
>>> decode_array(de, dec_u16, size=3)
(1, 2, 3)
>>> de.finalize()

The number of values must match the size exactly:

>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1, 2], enc_u16, size=3)
Traceback (most recent call last):
...
ValueError: expected 3 values, got 2
"""

from collections.abc import Collection
from typing import TypeVar

from structcodec.serialization import Deserializer, Serializer

from . import Decoder, Encoder

T = TypeVar('T')


def encode_array(serializer: Serializer, values: Collection[T], encoder: Encoder[T], *, size: int) -> None:
    if len(values) != size:
        raise ValueError(f'expected {size} values, got {len(values)}')
    for value in values:
        encoder(serializer, value)


def decode_array(deserializer: Deserializer, decoder: Decoder[T], *, size: int) -> tuple[T, ...]:
    # the tuple only exists once every element was decoded, a failure midway discards the partial list
    items = [decoder(deserializer) for _ in range(size)]
    return tuple(items)
