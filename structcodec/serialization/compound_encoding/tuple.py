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
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module implements the first case, the second is a collection. The encoding of `tuple[A, B, C]` is the encoding
of A concatenated with B concatenated with C, with no delimiter, which is also exactly how the body of a record is
encoded.

>>> from structcodec.serialization.encoding.int import decode_int, encode_int
>>> from structcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
>>> enc_u32 = lambda se, v: encode_int(se, v, length=4, signed=False)
>>> dec_u32 = lambda de: decode_int(de, length=4, signed=False)
>>> enc_u16 = lambda se, v: encode_int(se, v, length=2, signed=False)
>>> dec_u16 = lambda de: decode_int(de, length=2, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, (0x12345678, 0x9abc, 'Hello world'), (enc_u32, enc_u16, encode_utf8))
>>> data = bytes(se.finalize())
>>> data.hex()
'123456789abc0000000b48656c6c6f20776f726c64'
>>> len(data)
21

>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_tuple(de, (dec_u32, dec_u16, decode_utf8))
(305419896, 39612, 'Hello world')
>>> de.cur_pos()
21
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from structcodec.serialization import Deserializer, Serializer

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(serializer: Serializer, values: tuple[Unpack[Ts]], encoders: tuple[Encoder[Any], ...]) -> None:
    if len(values) != len(encoders):
        raise ValueError(f'expected {len(encoders)} values, got {len(values)}')
    for value, encoder in zip(values, encoders):  # type: ignore
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Unpack[Ts]]:
    return tuple(decoder(deserializer) for decoder in decoders)
