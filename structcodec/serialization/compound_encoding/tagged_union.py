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
A tagged union holds exactly one of an ordered list of variants.

Layout: [index: u8][variant encoding]

The index is the zero-based position of the variant in the declared list, so there can be at most 256 variants.

>>> from structcodec.serialization.encoding.int import decode_int, encode_int
>>> from structcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
>>> enc_u32 = lambda se, v: encode_int(se, v, length=4, signed=False)
>>> dec_u32 = lambda de: decode_int(de, length=4, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_tagged_union(se, 1, 'Hello world', encode_utf8, variant_count=2)
>>> bytes(se.finalize()).hex()
'010000000b48656c6c6f20776f726c64'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010000000b48656c6c6f20776f726c64'))
>>> decode_tagged_union(de, (dec_u32, decode_utf8))
(1, 'Hello world')
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02'))
>>> try:
...     decode_tagged_union(de, (dec_u32, decode_utf8))
... except InvalidDiscriminantError as e:
...     print(*e.args)
invalid discriminant 2 for a union of 2 variants
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.consts import MAX_VARIANTS
from structcodec.serialization.exceptions import InvalidDiscriminantError

from . import Decoder, Encoder

T = TypeVar('T')


def check_variant_count(variant_count: int) -> None:
    if not 0 < variant_count <= MAX_VARIANTS:
        raise ValueError(f'a tagged union must have between 1 and {MAX_VARIANTS} variants, got {variant_count}')


def encode_tagged_union(
    serializer: Serializer,
    index: int,
    value: T,
    encoder: Encoder[T],
    *,
    variant_count: int,
) -> None:
    check_variant_count(variant_count)
    if not 0 <= index < variant_count:
        raise ValueError(f'variant index {index} out of range for a union of {variant_count} variants')
    serializer.write_byte(index)
    encoder(serializer, value)


def decode_tagged_union(deserializer: Deserializer, decoders: Sequence[Decoder[Any]]) -> tuple[int, Any]:
    """ Decode the discriminant and then the selected variant, returns `(index, value)`.
    """
    check_variant_count(len(decoders))
    index = deserializer.read_byte()
    if index >= len(decoders):
        raise InvalidDiscriminantError(f'invalid discriminant {index} for a union of {len(decoders)} variants')
    return index, decoders[index](deserializer)
