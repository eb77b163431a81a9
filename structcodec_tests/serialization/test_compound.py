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

import pytest

from structcodec.serialization import Deserializer, InvalidDiscriminantError, OutOfDataError, Serializer
from structcodec.serialization.compound_encoding.array import decode_array, encode_array
from structcodec.serialization.compound_encoding.collection import decode_collection, encode_collection
from structcodec.serialization.compound_encoding.optional import decode_optional, encode_optional
from structcodec.serialization.compound_encoding.tagged_union import (
    check_variant_count,
    decode_tagged_union,
    encode_tagged_union,
)
from structcodec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from structcodec.serialization.encoding.bool import decode_bool, encode_bool
from structcodec.serialization.encoding.int import decode_int, encode_int
from structcodec.serialization.exceptions import TooLongError


def enc_u8(se: Serializer, v: int) -> None:
    encode_int(se, v, length=1, signed=False)


def dec_u8(de: Deserializer) -> int:
    return decode_int(de, length=1, signed=False)


def test_collection_count_prefix() -> None:
    se = Serializer.build_bytes_serializer()
    encode_collection(se, [], enc_u8)
    encode_collection(se, [7, 8], enc_u8)
    data = bytes(se.finalize())
    assert data.hex() == '00000000' + '000000020708'

    de = Deserializer.build_bytes_deserializer(data)
    assert decode_collection(de, dec_u8, list) == []
    assert decode_collection(de, dec_u8, list) == [7, 8]
    de.finalize()


def test_collection_max_length() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(TooLongError):
        encode_collection(se, [1, 2, 3], enc_u8, max_length=2)
    # nothing is written when the count is refused
    assert se.cur_pos() == 0

    de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000003010203'))
    with pytest.raises(TooLongError):
        decode_collection(de, dec_u8, list, max_length=2)


def test_collection_inner_error_propagates() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000020102'))
    with pytest.raises(ValueError):
        decode_collection(de, decode_bool, list)


def test_array_has_no_prefix() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, (1, 2, 3, 4), enc_u8, size=4)
    data = bytes(se.finalize())
    assert data == b'\x01\x02\x03\x04'
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_array(de, dec_u8, size=4) == (1, 2, 3, 4)


def test_array_truncated() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    with pytest.raises(OutOfDataError):
        decode_array(de, dec_u8, size=3)


def test_empty_array() -> None:
    se = Serializer.build_bytes_serializer()
    encode_array(se, [], enc_u8, size=0)
    assert bytes(se.finalize()) == b''


def test_tuple_concatenation() -> None:
    se = Serializer.build_bytes_serializer()
    encode_tuple(se, (True, 5), (encode_bool, enc_u8))
    data = bytes(se.finalize())
    assert data == b'\x01\x05'
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_tuple(de, (decode_bool, dec_u8)) == (True, 5)


def test_tuple_wrong_arity() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_tuple(se, (1, 2), (enc_u8,))


def test_optional() -> None:
    se = Serializer.build_bytes_serializer()
    encode_optional(se, None, enc_u8)
    encode_optional(se, 0, enc_u8)
    data = bytes(se.finalize())
    assert data == b'\x00\x01\x00'
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_optional(de, dec_u8) is None
    assert decode_optional(de, dec_u8) == 0


def test_tagged_union() -> None:
    se = Serializer.build_bytes_serializer()
    encode_tagged_union(se, 0, 9, enc_u8, variant_count=2)
    encode_tagged_union(se, 1, False, encode_bool, variant_count=2)
    data = bytes(se.finalize())
    assert data == b'\x00\x09\x01\x00'
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_tagged_union(de, (dec_u8, decode_bool)) == (0, 9)
    assert decode_tagged_union(de, (dec_u8, decode_bool)) == (1, False)


def test_tagged_union_bounds() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_tagged_union(se, 2, 0, enc_u8, variant_count=2)
    check_variant_count(256)
    with pytest.raises(ValueError):
        check_variant_count(257)
    with pytest.raises(ValueError):
        check_variant_count(0)
    de = Deserializer.build_bytes_deserializer(b'\xff\x00')
    with pytest.raises(InvalidDiscriminantError):
        decode_tagged_union(de, (dec_u8,))
