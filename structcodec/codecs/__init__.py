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

from datetime import datetime
from enum import Enum
from functools import lru_cache
from types import UnionType
from typing import Any, Optional

from structcodec.codecs.array_codec import ArrayCodec
from structcodec.codecs.bool_codec import BoolCodec
from structcodec.codecs.bytes_codec import BytesCodec
from structcodec.codecs.codec import Codec
from structcodec.codecs.collection_codec import ListCodec
from structcodec.codecs.deferred_codec import DeferredCodec
from structcodec.codecs.enum_codec import EnumCodec
from structcodec.codecs.float_codec import F32Codec, F64Codec
from structcodec.codecs.optional_codec import OptionalCodec
from structcodec.codecs.record_codec import RecordCodec
from structcodec.codecs.shape import RecordShape
from structcodec.codecs.sized_int_codec import (
    I8Codec,
    I16Codec,
    I32Codec,
    I64Codec,
    I128Codec,
    U8Codec,
    U16Codec,
    U32Codec,
    U64Codec,
    U128Codec,
)
from structcodec.codecs.socket_address_codec import SocketAddressCodec
from structcodec.codecs.str_codec import StrCodec
from structcodec.codecs.timestamp_codec import TimestampCodec
from structcodec.codecs.tuple_codec import TupleCodec
from structcodec.codecs.union_codec import UnionCodec
from structcodec.codecs.utils import Record, TypeAliasMap, TypeToCodecMap
from structcodec.types import Array, SocketAddress, f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_CODEC_MAP',
    'ArrayCodec',
    'BoolCodec',
    'BytesCodec',
    'Codec',
    'DeferredCodec',
    'EnumCodec',
    'F32Codec',
    'F64Codec',
    'I8Codec',
    'I16Codec',
    'I32Codec',
    'I64Codec',
    'I128Codec',
    'ListCodec',
    'OptionalCodec',
    'Record',
    'RecordCodec',
    'RecordShape',
    'SocketAddressCodec',
    'StrCodec',
    'TimestampCodec',
    'TupleCodec',
    'TypeAliasMap',
    'TypeToCodecMap',
    'U8Codec',
    'U16Codec',
    'U32Codec',
    'U64Codec',
    'U128Codec',
    'UnionCodec',
    'make_codec',
]

DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    # a Python float is a binary64
    float: f64,
}

DEFAULT_TYPE_TO_CODEC_MAP: TypeToCodecMap = {
    # builtin types:
    bool: BoolCodec,
    bytes: BytesCodec,
    str: StrCodec,
    list: ListCodec,
    tuple: TupleCodec,
    # fixed width numbers:
    u8: U8Codec,
    u16: U16Codec,
    u32: U32Codec,
    u64: U64Codec,
    u128: U128Codec,
    i8: I8Codec,
    i16: I16Codec,
    i32: I32Codec,
    i64: I64Codec,
    i128: I128Codec,
    f32: F32Codec,
    f64: F64Codec,
    # other Python types:
    datetime: TimestampCodec,
    SocketAddress: SocketAddressCodec,
    Array: ArrayCodec,
    # XXX: these are marker keys, the actual type is recognized by its shape
    Optional: OptionalCodec,
    UnionType: UnionCodec,
    Enum: EnumCodec,
    Record: RecordCodec,
}

DEFAULT_TYPE_MAP = Codec.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_CODEC_MAP)


@lru_cache(maxsize=None)
def make_codec(type_: Any, /) -> Codec[Any]:
    """ Like Codec.from_type, but with the default maps and cached per type.

    If you need to customize the mapping use `Codec.from_type` instead.

    >>> from structcodec.types import u16
    >>> codec = make_codec(list[u16])
    >>> codec.encode([1, 2])
    b'\\x00\\x00\\x00\\x02\\x00\\x01\\x00\\x02'
    >>> codec is make_codec(list[u16])
    True
    """
    return Codec.from_type(type_, type_map=DEFAULT_TYPE_MAP)
