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

from __future__ import annotations

from typing import Any, ClassVar

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.encoding.int import decode_int, encode_int, int_bounds
from structcodec.types import i8, i16, i32, i64, i128, u8, u16, u32, u64, u128


class _SizedIntCodec(Codec[int]):
    """ Base class for codecs of `int` values with a fixed size and signedness.
    """

    # XXX: subclass must define these values:
    _type: ClassVar[Any]
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not cls._type:
            raise TypeError(f'expected {cls._type.__name__} type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # bool is an int subclass, but True/False are not meant to be numbers here
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'expected integer, got {type(value).__name__}')
        lower_bound, upper_bound = int_bounds(self._byte_size, self._signed)
        if value > upper_bound:
            raise ValueError(f'{value} is above the upper bound of {self._type.__name__}')
        if value < lower_bound:
            raise ValueError(f'{value} is below the lower bound of {self._type.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class U8Codec(_SizedIntCodec):
    _type = u8
    _signed = False
    _byte_size = 1


class U16Codec(_SizedIntCodec):
    _type = u16
    _signed = False
    _byte_size = 2


class U32Codec(_SizedIntCodec):
    _type = u32
    _signed = False
    _byte_size = 4


class U64Codec(_SizedIntCodec):
    _type = u64
    _signed = False
    _byte_size = 8


class U128Codec(_SizedIntCodec):
    _type = u128
    _signed = False
    _byte_size = 16


class I8Codec(_SizedIntCodec):
    _type = i8
    _signed = True
    _byte_size = 1


class I16Codec(_SizedIntCodec):
    _type = i16
    _signed = True
    _byte_size = 2


class I32Codec(_SizedIntCodec):
    _type = i32
    _signed = True
    _byte_size = 4


class I64Codec(_SizedIntCodec):
    _type = i64
    _signed = True
    _byte_size = 8


class I128Codec(_SizedIntCodec):
    _type = i128
    _signed = True
    _byte_size = 16
