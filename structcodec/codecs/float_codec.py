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

import math
import struct
from typing import Any, ClassVar

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.encoding.float import decode_float, encode_float
from structcodec.types import f32, f64


class _FloatCodec(Codec[float]):
    """ Base class for IEEE-754 float codecs.

    Only values that survive the conversion to the target width unchanged are accepted, a `f32` field can't hold
    `0.1` because it would decode as `0.10000000149011612`.
    """

    # XXX: subclass must define these values:
    _type: ClassVar[Any]
    _byte_size: ClassVar[int]
    _format: ClassVar[str]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not cls._type:
            raise TypeError(f'expected {cls._type.__name__} type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError(f'expected float, got {type(value).__name__}')
        if math.isnan(value):
            return
        try:
            packed, = struct.unpack(self._format, struct.pack(self._format, value))
        except OverflowError:
            raise ValueError(f'{value!r} is out of range for {self._type.__name__}')
        if packed != value:
            raise ValueError(f'{value!r} is not exactly representable as {self._type.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> None:
        encode_float(serializer, value, length=self._byte_size)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> float:
        return decode_float(deserializer, length=self._byte_size)


class F32Codec(_FloatCodec):
    _type = f32
    _byte_size = 4
    _format = '>f'


class F64Codec(_FloatCodec):
    _type = f64
    _byte_size = 8
    _format = '>d'
