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

from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import Any, TypeVar, Union, get_args, get_origin

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.compound_encoding.optional import decode_optional, encode_optional

V = TypeVar('V')


class OptionalCodec(Codec[V | None]):
    """ Represents a value that is either `V` or `None`.

    When the union has more than one non-None member, `V` is the union of those, so `A | B | None` is an optional tagged
    union.
    """

    __slots__ = ('_value',)

    _value: Codec[V]

    def __init__(self, codec: Codec[V]) -> None:
        self._value = codec

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        if get_origin(type_) not in (UnionType, Union):
            raise TypeError('expected type union')
        args = get_args(type_)
        if NoneType not in args:
            raise TypeError('type must include None')
        not_none_args = [arg for arg in args if arg is not NoneType]
        not_none_type = reduce(or_, not_none_args)
        return cls(Codec.from_type(not_none_type, type_map=type_map))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> V | None:
        return decode_optional(deserializer, self._value.deserialize)
