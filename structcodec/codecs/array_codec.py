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

from collections.abc import Collection
from typing import Any, TypeVar, get_origin

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.compound_encoding.array import decode_array, encode_array
from structcodec.types import Array, get_array_args

T = TypeVar('T')


class ArrayCodec(Codec[tuple[T, ...]]):
    """ Represents `Array[T, N]` values, exactly N items and no count prefix.

    Any sized collection of N items (a list, a tuple) can be encoded, decoding produces a tuple.
    """

    __slots__ = ('_item', '_size')

    _item: Codec[T]
    _size: int

    def __init__(self, item_codec: Codec[T], size: int) -> None:
        self._item = item_codec
        self._size = size

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        if get_origin(type_) is not Array:
            raise TypeError('expected Array[<type>, <size>]')
        item_type, size = get_array_args(type_)
        return cls(Codec.from_type(item_type, type_map=type_map), size)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes)):
            raise TypeError('expected a collection')
        if len(value) != self._size:
            raise ValueError(f'expected {self._size} items, got {len(value)}')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Collection[T], /) -> None:
        encode_array(serializer, value, self._item.serialize, size=self._size)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple[T, ...]:
        return decode_array(deserializer, self._item.deserialize, size=self._size)
