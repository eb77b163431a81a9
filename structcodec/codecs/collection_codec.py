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

from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable
from typing import Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.conf.get_settings import get_global_settings
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.compound_encoding.collection import decode_collection, encode_collection

T = TypeVar('T')


class _CollectionCodec(Codec[Collection[T]], ABC):
    """ Used as base for codecs of variable size homogeneous collections, encoded with a 4-byte count prefix.
    """

    __slots__ = ('_item', '_max_length')

    _item: Codec[T]
    _max_length: int

    def __init__(self, item_codec: Codec[T], /, max_length: int) -> None:
        self._item = item_codec
        self._max_length = max_length

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from the decoded items.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        member_type = cls._get_member_type(type_)
        member_codec = Codec.from_type(member_type, type_map=type_map)
        settings = get_global_settings()
        return cls(member_codec, max_length=settings.MAX_SEQUENCE_LENGTH)

    @classmethod
    def _get_member_type(cls, type_: Any) -> Any:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, Collection):
            raise TypeError('expected Collection type')
        args = get_args(type_)
        if not args or len(args) != 1:
            raise TypeError(f'expected {origin_type.__name__}[<type>]')
        return args[0]

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes)):
            raise TypeError('expected a collection')
        if deep:
            for item in value:
                self._item._check_value(item, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Collection[T], /) -> None:
        encode_collection(serializer, value, self._item.serialize, max_length=self._max_length)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Collection[T]:
        return decode_collection(deserializer, self._item.deserialize, self._build, max_length=self._max_length)


class ListCodec(_CollectionCodec[T]):
    """ Represents builtin `list` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, list):
            raise TypeError('expected list')
        super()._check_value(value, deep=deep)
