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

from collections.abc import Iterable
from typing import Any, get_args, get_origin

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.conf.get_settings import get_global_settings
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.compound_encoding.collection import decode_collection, encode_collection
from structcodec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple


class TupleCodec(Codec[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    `tuple[T, ...]` is a sequence, it has a count prefix exactly like `list[T]`. `tuple[A, B, C]` is an anonymous
    positional record, the concatenation of its items with no prefix, and `tuple[()]` encodes to nothing.
    """

    __slots__ = ('_varsize', '_args', '_max_length')

    _varsize: bool
    _args: tuple[Codec, ...]
    _max_length: int | None

    def __init__(self, args: Codec | Iterable[Codec], /, max_length: int | None = None) -> None:
        if isinstance(args, Codec):
            self._varsize = True
            self._args = (args,)
        else:
            self._varsize = False
            self._args = tuple(args)
        self._max_length = max_length

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if origin_type is not tuple:
            raise TypeError('expected tuple type')
        if get_origin(type_) is None:
            raise TypeError('expected tuple[<args...>] or tuple[<type>, ...]')
        args = get_args(type_)
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise TypeError('ellipsis only allowed with one type: tuple[T, ...]')
            settings = get_global_settings()
            return cls(Codec.from_type(args[0], type_map=type_map), max_length=settings.MAX_SEQUENCE_LENGTH)
        return cls(Codec.from_type(arg, type_map=type_map) for arg in args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, list)):
            raise TypeError('expected tuple-like')
        if self._varsize:
            if deep:
                item_codec, = self._args
                for item in value:
                    item_codec._check_value(item, deep=True)
        else:
            if len(value) != len(self._args):
                raise TypeError(f'expected a tuple of {len(self._args)} items, got {len(value)}')
            if deep:
                for item, item_codec in zip(value, self._args):
                    item_codec._check_value(item, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        if self._varsize:
            item_codec, = self._args
            encode_collection(serializer, value, item_codec.serialize, max_length=self._max_length)
        else:
            encode_tuple(serializer, tuple(value), tuple(item_codec.serialize for item_codec in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple:
        if self._varsize:
            item_codec, = self._args
            return decode_collection(deserializer, item_codec.deserialize, tuple, max_length=self._max_length)
        return decode_tuple(deserializer, tuple(item_codec.deserialize for item_codec in self._args))
