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

from enum import Enum
from typing import Any, TypeVar

from structlog import get_logger
from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.conf.get_settings import get_global_settings
from structcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from structcodec.serialization.compound_encoding.tagged_union import decode_tagged_union, encode_tagged_union
from structcodec.utils.typing import type_name

logger = get_logger()

E = TypeVar('E', bound=Enum)


def _encode_unit(serializer: Serializer, value: Any, /) -> None:
    pass


class EnumCodec(Codec[E]):
    """ Represents the members of an `Enum` class as a tagged union of unit variants.

    The discriminant is the position of the member in declaration order (aliases are not members), the member's value
    is irrelevant and never encoded.
    """

    __slots__ = ('_class', '_members', '_index', '_decoders')

    _class: type[E]
    _members: tuple[E, ...]
    _index: dict[E, int]

    def __init__(self, class_: type[E]) -> None:
        self._class = class_
        self._members = tuple(class_)
        self._index = {member: i for i, member in enumerate(self._members)}
        self._decoders = tuple((lambda _deserializer, member=member: member) for member in self._members)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        if not isinstance(type_, type) or not issubclass(type_, Enum):
            raise TypeError('expected Enum type')
        count = len(type_)
        if count == 0:
            raise UnsupportedTypeError(f'{type_name(type_)} has no members')
        max_variants = get_global_settings().MAX_UNION_VARIANTS
        if count > max_variants:
            raise UnsupportedTypeError(f'{type_name(type_)} has {count} members, at most {max_variants} are supported')
        logger.debug('codec derived', type=type_name(type_), shape='enum', variants=count)
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__qualname__} member')
        if value not in self._index:
            raise ValueError(f'{value!r} is not a declared member of {self._class.__qualname__}')

    @override
    def _serialize(self, serializer: Serializer, value: E, /) -> None:
        index = self._index[value]
        encode_tagged_union(serializer, index, value, _encode_unit, variant_count=len(self._members))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> E:
        _index, member = decode_tagged_union(deserializer, self._decoders)
        return member
