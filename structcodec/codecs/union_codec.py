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

"""
Codecs for tagged unions of classes, `A | B | C`.

The discriminant is a single byte holding the zero-based position of the variant in the declared union, followed by
the variant's own encoding:

>>> from dataclasses import dataclass
>>> from typing import NamedTuple
>>> from structcodec.codecs import make_codec
>>> from structcodec.types import u16, u32
>>> class A(tuple[u32]):
...     pass
>>> class B(tuple[u16]):
...     pass
>>> class C(tuple[str]):
...     pass
>>> @dataclass
... class D:
...     pass
>>> class E(NamedTuple):
...     x: u16
...     y: u16
>>> codec = make_codec(A | B | C | D | E)
>>> data = codec.encode(C(('Hello world',)))
>>> data.hex(' ')
'02 00 00 00 0b 48 65 6c 6c 6f 20 77 6f 72 6c 64'
>>> codec.decode(data)
(('Hello world',), 16)
>>> codec.encode(D())
b'\\x03'
"""

from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin

from structlog import get_logger
from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.conf.get_settings import get_global_settings
from structcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from structcodec.serialization.compound_encoding.tagged_union import decode_tagged_union, encode_tagged_union
from structcodec.utils.typing import type_name

logger = get_logger()


class UnionCodec(Codec[Any]):
    """ Represents a value that is an instance of exactly one of the union's classes.

    The variant of a value is found by its exact class first, then with `isinstance` in declaration order, so a
    subclass instance is encoded as the first variant it is an instance of.
    """

    __slots__ = ('_variants', '_codecs', '_index', '_decoders')

    _variants: tuple[type, ...]
    _codecs: tuple[Codec, ...]
    _index: dict[type, int]

    def __init__(self, variants: dict[type, Codec]) -> None:
        self._variants = tuple(variants)
        self._codecs = tuple(variants.values())
        self._index = {variant: i for i, variant in enumerate(self._variants)}
        self._decoders = tuple(codec.deserialize for codec in self._codecs)

    @property
    def variants(self) -> tuple[type, ...]:
        return self._variants

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        if get_origin(type_) not in (UnionType, Union):
            raise TypeError('expected type union')
        args = get_args(type_)
        if NoneType in args:
            raise TypeError('an union with None is an optional')
        for arg in args:
            if not isinstance(arg, type):
                raise UnsupportedTypeError(f'union variants must be classes, got {type_name(arg)}')
        max_variants = get_global_settings().MAX_UNION_VARIANTS
        if len(args) > max_variants:
            raise UnsupportedTypeError(f'an union can have at most {max_variants} variants, got {len(args)}')
        variants = {arg: Codec.from_type(arg, type_map=type_map) for arg in args}
        logger.debug('codec derived', type=type_name(type_), shape='union', variants=len(variants))
        return cls(variants)

    def _variant_index(self, value: Any) -> int:
        index = self._index.get(type(value))
        if index is not None:
            return index
        for i, variant in enumerate(self._variants):
            if isinstance(value, variant):
                return i
        raise TypeError(f'{type(value).__name__} is not a variant of this union')

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        index = self._variant_index(value)
        if deep:
            self._codecs[index]._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        index = self._variant_index(value)
        encode_tagged_union(serializer, index, value, self._codecs[index].serialize, variant_count=len(self._codecs))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Any:
        _index, value = decode_tagged_union(deserializer, self._decoders)
        return value
