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
Codecs derived from the declared shape of a record class.

The encoding of a record is the concatenation of the encodings of its fields in declaration order, with no tag, no
count and no delimiter. Field names never reach the wire, so a named record and a positional record with the same
field types encode to the same bytes:

>>> from dataclasses import dataclass
>>> from structcodec.codecs import make_codec
>>> from structcodec.types import u16, u32
>>> @dataclass
... class Named:
...     a: u32
...     b: u16
...     c: str
>>> class Positional(tuple[u32, u16, str]):
...     pass
>>> named_codec = make_codec(Named)
>>> data = named_codec.encode(Named(0x12345678, 0x9abc, 'Hello world'))
>>> data.hex(' ')
'12 34 56 78 9a bc 00 00 00 0b 48 65 6c 6c 6f 20 77 6f 72 6c 64'
>>> make_codec(Positional).encode(Positional((0x12345678, 0x9abc, 'Hello world'))) == data
True
>>> named_codec.decode(data + b'trailing')
(Named(a=305419896, b=39612, c='Hello world'), 21)
"""

from typing import Any, TypeVar

from structlog import get_logger
from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.codecs.shape import RecordShape, get_record_fields
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from structcodec.utils.typing import type_name

logger = get_logger()

R = TypeVar('R')


class RecordCodec(Codec[R]):
    """ Represents instances of a record class: a dataclass, a NamedTuple or a fixed tuple subclass.
    """

    __slots__ = ('_class', '_shape', '_fields')

    _class: type[R]
    _shape: RecordShape
    # XXX: the order is important, it's the declaration order
    _fields: dict[str, Codec]

    def __init__(self, class_: type[R], shape: RecordShape, fields: dict[str, Codec]) -> None:
        if shape is RecordShape.UNIT and fields:
            raise ValueError('a unit record has no fields')
        self._class = class_
        self._shape = shape
        self._fields = fields

    @property
    def shape(self) -> RecordShape:
        return self._shape

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Codec.TypeMap) -> Self:
        if not isinstance(type_, type):
            raise TypeError('expected a class')
        shape, record_fields = get_record_fields(type_)
        fields: dict[str, Codec] = {}
        for record_field in record_fields:
            fields[record_field.name] = Codec.from_type(record_field.type, type_map=type_map)
        logger.debug('codec derived', type=type_name(type_), shape=shape.value, fields=len(fields))
        return cls(type_, shape, fields)

    def _get_values(self, value: R) -> tuple[Any, ...]:
        match self._shape:
            case RecordShape.NAMED:
                return tuple(getattr(value, name) for name in self._fields)
            case RecordShape.POSITIONAL:
                return tuple(value)  # type: ignore[call-overload]
            case RecordShape.UNIT:
                return ()
        raise NotImplementedError(self._shape)

    def _build(self, values: tuple[Any, ...]) -> R:
        match self._shape:
            case RecordShape.NAMED:
                return self._class(**dict(zip(self._fields, values)))
            case RecordShape.POSITIONAL:
                return self._class(values)  # type: ignore[call-arg]
            case RecordShape.UNIT:
                return self._class()
        raise NotImplementedError(self._shape)

    @override
    def _check_value(self, value: R, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__qualname__} instance, got {type(value).__name__}')
        if self._shape is RecordShape.POSITIONAL and len(value) != len(self._fields):  # type: ignore[arg-type]
            raise TypeError(f'expected {len(self._fields)} items, got {len(value)}')  # type: ignore[arg-type]
        if deep:
            for field_value, field_codec in zip(self._get_values(value), self._fields.values()):
                field_codec._check_value(field_value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: R, /) -> None:
        encode_tuple(serializer, self._get_values(value), tuple(codec.serialize for codec in self._fields.values()))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> R:
        values = decode_tuple(deserializer, tuple(codec.deserialize for codec in self._fields.values()))
        return self._build(values)
