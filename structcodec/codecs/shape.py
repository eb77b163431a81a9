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
Classification of record-shaped classes.

A record is a class with a fixed, ordered list of typed fields. Three shapes are recognized:

- NAMED: dataclasses and `typing.NamedTuple` classes, fields keep their declared names and values are built with
  keyword arguments
- POSITIONAL: subclasses of a fixed tuple, like `class P(tuple[u32, str])`, fields get the synthetic names `f0, f1, ...`
  and values are built from the positional sequence of field values
- UNIT: any of the above with no fields at all, it encodes to nothing and is built with no arguments

>>> from dataclasses import dataclass
>>> from typing import NamedTuple
>>> from structcodec.types import u16, u32
>>> @dataclass
... class Named:
...     a: u32
...     b: u16
>>> class Pos(tuple[u32, u16]):
...     pass
>>> class Empty(NamedTuple):
...     pass
>>> shape, fields = get_record_fields(Named)
>>> shape, [field.name for field in fields]
(<RecordShape.NAMED: 'named'>, ['a', 'b'])
>>> shape, fields = get_record_fields(Pos)
>>> shape, [field.name for field in fields]
(<RecordShape.POSITIONAL: 'positional'>, ['f0', 'f1'])
>>> fields[1].type
structcodec.types.u16
>>> get_record_fields(Empty)
(<RecordShape.UNIT: 'unit'>, ())
"""

import dataclasses
import typing
from enum import Enum
from typing import Any, NamedTuple

from structcodec.serialization.exceptions import UnsupportedTypeError


class RecordShape(Enum):
    NAMED = 'named'
    POSITIONAL = 'positional'
    UNIT = 'unit'


class RecordField(NamedTuple):
    name: str
    type: Any


def _is_namedtuple_class(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, '_fields')


def _get_tuple_base_args(cls: type) -> tuple[Any, ...] | None:
    """Type arguments of the `tuple[...]` base of a tuple subclass, or `None` if it has no such base."""
    for base in getattr(cls, '__orig_bases__', ()):
        if typing.get_origin(base) is tuple:
            return typing.get_args(base)
    return None


def is_record_type(cls: type) -> bool:
    """ Whether a codec can be derived for `cls` from its fields.

    This is a quick check on the kind of class, the fields themselves are only inspected by `get_record_fields`.
    """
    if dataclasses.is_dataclass(cls):
        return True
    if not issubclass(cls, tuple):
        return False
    return _is_namedtuple_class(cls) or _get_tuple_base_args(cls) is not None


def _get_type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except NameError as e:
        raise UnsupportedTypeError(f'cannot resolve the annotations of {cls.__qualname__}: {e}') from e


def get_record_fields(cls: type) -> tuple[RecordShape, tuple[RecordField, ...]]:
    """ Returns the shape of a record class and its fields in declaration order.

    Raises `UnsupportedTypeError` if the class is not a record or if a field can't be described by its annotation.
    """
    fields: tuple[RecordField, ...]
    shape: RecordShape

    if dataclasses.is_dataclass(cls):
        hints = _get_type_hints(cls)
        dc_fields = dataclasses.fields(cls)
        for dc_field in dc_fields:
            if not dc_field.init:
                raise UnsupportedTypeError(f'{cls.__qualname__}.{dc_field.name} is not an __init__ argument')
        fields = tuple(RecordField(dc_field.name, hints[dc_field.name]) for dc_field in dc_fields)
        shape = RecordShape.NAMED
    elif _is_namedtuple_class(cls):
        hints = _get_type_hints(cls)
        missing = [name for name in cls._fields if name not in hints]  # type: ignore[attr-defined]
        if missing:
            raise UnsupportedTypeError(f'{cls.__qualname__} has fields without annotation: {", ".join(missing)}')
        fields = tuple(RecordField(name, hints[name]) for name in cls._fields)  # type: ignore[attr-defined]
        shape = RecordShape.NAMED
    elif (args := _get_tuple_base_args(cls)) is not None:
        if Ellipsis in args:
            raise UnsupportedTypeError(f'{cls.__qualname__} must subclass a fixed size tuple, not {args[0]}, ...')
        for arg in args:
            if isinstance(arg, (str, typing.ForwardRef)):
                raise UnsupportedTypeError(f'{cls.__qualname__} uses a forward reference in its tuple base: {arg!r}')
        fields = tuple(RecordField(f'f{i}', arg) for i, arg in enumerate(args))
        shape = RecordShape.POSITIONAL
    else:
        raise UnsupportedTypeError(f'{cls.__qualname__} is not a dataclass, a NamedTuple or a fixed tuple subclass')

    if not fields:
        shape = RecordShape.UNIT
    return shape, fields
