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

from collections.abc import Hashable, Mapping
from enum import Enum
from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, Optional, TypeAlias, TypeVar, Union, get_args, get_origin

from structlog import get_logger

from structcodec.codecs.shape import is_record_type
from structcodec.serialization.exceptions import UnsupportedTypeError
from structcodec.utils.typing import is_newtype, type_name

if TYPE_CHECKING:
    from structcodec.codecs.codec import Codec


logger = get_logger()

T = TypeVar('T')
TypeAliasMap: TypeAlias = Mapping[Any, Any]
TypeToCodecMap: TypeAlias = Mapping[Any, type['Codec']]


class Record:
    """ Key used in a type map for every record-shaped class: dataclasses, NamedTuples and fixed tuple subclasses.

    It is never instantiated, a record class is recognized by its shape, not by inheriting from this.
    """


def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    For example, `float` is mapped to `f64` in the default alias map, unions (including `typing.Optional`) are rebuilt
    with `|` from their aliased members:

    >>> from typing import Optional, get_args
    >>> from structcodec.codecs import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(tuple[float, str], alias_map, _verbose=False)
    tuple[structcodec.types.f64, str]
    >>> aliased = get_aliased_type(Optional[float], alias_map, _verbose=False)
    >>> sorted(map(str, get_args(aliased)))
    ["<class 'NoneType'>", 'structcodec.types.f64']
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=type_name(type_), new=type_name(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    replaced = False

    if origin_type is Union:
        aliased_origin = UnionType
    elif isinstance(origin_type, Hashable) and origin_type in alias_map:
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    if not hasattr(type_, '__args__'):
        return aliased_origin, replaced

    type_args = get_args(type_)
    if not type_args:
        # tuple[()] has no args, but it's still different from a bare tuple
        return (aliased_origin if replaced else type_), replaced

    aliased_args: list[Any] = []
    for arg in type_args:
        aliased_arg, arg_replaced = _get_aliased_type(arg, alias_map)
        aliased_args.append(aliased_arg)
        replaced |= arg_replaced

    if aliased_origin is UnionType:
        # UnionType can't be instantiated directly, `|` builds it
        return reduce(or_, aliased_args), replaced

    if not hasattr(aliased_origin, '__class_getitem__'):
        raise UnsupportedTypeError(f'type {type_name(type_)} cannot be parametrized')
    return aliased_origin[tuple(aliased_args)], replaced


def unwrap_newtype(type_: Any, codecs_map: TypeToCodecMap) -> Any:
    """ Follow a NewType chain until a type that is in the map (or not a NewType) is found.

    >>> from typing import NewType
    >>> from structcodec.types import u16
    >>> from structcodec.codecs import DEFAULT_TYPE_TO_CODEC_MAP as codecs_map
    >>> Port = NewType('Port', u16)
    >>> unwrap_newtype(Port, codecs_map)
    structcodec.types.u16
    """
    while is_newtype(type_) and type_ not in codecs_map:
        type_ = type_.__supertype__
    return type_


def get_usable_origin_type(type_: Any, /, *, type_map: 'Codec.TypeMap') -> Any:
    """ Map an (already aliased) type into the key of the codec class that handles it in the given `type_map`.

    Exact entries in the map have priority, then unions, enums and record-shaped classes use their marker keys:

    >>> from dataclasses import dataclass
    >>> from structcodec.codecs import DEFAULT_TYPE_MAP as type_map
    >>> from structcodec.types import u8
    >>> get_usable_origin_type(u8, type_map=type_map)
    structcodec.types.u8
    >>> get_usable_origin_type(list[u8], type_map=type_map)
    <class 'list'>
    >>> get_usable_origin_type(u8 | None, type_map=type_map)
    typing.Optional
    >>> @dataclass
    ... class Point:
    ...     x: u8
    ...     y: u8
    >>> get_usable_origin_type(Point, type_map=type_map)
    <class 'structcodec.codecs.utils.Record'>

    Types without a derivable shape are refused:

    >>> get_usable_origin_type(int, type_map=type_map)
    Traceback (most recent call last):
    ...
    structcodec.serialization.exceptions.UnsupportedTypeError: int has no fixed width, use one of u8..u128 or i8..i128
    """
    if isinstance(type_, str):
        raise UnsupportedTypeError(f'unresolved string annotation {type_!r}')

    codecs_map = type_map.codecs_map
    origin_type = get_origin(type_) or type_

    if origin_type is UnionType or origin_type is Union:
        args = get_args(type_)
        if NoneType in args:
            return Optional
        return UnionType

    if isinstance(origin_type, Hashable) and origin_type in codecs_map:
        return origin_type

    if isinstance(origin_type, type):
        if issubclass(origin_type, Enum) and Enum in codecs_map:
            return Enum
        if Record in codecs_map and is_record_type(origin_type):
            return Record

    if origin_type is int:
        raise UnsupportedTypeError('int has no fixed width, use one of u8..u128 or i8..i128')
    raise UnsupportedTypeError(f'type {type_name(type_)} is not supported by any codec')
