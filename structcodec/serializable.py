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
The `@serializable` class decorator, it derives a codec for a record or enum class from its declared shape and gives
the class the capability methods:

- `value.encode() -> bytes`
- `Class.decode(window) -> (value, bytes_consumed)`, trailing bytes are ignored
- `Class.try_decode(window) -> Ok((value, bytes_consumed)) | Err(SerializationError)`
- `value.to_bytes() -> bytes` and `Class.from_bytes(data) -> value`, which rejects trailing bytes

>>> from dataclasses import dataclass
>>> from structcodec.types import u8
>>> @serializable
... @dataclass(frozen=True)
... class Pixel:
...     r: u8
...     g: u8
...     b: u8
>>> Pixel(255, 128, 0).encode()
b'\\xff\\x80\\x00'
>>> Pixel.decode(b'\\xff\\x80\\x00\\x01')
(Pixel(r=255, g=128, b=0), 3)

Derivation happens when the class is decorated, so a field that has no codec fails right away:

>>> @serializable
... @dataclass
... class Bad:
...     count: int
Traceback (most recent call last):
...
structcodec.serialization.exceptions.UnsupportedTypeError: int has no fixed width, use one of u8..u128 or i8..i128

Classes that refer to themselves (or to classes defined after them) can't be resolved while they're being defined,
`lazy=True` postpones the derivation to the first use.
"""

import inspect
from enum import Enum
from typing import Any, Callable, TypeVar, overload

from structcodec.codecs import Codec, make_codec
from structcodec.codecs.shape import is_record_type
from structcodec.serialization import SerializationError, UnsupportedTypeError
from structcodec.serialization.types import Buffer
from structcodec.utils.result import Result

C = TypeVar('C', bound=type)

_CAPABILITY_METHODS = ('encode', 'decode', 'try_decode', 'to_bytes', 'from_bytes')
_DERIVED_MARKER = '__structcodec_derived__'


def _derive(cls: type) -> Codec[Any]:
    try:
        return make_codec(cls)
    except UnsupportedTypeError as e:
        if isinstance(e.__cause__, NameError):
            raise UnsupportedTypeError(f'{e}, use @serializable(lazy=True) for forward references') from e
        raise


def _is_derived_method(attr: Any) -> bool:
    return getattr(getattr(attr, '__func__', attr), _DERIVED_MARKER, False)


def _attach(cls: C) -> C:
    if not isinstance(cls, type):
        raise TypeError('@serializable can only decorate classes')
    if not (issubclass(cls, Enum) or is_record_type(cls)):
        raise UnsupportedTypeError(
            f'{cls.__qualname__} is not a dataclass, a NamedTuple, a fixed tuple subclass or an Enum'
        )
    for name in _CAPABILITY_METHODS:
        # capability methods inherited from a decorated base may be replaced
        attr = inspect.getattr_static(cls, name, None)
        if attr is not None and not _is_derived_method(attr):
            raise UnsupportedTypeError(f'{cls.__qualname__} already has a `{name}` attribute')

    def encode(self: Any) -> bytes:
        return make_codec(type(self)).encode(self)

    def decode(klass: type, data: Buffer, /) -> tuple[Any, int]:
        return make_codec(klass).decode(data)

    def try_decode(klass: type, data: Buffer, /) -> Result[tuple[Any, int], SerializationError]:
        return make_codec(klass).try_decode(data)

    def to_bytes(self: Any) -> bytes:
        return make_codec(type(self)).to_bytes(self)

    def from_bytes(klass: type, data: Buffer, /) -> Any:
        return make_codec(klass).from_bytes(data)

    for method in (encode, decode, try_decode, to_bytes, from_bytes):
        setattr(method, _DERIVED_MARKER, True)

    setattr(cls, 'encode', encode)
    setattr(cls, 'decode', classmethod(decode))
    setattr(cls, 'try_decode', classmethod(try_decode))
    setattr(cls, 'to_bytes', to_bytes)
    setattr(cls, 'from_bytes', classmethod(from_bytes))
    return cls


@overload
def serializable(cls: C, /) -> C:
    ...


@overload
def serializable(*, lazy: bool = False) -> Callable[[C], C]:
    ...


def serializable(cls: C | None = None, /, *, lazy: bool = False) -> C | Callable[[C], C]:
    """ Class decorator that derives the codec of a record or enum class and attaches the capability methods.

    Use it bare (`@serializable`) or with arguments (`@serializable(lazy=True)`).
    """
    def wrap(cls: C) -> C:
        _attach(cls)
        if not lazy:
            _derive(cls)
        return cls

    if cls is None:
        return wrap
    return wrap(cls)
