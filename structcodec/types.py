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
Type annotations that carry the information a codec needs and plain Python types don't.

Python's `int` and `float` have no width, so fields must be annotated with one of the fixed-width types below. They
are `NewType`s, values are plain `int`/`float` at runtime:

>>> u16(513)
513
>>> Array[u8, 4]
structcodec.types.Array[structcodec.types.u8, 4]
>>> get_array_args(Array[u8, 4])
(structcodec.types.u8, 4)
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from types import GenericAlias
from typing import Any, NamedTuple, NewType

u8 = NewType('u8', int)
u16 = NewType('u16', int)
u32 = NewType('u32', int)
u64 = NewType('u64', int)
u128 = NewType('u128', int)

i8 = NewType('i8', int)
i16 = NewType('i16', int)
i32 = NewType('i32', int)
i64 = NewType('i64', int)
i128 = NewType('i128', int)

f32 = NewType('f32', float)
f64 = NewType('f64', float)


class Array:
    """ Fixed-size homogeneous array annotation, `Array[T, N]`.

    The size is part of the type so no count is encoded. Any sized iterable with exactly N items can be encoded and a
    `tuple` is what decoding produces. This class is only meant to be subscripted, it has no instances.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Array:
        raise TypeError('Array is an annotation, use a tuple or a list as the value')

    def __class_getitem__(cls, params: Any) -> GenericAlias:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError('Array[...] expects an item type and a size, e.g. Array[u8, 32]')
        item_type, size = params
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise TypeError(f'Array size must be a non-negative int, got {size!r}')
        return GenericAlias(cls, (item_type, size))


def get_array_args(type_: Any) -> tuple[Any, int]:
    """Returns `(item_type, size)` of an `Array[T, N]` annotation."""
    item_type, size = type_.__args__
    return item_type, size


class SocketAddress(NamedTuple):
    """An IP address (v4 or v6) and a port, like what `socket.getpeername()` returns."""
    ip: IPv4Address | IPv6Address
    port: int
