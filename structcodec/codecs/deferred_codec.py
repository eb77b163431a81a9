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

from typing import Any, TypeVar

from typing_extensions import override

from structcodec.codecs.codec import Codec
from structcodec.serialization import Deserializer, Serializer
from structcodec.utils.typing import type_name

T = TypeVar('T')


class DeferredCodec(Codec[T]):
    """ Stands for the codec of a class that was still being built when it was needed.

    It's what makes self-referential types possible, for example a tree node with a `list['Node']` field: the list codec
    gets a `DeferredCodec` for `Node`, which is bound to the real `Node` codec once it's complete.
    """

    __slots__ = ('_type', '_inner')

    _type: type
    _inner: Codec[T] | None

    def __init__(self, type_: type) -> None:
        self._type = type_
        self._inner = None

    def resolve(self, codec: Codec[T]) -> None:
        if self._inner is not None:
            raise RuntimeError(f'codec for {type_name(self._type)} was already resolved')
        self._inner = codec

    def _get_inner(self) -> Codec[T]:
        if self._inner is None:
            raise RuntimeError(f'codec for {type_name(self._type)} is not ready yet')
        return self._inner

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        self._get_inner()._check_value(value, deep=deep)

    @override
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        self._get_inner()._serialize(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        return self._get_inner()._deserialize(deserializer)

    def __repr__(self) -> str:
        return f'DeferredCodec({type_name(self._type)})'
