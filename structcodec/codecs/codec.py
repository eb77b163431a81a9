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
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Generic, NamedTuple, TypeVar, final

from structlog import get_logger
from typing_extensions import Self

from structcodec.codecs.utils import (
    TypeAliasMap,
    TypeToCodecMap,
    get_aliased_type,
    get_usable_origin_type,
    unwrap_newtype,
)
from structcodec.serialization import Deserializer, SerializationError, Serializer, UnsupportedTypeError
from structcodec.serialization.types import Buffer
from structcodec.utils.result import as_result
from structcodec.utils.typing import type_name

if TYPE_CHECKING:
    from structcodec.codecs.deferred_codec import DeferredCodec

logger = get_logger()

T = TypeVar('T')

# classes whose codec is being built in the current context, with the placeholders handed out for them meanwhile
_in_progress: ContextVar[dict[type, list[DeferredCodec]] | None] = ContextVar('_in_progress', default=None)


class Codec(ABC, Generic[T]):
    """ Knows how to turn values of one type signature into bytes and back.

    A codec is built from a type annotation with `Codec.from_type`, compound codecs hold the codecs of their inner
    types, so a single instance covers the whole structure. Instances are immutable after they're built and can be
    shared freely.

    The capability pair is `encode(value) -> bytes` and `decode(window) -> (value, bytes_consumed)`, `decode` only
    interprets a prefix of the window and ignores whatever comes after it.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        codecs_map: TypeToCodecMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> Codec[Any]:
        """ Instantiate a Codec from a type signature using the given maps.

        The `codecs_map` associates types (or marker keys, like the one for records) with codec classes, while the
        `alias_map` associates types with substitutes to use instead.

        Classes that refer back to themselves (directly or through other classes) are supported, while a class is being
        built, any nested request for that same class gets a `DeferredCodec` that is bound to the final codec as soon
        as it's ready.
        """
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        aliased_type = unwrap_newtype(aliased_type, type_map.codecs_map)
        usable_origin = get_usable_origin_type(aliased_type, type_map=type_map)
        codec_class = type_map.codecs_map[usable_origin]

        if not isinstance(aliased_type, type):
            return _build_codec(codec_class, aliased_type, type_map)

        in_progress = _in_progress.get()
        token = None
        if in_progress is None:
            in_progress = {}
            token = _in_progress.set(in_progress)
        try:
            if aliased_type in in_progress:
                from structcodec.codecs.deferred_codec import DeferredCodec
                deferred: DeferredCodec = DeferredCodec(aliased_type)
                in_progress[aliased_type].append(deferred)
                return deferred
            in_progress[aliased_type] = []
            try:
                codec = _build_codec(codec_class, aliased_type, type_map)
            finally:
                waiting = in_progress.pop(aliased_type)
            for deferred in waiting:
                deferred.resolve(codec)
            if waiting:
                logger.debug('deferred codec resolved', type=type_name(aliased_type), references=len(waiting))
            return codec
        finally:
            if token is not None:
                _in_progress.reset(token)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Self:
        """ Instantiate a Codec from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `Codec.from_type` for its inner types, forwarding the given `type_map`.
        """
        # XXX: a Codec that is only meant for local use does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a Codec.TypeMap')

    @final
    def check_value(self, value: T, /) -> None:
        """ Raises a TypeError (or a ValueError for values out of the type's range) if the value is not compatible.

        Compound values are checked recursively, for example every element of a list.
        """
        # XXX: subclasses must implement Codec._check_value, not Codec.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value, it is shallow-checked right before its own bytes are written.

        Compound codecs pass the `serialize` of their inner codecs as encoders, so every level checks its own value.
        """
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        value = self._deserialize(deserializer)
        self._check_value(value, deep=False)
        return value

    @final
    def encode(self, value: T, /) -> bytes:
        """Encode a value into a new byte sequence."""
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    @final
    def decode(self, data: Buffer, /) -> tuple[T, int]:
        """ Decode a value from the start of `data`, returns the value and how many bytes were consumed.

        Trailing bytes are not an error, they're just not consumed. Raises a `SerializationError` subclass when the
        data is truncated or invalid.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer)
        return value, deserializer.cur_pos()

    @final
    @as_result(SerializationError)
    def try_decode(self, data: Buffer, /) -> tuple[T, int]:
        """Same as `decode`, but returns `Ok((value, consumed))` or `Err(error)` instead of raising."""
        return self.decode(data)

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes`, same as `encode`.
        """
        return self.encode(value)

    @final
    def from_bytes(self, data: Buffer, /) -> T:
        """ Strict version of `decode`, all bytes must be consumed.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Codec.check_value`.

        Compound codecs should use `Codec._check_value` on the inner codec(s) and only when `deep=True`.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the given value has been "shallow checked".

        When implementing the serialization with compound encoders, `Codec.serialize` should be passed as an `Encoder`
        instead of `Codec._serialize`, so the inner codec also checks its value.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`, it is expected that deserializers always produce valid values.
        """
        raise NotImplementedError


def _build_codec(codec_class: type[Codec], type_: Any, type_map: Codec.TypeMap) -> Codec:
    """Call `_from_type`, a plain `TypeError` from it means the type has no usable shape."""
    try:
        return codec_class._from_type(type_, type_map=type_map)
    except UnsupportedTypeError:
        raise
    except TypeError as e:
        raise UnsupportedTypeError(f'cannot build a codec for {type_name(type_)}: {e}') from e
