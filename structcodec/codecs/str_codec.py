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

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.conf.get_settings import get_global_settings
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.consts import LENGTH_PREFIX_SIZE
from structcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8


class StrCodec(Codec[str]):
    """ Represents builtin `str` values, encoded as utf-8 with a 4-byte length prefix.

    The encoded text can't be longer than `max_bytes`, which comes from the `MAX_TEXT_BYTES` setting when the codec is
    built from a type.
    """

    __slots__ = ('_max_bytes',)

    _max_bytes: int

    def __init__(self, max_bytes: int) -> None:
        self._max_bytes = max_bytes

    @override
    @classmethod
    def _from_type(cls, type_: type[str], /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not str:
            raise TypeError('expected str type')
        settings = get_global_settings()
        return cls(settings.MAX_TEXT_BYTES)

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        encode_utf8(serializer.with_max_bytes(LENGTH_PREFIX_SIZE + self._max_bytes), value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return decode_utf8(deserializer.with_max_bytes(LENGTH_PREFIX_SIZE + self._max_bytes))
