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
from structcodec.serialization.encoding.bytes import decode_bytes, encode_bytes


class BytesCodec(Codec[bytes]):
    """ Represents builtin `bytes` values, same layout as `list[u8]`.
    """

    __slots__ = ('_max_length',)

    _max_length: int

    def __init__(self, max_length: int) -> None:
        self._max_length = max_length

    @override
    @classmethod
    def _from_type(cls, type_: type[bytes], /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not bytes:
            raise TypeError('expected bytes type')
        return cls(get_global_settings().MAX_SEQUENCE_LENGTH)

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, bytes):
            raise TypeError('expected bytes')

    @override
    def _serialize(self, serializer: Serializer, value: bytes, /) -> None:
        encode_bytes(serializer, value, max_length=self._max_length)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return decode_bytes(deserializer, max_length=self._max_length)
