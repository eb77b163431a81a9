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

from datetime import datetime

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.encoding.timestamp import EPOCH, decode_timestamp, encode_timestamp


class TimestampCodec(Codec[datetime]):
    """ Represents timezone-aware `datetime` values as whole seconds since the Unix epoch.

    Encoding drops the sub-second part, decoding always gives a UTC datetime.
    """

    @override
    @classmethod
    def _from_type(cls, type_: type[datetime], /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not datetime:
            raise TypeError('expected datetime type')
        return cls()

    @override
    def _check_value(self, value: datetime, /, *, deep: bool) -> None:
        if not isinstance(value, datetime):
            raise TypeError('expected datetime')
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError('naive datetimes are not supported, set a tzinfo')
        if value < EPOCH:
            raise ValueError(f'{value.isoformat()} is before the epoch')

    @override
    def _serialize(self, serializer: Serializer, value: datetime, /) -> None:
        encode_timestamp(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> datetime:
        return decode_timestamp(deserializer)
