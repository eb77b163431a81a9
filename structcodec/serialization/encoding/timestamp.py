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
This module implements absolute timestamps as an 8-byte big-endian count of whole seconds since the Unix epoch.

Only timezone-aware datetimes are accepted, sub-second precision is truncated and decoded values are always in UTC.
Instants before the epoch can't be represented.

>>> from datetime import datetime, timezone
>>> se = Serializer.build_bytes_serializer()
>>> encode_timestamp(se, datetime(2023, 1, 1, 12, 30, 15, 999999, tzinfo=timezone.utc))
>>> bytes(se.finalize()).hex()
'0000000063b17cd7'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000063b17cd7'))
>>> decode_timestamp(de)
datetime.datetime(2023, 1, 1, 12, 30, 15, tzinfo=datetime.timezone.utc)
>>> de.finalize()

A stored value past what `datetime` supports is invalid:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffffffffffff'))
>>> try:
...     decode_timestamp(de)
... except InvalidValueError as e:
...     print(*e.args)
timestamp out of range: 18446744073709551615
"""

from datetime import datetime, timedelta, timezone

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.exceptions import InvalidValueError

from .int import decode_int, encode_int

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TIMESTAMP_SIZE = 8


def encode_timestamp(serializer: Serializer, value: datetime) -> None:
    if not isinstance(value, datetime):
        raise TypeError(f'expected datetime, got {type(value).__name__}')
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError('naive datetimes are not supported, set a tzinfo')
    delta = value - EPOCH
    if delta < timedelta(0):
        raise ValueError(f'{value.isoformat()} is before the epoch')
    # whole seconds, microseconds are dropped
    seconds = delta.days * 86400 + delta.seconds
    encode_int(serializer, seconds, length=TIMESTAMP_SIZE, signed=False)


def decode_timestamp(deserializer: Deserializer) -> datetime:
    seconds = decode_int(deserializer, length=TIMESTAMP_SIZE, signed=False)
    try:
        return EPOCH + timedelta(seconds=seconds)
    except OverflowError as e:
        raise InvalidValueError(f'timestamp out of range: {seconds}') from e
