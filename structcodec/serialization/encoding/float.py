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
This module implements IEEE-754 floats, 4 bytes (binary32) or 8 bytes (binary64), big-endian.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)
>>> encode_float(se, -0.25, length=8)
>>> bytes(se.finalize()).hex()
'3fc00000bfd0000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc00000bfd0000000000000'))
>>> decode_float(de, length=4)
1.5
>>> decode_float(de, length=8)
-0.25
>>> de.finalize()
"""

import struct

from structcodec.serialization import Deserializer, Serializer

_FORMATS = {
    4: '>f',
    8: '>d',
}


def _format_for(length: int) -> str:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'invalid float length: {length}')


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    fmt = _format_for(length)
    try:
        serializer.write_struct((value,), fmt)
    except (OverflowError, struct.error) as e:
        raise ValueError(f'{value!r} cannot be encoded as a {length * 8}-bit float') from e


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    value, = deserializer.read_struct(_format_for(length))
    return value
