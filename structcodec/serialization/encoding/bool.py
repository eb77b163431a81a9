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

r"""
This module implements encoding a boolean value using 1 byte.

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`
- any other byte value is invalid and decoding it fails with `InvalidValueError`

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, True)
>>> encode_bool(se, False)
>>> bytes(se.finalize())
b'\x01\x00'

>>> de = Deserializer.build_bytes_deserializer(b'\x01\x00')
>>> decode_bool(de)
True
>>> decode_bool(de)
False
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x02')
>>> try:
...     decode_bool(de)
... except InvalidValueError as e:
...     print(*e.args)
b'\x02' is not a valid boolean
"""

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.exceptions import InvalidValueError


def encode_bool(serializer: Serializer, value: bool) -> None:
    if not isinstance(value, bool):
        raise TypeError(f'expected bool, got {type(value).__name__}')
    serializer.write_byte(0x01 if value else 0x00)


def decode_bool(deserializer: Deserializer) -> bool:
    i = deserializer.read_byte()
    if i == 0x00:
        return False
    if i == 0x01:
        return True
    raw = bytes([i])
    raise InvalidValueError(f'{raw!r} is not a valid boolean')
