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
This module implements fixed-width integers, the width (in bytes) and the signedness are parameters.

Integers are written big-endian, signed integers use two's complement. There is no padding and no prefix, so an
integer of width W always takes exactly W bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0x12345678, length=4, signed=False)
>>> encode_int(se, 0x9abc, length=2, signed=False)
>>> encode_int(se, -2, length=2, signed=True)
>>> bytes(se.finalize()).hex()
'123456789abcfffe'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('123456789abcfffe'))
>>> hex(decode_int(de, length=4, signed=False))
'0x12345678'
>>> hex(decode_int(de, length=2, signed=False))
'0x9abc'
>>> decode_int(de, length=2, signed=True)
-2
>>> de.finalize()

Values that don't fit the width are refused before anything is written:

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 256, length=1, signed=False)
Traceback (most recent call last):
...
ValueError: 256 does not fit in 1 unsigned byte(s)

And a short window fails without consuming anything:

>>> de = Deserializer.build_bytes_deserializer(b'\\x00\\x01')
>>> decode_int(de, length=4, signed=False)
Traceback (most recent call last):
...
structcodec.serialization.exceptions.OutOfDataError: not enough bytes to read: need 4, have 2
"""

from structcodec.serialization import Deserializer, Serializer

VALID_LENGTHS = (1, 2, 4, 8, 16)


def int_bounds(length: int, signed: bool) -> tuple[int, int]:
    """Inclusive range of the integers that can be represented with `length` bytes."""
    bits = length * 8
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This module's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=signed)
    except OverflowError:
        kind = 'signed' if signed else 'unsigned'
        raise ValueError(f'{number} does not fit in {length} {kind} byte(s)')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This module's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='big', signed=signed)
