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
An optional value is a tag byte followed by the value when present.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from structcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 'hi', encode_utf8)
>>> encode_optional(se, None, encode_utf8)
>>> bytes(se.finalize()).hex()
'0100000002686900'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100000002686900'))
>>> decode_optional(de, decode_utf8)
'hi'
>>> print(decode_optional(de, decode_utf8))
None
>>> de.finalize()

Any tag other than 0 or 1 is refused:

>>> de = Deserializer.build_bytes_deserializer(b'\x02')
>>> try:
...     decode_optional(de, decode_utf8)
... except InvalidDiscriminantError as e:
...     print(*e.args)
invalid optional tag: 2
"""

from typing import Optional, TypeVar

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.consts import OPTIONAL_ABSENT, OPTIONAL_PRESENT
from structcodec.serialization.exceptions import InvalidDiscriminantError

from . import Decoder, Encoder

T = TypeVar('T')


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        serializer.write_byte(OPTIONAL_ABSENT)
    else:
        serializer.write_byte(OPTIONAL_PRESENT)
        encoder(serializer, value)


def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Optional[T]:
    tag = deserializer.read_byte()
    if tag == OPTIONAL_ABSENT:
        return None
    if tag == OPTIONAL_PRESENT:
        return decoder(deserializer)
    raise InvalidDiscriminantError(f'invalid optional tag: {tag}')
