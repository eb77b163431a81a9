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
This module implements network socket addresses (an IP address plus a port).

The layout is a 1-byte family discriminant, the address octets and a 2-byte big-endian port:

- family `0`: IPv4, 4 octets, 7 bytes in total
- family `1`: IPv6, 16 octets, 19 bytes in total
- any other family is invalid

>>> from ipaddress import IPv4Address, IPv6Address
>>> se = Serializer.build_bytes_serializer()
>>> encode_socket_address(se, IPv4Address('127.0.0.1'), 8080)
>>> bytes(se.finalize()).hex()
'007f0000011f90'

>>> se = Serializer.build_bytes_serializer()
>>> encode_socket_address(se, IPv6Address('::1'), 40403)
>>> data = bytes(se.finalize())
>>> len(data), data[:1].hex(), data[-3:].hex()
(19, '01', '019dd3')

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('007f0000011f90'))
>>> decode_socket_address(de)
(IPv4Address('127.0.0.1'), 8080)
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('027f0000011f90'))
>>> try:
...     decode_socket_address(de)
... except InvalidDiscriminantError as e:
...     print(*e.args)
invalid address family: 2
"""

from ipaddress import IPv4Address, IPv6Address

from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.exceptions import InvalidDiscriminantError

from .int import decode_int, encode_int

FAMILY_IPV4 = 0
FAMILY_IPV6 = 1

PORT_SIZE = 2


def encode_socket_address(serializer: Serializer, ip: IPv4Address | IPv6Address, port: int) -> None:
    match ip:
        case IPv4Address():
            serializer.write_byte(FAMILY_IPV4)
        case IPv6Address():
            serializer.write_byte(FAMILY_IPV6)
        case _:
            raise TypeError(f'expected an IPv4Address or IPv6Address, got {type(ip).__name__}')
    serializer.write_bytes(ip.packed)
    encode_int(serializer, port, length=PORT_SIZE, signed=False)


def decode_socket_address(deserializer: Deserializer) -> tuple[IPv4Address | IPv6Address, int]:
    family = deserializer.read_byte()
    ip: IPv4Address | IPv6Address
    match family:
        case 0:
            ip = IPv4Address(bytes(deserializer.read_bytes(4)))
        case 1:
            ip = IPv6Address(bytes(deserializer.read_bytes(16)))
        case _:
            raise InvalidDiscriminantError(f'invalid address family: {family}')
    port = decode_int(deserializer, length=PORT_SIZE, signed=False)
    return ip, port
