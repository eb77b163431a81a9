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

from ipaddress import IPv4Address, IPv6Address

from typing_extensions import Self, override

from structcodec.codecs.codec import Codec
from structcodec.serialization import Deserializer, Serializer
from structcodec.serialization.encoding.int import int_bounds
from structcodec.serialization.encoding.socket_address import PORT_SIZE, decode_socket_address, encode_socket_address
from structcodec.types import SocketAddress


class SocketAddressCodec(Codec[SocketAddress]):
    """ Represents `SocketAddress` values, 7 bytes for IPv4 and 19 bytes for IPv6.
    """

    @override
    @classmethod
    def _from_type(cls, type_: type[SocketAddress], /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not SocketAddress:
            raise TypeError('expected SocketAddress type')
        return cls()

    @override
    def _check_value(self, value: SocketAddress, /, *, deep: bool) -> None:
        if not isinstance(value, SocketAddress):
            raise TypeError('expected SocketAddress')
        if not isinstance(value.ip, (IPv4Address, IPv6Address)):
            raise TypeError('expected an IPv4Address or IPv6Address')
        lower_bound, upper_bound = int_bounds(PORT_SIZE, signed=False)
        if not isinstance(value.port, int) or isinstance(value.port, bool):
            raise TypeError('expected an integer port')
        if not lower_bound <= value.port <= upper_bound:
            raise ValueError(f'port {value.port} is out of range')

    @override
    def _serialize(self, serializer: Serializer, value: SocketAddress, /) -> None:
        encode_socket_address(serializer, value.ip, value.port)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> SocketAddress:
        ip, port = decode_socket_address(deserializer)
        return SocketAddress(ip, port)
