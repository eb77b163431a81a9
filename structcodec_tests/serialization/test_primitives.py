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

import math
from datetime import datetime, timedelta, timezone
from ipaddress import IPv4Address, IPv6Address

import pytest

from structcodec.serialization import (
    Deserializer,
    InvalidDiscriminantError,
    InvalidTextEncodingError,
    InvalidValueError,
    OutOfDataError,
    Serializer,
)
from structcodec.serialization.encoding.bool import decode_bool, encode_bool
from structcodec.serialization.encoding.bytes import decode_bytes, encode_bytes
from structcodec.serialization.encoding.float import decode_float, encode_float
from structcodec.serialization.encoding.socket_address import decode_socket_address, encode_socket_address
from structcodec.serialization.encoding.timestamp import decode_timestamp, encode_timestamp
from structcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
from structcodec.serialization.exceptions import TooLongError


def _serialize(encoder, *args, **kwargs) -> bytes:
    se = Serializer.build_bytes_serializer()
    encoder(se, *args, **kwargs)
    return bytes(se.finalize())


def _deserialize(decoder, data: bytes, **kwargs):
    de = Deserializer.build_bytes_deserializer(data)
    value = decoder(de, **kwargs)
    de.finalize()
    return value


def test_bool() -> None:
    assert _serialize(encode_bool, False) == b'\x00'
    assert _serialize(encode_bool, True) == b'\x01'
    assert _deserialize(decode_bool, b'\x00') is False
    assert _deserialize(decode_bool, b'\x01') is True


@pytest.mark.parametrize('raw', [b'\x02', b'\x7f', b'\xff'])
def test_bool_invalid_byte(raw: bytes) -> None:
    with pytest.raises(InvalidValueError):
        _deserialize(decode_bool, raw)


def test_bool_refuses_int() -> None:
    with pytest.raises(TypeError):
        _serialize(encode_bool, 1)


@pytest.mark.parametrize('value, length, expected', [
    (1.5, 4, '3fc00000'),
    (1.0, 8, '3ff0000000000000'),
    (-0.0, 8, '8000000000000000'),
    (float('inf'), 4, '7f800000'),
])
def test_float(value: float, length: int, expected: str) -> None:
    assert _serialize(encode_float, value, length=length).hex() == expected
    decoded = _deserialize(decode_float, bytes.fromhex(expected), length=length)
    assert decoded == value
    assert math.copysign(1.0, decoded) == math.copysign(1.0, value)


def test_float_nan() -> None:
    data = _serialize(encode_float, float('nan'), length=8)
    assert math.isnan(_deserialize(decode_float, data, length=8))


def test_float_out_of_range() -> None:
    with pytest.raises(ValueError):
        _serialize(encode_float, 1e300, length=4)


def test_float_invalid_length() -> None:
    with pytest.raises(ValueError):
        _serialize(encode_float, 1.0, length=2)


def test_utf8_empty_and_multibyte() -> None:
    assert _serialize(encode_utf8, '') == b'\x00\x00\x00\x00'
    # the prefix counts bytes, not characters
    data = _serialize(encode_utf8, 'ção')
    assert data == b'\x00\x00\x00\x05' + 'ção'.encode('utf-8')
    assert _deserialize(decode_utf8, data) == 'ção'


def test_utf8_invalid() -> None:
    with pytest.raises(InvalidTextEncodingError):
        _deserialize(decode_utf8, b'\x00\x00\x00\x02\xc3\x28')


def test_utf8_truncated() -> None:
    with pytest.raises(OutOfDataError):
        _deserialize(decode_utf8, b'\x00\x00\x00')
    with pytest.raises(OutOfDataError):
        _deserialize(decode_utf8, b'\x00\x00\x00\x03ab')


def test_bytes_same_layout_as_u8_sequence() -> None:
    assert _serialize(encode_bytes, b'\x07\x08').hex() == '000000020708'
    assert _deserialize(decode_bytes, bytes.fromhex('000000020708')) == b'\x07\x08'


def test_bytes_max_length() -> None:
    with pytest.raises(TooLongError):
        _serialize(encode_bytes, b'abc', max_length=2)
    # the declared length is checked before trying to read the data
    with pytest.raises(TooLongError):
        _deserialize(decode_bytes, b'\xff\xff\xff\xff', max_length=10)


def test_socket_address_ipv4() -> None:
    data = _serialize(encode_socket_address, IPv4Address('10.0.0.2'), 40403)
    assert data.hex() == '000a0000029dd3'
    assert _deserialize(decode_socket_address, data) == (IPv4Address('10.0.0.2'), 40403)


def test_socket_address_ipv6() -> None:
    ip = IPv6Address('2001:db8::1')
    data = _serialize(encode_socket_address, ip, 443)
    assert len(data) == 19
    assert data[:1] == b'\x01'
    assert data[1:17] == ip.packed
    assert data[17:] == b'\x01\xbb'
    assert _deserialize(decode_socket_address, data) == (ip, 443)


def test_socket_address_invalid_family() -> None:
    with pytest.raises(InvalidDiscriminantError):
        _deserialize(decode_socket_address, b'\x05' + bytes(6))


def test_socket_address_truncated() -> None:
    with pytest.raises(OutOfDataError):
        _deserialize(decode_socket_address, b'\x01' + bytes(10))


def test_timestamp_truncates_sub_seconds() -> None:
    value = datetime(2024, 2, 29, 23, 59, 59, 500000, tzinfo=timezone.utc)
    data = _serialize(encode_timestamp, value)
    assert len(data) == 8
    assert _deserialize(decode_timestamp, data) == value.replace(microsecond=0)


def test_timestamp_any_timezone() -> None:
    utc = datetime(2023, 1, 1, 12, 30, 15, tzinfo=timezone.utc)
    plus_one = datetime(2023, 1, 1, 13, 30, 15, tzinfo=timezone(timedelta(hours=1)))
    assert _serialize(encode_timestamp, plus_one) == _serialize(encode_timestamp, utc)
    decoded = _deserialize(decode_timestamp, _serialize(encode_timestamp, plus_one))
    assert decoded.tzinfo == timezone.utc


def test_timestamp_epoch() -> None:
    assert _serialize(encode_timestamp, datetime(1970, 1, 1, tzinfo=timezone.utc)) == bytes(8)


def test_timestamp_refused_values() -> None:
    with pytest.raises(ValueError, match='naive'):
        _serialize(encode_timestamp, datetime(2023, 1, 1))
    with pytest.raises(ValueError, match='before the epoch'):
        _serialize(encode_timestamp, datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc))
