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
from typing import NewType

from structcodec.codecs import make_codec
from structcodec.serialization import InvalidTextEncodingError, InvalidValueError, TooLongError
from structcodec.types import SocketAddress, f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128
from structcodec_tests import unittest

Port = NewType('Port', u16)


class IntCodecTest(unittest.TestCase):
    def test_widths(self) -> None:
        cases = [
            (u8, 0xab, 'ab'),
            (u16, 0xabcd, 'ab cd'),
            (u32, 1, '00 00 00 01'),
            (u64, 2**64 - 1, 'ff ff ff ff ff ff ff ff'),
            (u128, 1, ' '.join(['00'] * 15 + ['01'])),
            (i8, -1, 'ff'),
            (i16, -256, 'ff 00'),
            (i32, -2, 'ff ff ff fe'),
            (i64, 2**63 - 1, '7f ff ff ff ff ff ff ff'),
            (i128, -(2**127), ' '.join(['80'] + ['00'] * 15)),
        ]
        for type_, value, expected in cases:
            with self.subTest(type_=type_, value=value):
                self.assertEncodes(type_, value, expected)
                self.assertTruncationFails(type_, value)

    def test_out_of_range(self) -> None:
        cases = [(u8, 256), (u8, -1), (i8, 128), (i8, -129), (u16, 2**16), (i64, 2**63), (u128, 2**128)]
        for type_, value in cases:
            with self.subTest(type_=type_, value=value):
                with self.assertRaises(ValueError):
                    make_codec(type_).encode(value)

    def test_not_an_int(self) -> None:
        for value in (True, 1.0, '1', None):
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    make_codec(u32).encode(value)

    def test_newtype_of_width_type(self) -> None:
        self.assertEncodes(Port, Port(u16(8080)), '1f 90')


class FloatCodecTest(unittest.TestCase):
    def test_float_is_f64(self) -> None:
        self.assertEqual(make_codec(float).encode(0.1), make_codec(f64).encode(f64(0.1)))
        self.assertEncodes(float, -2.5, 'c0 04 00 00 00 00 00 00')

    def test_f32(self) -> None:
        self.assertEncodes(f32, 1.5, '3f c0 00 00')
        self.assertEncodes(f32, 1, '3f 80 00 00')

    def test_f32_must_be_exact(self) -> None:
        with self.assertRaises(ValueError):
            make_codec(f32).encode(0.1)
        with self.assertRaises(ValueError):
            make_codec(f32).encode(1e39)

    def test_special_values(self) -> None:
        for type_ in (f32, f64):
            with self.subTest(type_=type_):
                self.assertRoundTrip(type_, float('inf'))
                self.assertRoundTrip(type_, float('-inf'))
                value = make_codec(type_).from_bytes(make_codec(type_).encode(float('nan')))
                self.assertTrue(math.isnan(value))


class TextCodecTest(unittest.TestCase):
    def test_text(self) -> None:
        self.assertEncodes(str, '', '00 00 00 00')
        self.assertEncodes(str, 'ハ', '00 00 00 03 e3 83 8f')
        self.assertTruncationFails(str, 'Hello world')

    def test_invalid_utf8(self) -> None:
        with self.assertRaises(InvalidTextEncodingError):
            make_codec(str).decode(b'\x00\x00\x00\x01\x80')

    def test_limit_from_settings(self) -> None:
        codec = make_codec(str)
        codec.encode('a' * 1024)
        with self.assertRaises(TooLongError):
            codec.encode('a' * 1025)
        # the declared length is refused even before the window runs out
        with self.assertRaises(TooLongError):
            codec.decode(b'\x00\x00\x04\x01' + b'a' * 1025)

    def test_bytes(self) -> None:
        self.assertEncodes(bytes, b'\x01\x02', '00 00 00 02 01 02')
        self.assertEqual(make_codec(bytes).encode(b'\x01\x02'), make_codec(list[u8]).encode([1, 2]))
        with self.assertRaises(TypeError):
            make_codec(bytes).encode(bytearray(b'\x01'))

    def test_bool(self) -> None:
        self.assertEncodes(bool, True, '01')
        self.assertEncodes(bool, False, '00')
        with self.assertRaises(InvalidValueError):
            make_codec(bool).decode(b'\x02')


class OtherCodecTest(unittest.TestCase):
    def test_timestamp(self) -> None:
        value = datetime(2023, 1, 1, 12, 30, 15, tzinfo=timezone.utc)
        self.assertEncodes(datetime, value, '00 00 00 00 63 b1 7c d7')
        self.assertTruncationFails(datetime, value)

    def test_timestamp_refused_values(self) -> None:
        codec = make_codec(datetime)
        with self.assertRaises(ValueError):
            codec.encode(datetime(2023, 1, 1))
        with self.assertRaises(ValueError):
            codec.encode(datetime(1960, 1, 1, tzinfo=timezone.utc))
        with self.assertRaises(TypeError):
            codec.encode(0)

    def test_timestamp_out_of_range(self) -> None:
        with self.assertRaises(InvalidValueError):
            make_codec(datetime).decode(b'\xff' * 8)

    def test_timestamp_normalized_to_utc(self) -> None:
        value = datetime(2023, 1, 1, 9, 30, 15, tzinfo=timezone(timedelta(hours=-3)))
        decoded, _ = make_codec(datetime).decode(make_codec(datetime).encode(value))
        self.assertEqual(decoded, value)
        self.assertEqual(decoded.tzinfo, timezone.utc)

    def test_socket_address(self) -> None:
        self.assertEncodes(SocketAddress, SocketAddress(IPv4Address('127.0.0.1'), 8080), '00 7f 00 00 01 1f 90')
        value = SocketAddress(IPv6Address('::1'), 40403)
        data = self.assertEncodes(SocketAddress, value, ' '.join(['01'] + ['00'] * 15 + ['01', '9d', 'd3']))
        self.assertEqual(len(data), 19)
        self.assertTruncationFails(SocketAddress, value)

    def test_socket_address_refused_values(self) -> None:
        codec = make_codec(SocketAddress)
        with self.assertRaises(ValueError):
            codec.encode(SocketAddress(IPv4Address('127.0.0.1'), 65536))
        with self.assertRaises(TypeError):
            codec.encode(SocketAddress('127.0.0.1', 80))  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            codec.encode((IPv4Address('127.0.0.1'), 80))
