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

from dataclasses import dataclass

from structcodec.codecs import ArrayCodec, ListCodec, TupleCodec, make_codec
from structcodec.conf.settings import CodecSettings
from structcodec.serialization import OutOfDataError, TooLongError
from structcodec.types import Array, u8, u16
from structcodec_tests import unittest


class ListCodecTest(unittest.TestCase):
    def test_list(self) -> None:
        self.assertIsInstance(make_codec(list[u8]), ListCodec)
        self.assertEncodes(list[u8], [], '00 00 00 00')
        self.assertEncodes(list[u16], [1, 0xffff], '00 00 00 02 00 01 ff ff')
        self.assertEncodes(list[str], ['a', ''], '00 00 00 02 00 00 00 01 61 00 00 00 00')

    def test_nested(self) -> None:
        self.assertEncodes(
            list[list[u8]], [[1], [], [2, 3]],
            '00 00 00 03 00 00 00 01 01 00 00 00 00 00 00 00 02 02 03',
        )
        self.assertTruncationFails(list[list[u8]], [[1], [], [2, 3]])

    def test_decoded_count_must_be_present(self) -> None:
        # declares 3 elements but only 2 follow
        with self.assertRaises(OutOfDataError):
            make_codec(list[u8]).decode(b'\x00\x00\x00\x03\x01\x02')

    def test_limit_from_settings(self) -> None:
        codec = make_codec(list[u8])
        codec.encode([0] * 1000)
        with self.assertRaises(TooLongError):
            codec.encode([0] * 1001)
        with self.assertRaises(TooLongError):
            codec.decode(b'\x00\x00\x03\xe9')

    def test_zero_width_elements_are_bounded_by_default(self) -> None:
        @dataclass
        class Marker:
            pass

        codec = ListCodec(make_codec(Marker), max_length=CodecSettings().MAX_SEQUENCE_LENGTH)
        self.assertEqual(codec.decode(b'\x00\x00\x00\x03'), ([Marker(), Marker(), Marker()], 4))
        # 3145728 elements declared, nothing behind them
        with self.assertRaises(TooLongError):
            codec.decode(b'\x00\x30\x00\x00')

    def test_element_errors(self) -> None:
        codec = make_codec(list[u8])
        with self.assertRaises(ValueError):
            codec.encode([1, 256])
        with self.assertRaises(TypeError):
            codec.encode((1, 2))
        with self.assertRaises(TypeError):
            codec.check_value([1, 'a'])


class TupleCodecTest(unittest.TestCase):
    def test_variable_tuple_is_a_sequence(self) -> None:
        self.assertIsInstance(make_codec(tuple[u8, ...]), TupleCodec)
        self.assertEncodes(tuple[u8, ...], (1, 2, 3), '00 00 00 03 01 02 03')
        self.assertEqual(make_codec(tuple[u8, ...]).encode((1, 2)), make_codec(list[u8]).encode([1, 2]))

    def test_fixed_tuple(self) -> None:
        self.assertEncodes(tuple[u8, str, bool], (1, 'x', True), '01 00 00 00 01 78 01')

    def test_fixed_tuple_wrong_length(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(tuple[u8, u8]).encode((1,))

    def test_decoded_as_tuple(self) -> None:
        value, _ = make_codec(tuple[u8, ...]).decode(b'\x00\x00\x00\x01\x07')
        self.assertEqual(value, (7,))
        self.assertIsInstance(value, tuple)


class ArrayCodecTest(unittest.TestCase):
    def test_array(self) -> None:
        self.assertIsInstance(make_codec(Array[u16, 3]), ArrayCodec)
        self.assertEncodes(Array[u16, 3], (1, 2, 3), '00 01 00 02 00 03')
        self.assertEncodes(Array[u8, 0], (), '')

    def test_any_sized_collection(self) -> None:
        codec = make_codec(Array[u8, 2])
        self.assertEqual(codec.encode([1, 2]), b'\x01\x02')
        self.assertEqual(codec.decode(b'\x01\x02'), ((1, 2), 2))

    def test_wrong_size(self) -> None:
        codec = make_codec(Array[u8, 2])
        with self.assertRaises(ValueError):
            codec.encode([1])
        with self.assertRaises(ValueError):
            codec.encode([1, 2, 3])

    def test_truncation(self) -> None:
        self.assertTruncationFails(Array[str, 2], ('ab', 'cd'))

    def test_array_type_checks(self) -> None:
        with self.assertRaises(TypeError):
            Array[u8]
        with self.assertRaises(TypeError):
            Array[u8, -1]
        with self.assertRaises(TypeError):
            Array()
