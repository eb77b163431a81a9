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
from enum import Enum, StrEnum
from typing import NamedTuple, Optional

from structcodec import (
    Array,
    InvalidDiscriminantError,
    OutOfDataError,
    SerializationError,
    UnsupportedTypeError,
    serializable,
    u8,
    u16,
    u32,
)
from structcodec.utils.result import Err, Ok
from structcodec_tests import unittest


@serializable
@dataclass(frozen=True)
class Header:
    version: u8
    length: u32
    name: str


@serializable
class Point(NamedTuple):
    x: u16
    y: u16


@serializable
class Pair(tuple[u8, str]):
    pass


@serializable
class Direction(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@serializable
@dataclass
class Message:
    header: Header
    route: list[Direction]
    origin: Optional[Point]
    checksum: Array[u8, 4]


@serializable(lazy=True)
@dataclass
class Tree:
    label: str
    children: list['Tree']


class SerializableTest(unittest.TestCase):
    def test_encode_decode(self) -> None:
        header = Header(u8(1), u32(0x0a0b0c0d), 'hi')
        data = header.encode()
        self.assertEqual(data.hex(' '), '01 0a 0b 0c 0d 00 00 00 02 68 69')
        self.assertEqual(Header.decode(data), (header, 11))
        self.assertEqual(Header.decode(data + b'\x00\x00'), (header, 11))

    def test_named_tuple_and_positional(self) -> None:
        self.assertEqual(Point(1, 2).encode(), b'\x00\x01\x00\x02')
        self.assertEqual(Point.decode(b'\x00\x01\x00\x02'), (Point(1, 2), 4))
        self.assertEqual(Pair((7, 'a')).encode(), b'\x07\x00\x00\x00\x01a')
        value, consumed = Pair.decode(b'\x07\x00\x00\x00\x01a')
        self.assertIsInstance(value, Pair)
        self.assertEqual(consumed, 6)

    def test_enum(self) -> None:
        self.assertEqual(Direction.SOUTH.encode(), b'\x02')
        self.assertEqual(Direction.decode(b'\x03'), (Direction.WEST, 1))
        with self.assertRaises(InvalidDiscriminantError):
            Direction.decode(b'\x04')

    def test_composition(self) -> None:
        message = Message(
            Header(u8(2), u32(1), ''),
            [Direction.NORTH, Direction.WEST],
            Point(3, 4),
            (9, 8, 7, 6),
        )
        data = message.encode()
        self.assertEqual(
            data.hex(' '),
            '02 00 00 00 01 00 00 00 00 00 00 00 02 00 03 01 00 03 00 04 09 08 07 06',
        )
        self.assertEqual(Message.from_bytes(data), message)
        for i in range(len(data)):
            with self.subTest(prefix_length=i):
                with self.assertRaises(OutOfDataError):
                    Message.decode(data[:i])

    def test_strict_from_bytes(self) -> None:
        data = Point(1, 2).encode()
        self.assertEqual(Point.from_bytes(data), Point(1, 2))
        self.assertEqual(Point(1, 2).to_bytes(), data)
        with self.assertRaises(SerializationError):
            Point.from_bytes(data + b'\x00')

    def test_try_decode(self) -> None:
        self.assertEqual(Point.try_decode(b'\x00\x01\x00\x02\xff'), Ok((Point(1, 2), 4)))
        result = Point.try_decode(b'\x00\x01')
        self.assertIsInstance(result, Err)
        self.assertIsInstance(result.err(), OutOfDataError)

    def test_lazy_recursive(self) -> None:
        tree = Tree('a', [Tree('b', []), Tree('c', [])])
        data = tree.encode()
        self.assertEqual(Tree.decode(data), (tree, len(data)))

    def test_forward_reference_needs_lazy(self) -> None:
        with self.assertRaisesRegex(UnsupportedTypeError, 'lazy=True'):
            @serializable
            @dataclass
            class Later:
                value: 'Undefined'  # type: ignore[name-defined]  # noqa: F821

    def test_fails_when_decorated(self) -> None:
        with self.assertRaisesRegex(UnsupportedTypeError, 'no fixed width'):
            @serializable
            @dataclass
            class Counter:
                count: int

    def test_only_records_and_enums(self) -> None:
        class Plain:
            pass

        with self.assertRaises(UnsupportedTypeError):
            serializable(Plain)
        with self.assertRaises(TypeError):
            serializable(lambda: None)  # type: ignore[type-var]

    def test_existing_methods_are_not_replaced(self) -> None:
        class Mode(StrEnum):
            FAST = 'fast'

        with self.assertRaisesRegex(UnsupportedTypeError, 'encode'):
            serializable(Mode)

    def test_decorated_subclass(self) -> None:
        @serializable
        @dataclass
        class Base:
            a: u8

        @serializable
        @dataclass
        class Child(Base):
            b: u8

        self.assertEqual(Base(1).encode(), b'\x01')
        self.assertEqual(Child(1, 2).encode(), b'\x01\x02')
        self.assertEqual(Child.decode(b'\x01\x02'), (Child(1, 2), 2))
        self.assertEqual(Base.decode(b'\x01\x02'), (Base(1), 1))

    def test_undecorated_subclass_uses_its_own_fields(self) -> None:
        @serializable
        @dataclass
        class Base:
            a: u8

        @dataclass
        class Child(Base):
            b: u8

        child = Child(1, 2)
        data = child.encode()
        self.assertEqual(data, b'\x01\x02')
        value, consumed = Child.decode(data)
        self.assertIs(type(value), Child)
        self.assertEqual((value, consumed), (child, 2))
        self.assertEqual(Child.from_bytes(child.to_bytes()), child)
        self.assertEqual(Child.try_decode(data).unwrap(), (child, 2))
