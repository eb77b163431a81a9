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

import unittest
from typing import Any
from unittest import main as ut_main

from structlog import get_logger

from structcodec.codecs import make_codec
from structcodec.serialization import OutOfDataError

logger = get_logger()
main = ut_main


class TestCase(unittest.TestCase):
    """Base class for codec tests, with helpers to check exact encodings."""

    def setUp(self) -> None:
        self.log = logger.new()

    def assertEncodes(self, type_: Any, value: Any, expected_hex: str) -> bytes:
        """Check that `value` encodes to exactly `expected_hex` and that it decodes back consuming every byte."""
        codec = make_codec(type_)
        data = codec.encode(value)
        self.assertEqual(data.hex(' '), expected_hex)
        decoded, consumed = codec.decode(data)
        self.assertEqual(decoded, value)
        self.assertEqual(consumed, len(data))
        return data

    def assertRoundTrip(self, type_: Any, value: Any) -> None:
        codec = make_codec(type_)
        data = codec.encode(value)
        self.assertEqual(codec.from_bytes(data), value)

    def assertTruncationFails(self, type_: Any, value: Any) -> None:
        """Every proper prefix of the encoding of `value` must fail as truncated input."""
        codec = make_codec(type_)
        data = codec.encode(value)
        for i in range(len(data)):
            with self.subTest(prefix_length=i):
                with self.assertRaises(OutOfDataError):
                    codec.decode(data[:i])
