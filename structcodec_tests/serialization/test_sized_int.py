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

import pytest

from structcodec.serialization import Deserializer, OutOfDataError, Serializer
from structcodec.serialization.encoding.int import VALID_LENGTHS, decode_int, encode_int, int_bounds


def _encode(n: int, length: int, signed: bool) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_int(se, n, length=length, signed=signed)
    return bytes(se.finalize())


def _decode(data: bytes, length: int, signed: bool) -> int:
    de = Deserializer.build_bytes_deserializer(data)
    n = decode_int(de, length=length, signed=signed)
    de.finalize()
    return n


def gen_bounds_test_cases():
    test_cases = []
    for length in VALID_LENGTHS:
        for signed in (False, True):
            test_cases.append((length, signed))
    return test_cases


@pytest.mark.parametrize('length, signed', gen_bounds_test_cases())
def test_bounds(length: int, signed: bool) -> None:
    lower_bound, upper_bound = int_bounds(length, signed)
    for n in (lower_bound, upper_bound):
        data = _encode(n, length, signed)
        assert len(data) == length
        assert _decode(data, length, signed) == n
    with pytest.raises(ValueError):
        _encode(upper_bound + 1, length, signed)
    with pytest.raises(ValueError):
        _encode(lower_bound - 1, length, signed)


def test_int_bounds_values() -> None:
    assert int_bounds(1, False) == (0, 255)
    assert int_bounds(1, True) == (-128, 127)
    assert int_bounds(2, True) == (-32768, 32767)
    assert int_bounds(16, False) == (0, 2**128 - 1)


@pytest.mark.parametrize('n, length, signed, expected', [
    (0, 1, False, '00'),
    (255, 1, False, 'ff'),
    (-1, 1, True, 'ff'),
    (-128, 1, True, '80'),
    (0x0102, 2, False, '0102'),
    (-2, 4, True, 'fffffffe'),
    (0x12345678, 4, False, '12345678'),
    (1, 8, False, '0000000000000001'),
    (-(2**127), 16, True, '80' + '00' * 15),
])
def test_big_endian_twos_complement(n: int, length: int, signed: bool, expected: str) -> None:
    assert _encode(n, length, signed).hex() == expected
    assert _decode(bytes.fromhex(expected), length, signed) == n


def test_negative_unsigned_is_refused() -> None:
    with pytest.raises(ValueError, match='does not fit'):
        _encode(-1, 4, False)


def test_truncated_input() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x01')
    with pytest.raises(OutOfDataError):
        decode_int(de, length=4, signed=False)
    # nothing was consumed by the failed read
    assert de.cur_pos() == 0
    assert de.remaining() == 3
