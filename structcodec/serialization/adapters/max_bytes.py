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
Byte budgets for nested encoders, `Serializer.with_max_bytes` and `Deserializer.with_max_bytes` wrap the
(de)serializer being used and every write or read through the wrapper is charged to the budget.
"""

from typing import Generic, TypeVar

from typing_extensions import override

from structcodec.serialization.deserializer import Deserializer
from structcodec.serialization.exceptions import TooLongError
from structcodec.serialization.serializer import Serializer

from ..types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(TooLongError):
    """ Raised when a wrapped (de)serializer goes over its budget.

    The wrapper must not be used after this, and the value being processed is invalid as a whole.
    """


class MaxBytesSerializer(Serializer, Generic[S]):
    inner: S

    def __init__(self, serializer: S, max_bytes: int) -> None:
        self.inner = serializer
        self._bytes_left = max_bytes

    def _charge(self, size: int) -> None:
        self._bytes_left -= size
        if self._bytes_left < 0:
            raise MaxBytesExceededError(f'write exceeds the maximum by {-self._bytes_left} bytes')

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        self._charge(1)
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data)
        self._charge(view.nbytes)
        self.inner.write_bytes(view)


class MaxBytesDeserializer(Deserializer, Generic[D]):
    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        self.inner = deserializer
        self._bytes_left = max_bytes

    def _charge(self, size: int) -> None:
        self._bytes_left -= size
        if self._bytes_left < 0:
            raise MaxBytesExceededError(f'read exceeds the maximum by {-self._bytes_left} bytes')

    def _check_peek(self, size: int) -> None:
        if size > self._bytes_left:
            raise MaxBytesExceededError(f'peek exceeds the maximum by {size - self._bytes_left} bytes')

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def remaining(self) -> int:
        return min(self.inner.remaining(), self._bytes_left)

    @override
    def peek_byte(self) -> int:
        self._check_peek(1)
        return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        self._check_peek(n)
        return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        self._charge(1)
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        self._charge(n)
        return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        data = self.inner.read_bytes(self._bytes_left, exact=False)
        self._bytes_left -= len(data)
        if not self.inner.is_empty():
            raise MaxBytesExceededError('trailing data exceeds the maximum')
        return data
