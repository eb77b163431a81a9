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

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from typing_extensions import Self

from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer


class Deserializer(ABC):
    """ Read cursor over a byte window.

    Every read consumes a prefix of the remaining window, `cur_pos()` is the running offset, which is exactly the
    "bytes consumed" that a decode reports. Reads that need more bytes than what is left raise `OutOfDataError`, and
    leave the cursor where it was.
    """

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        """How many bytes were consumed so far."""
        raise NotImplementedError

    @abstractmethod
    def remaining(self) -> int:
        """How many bytes are left in the window."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.remaining() == 0

    @abstractmethod
    def peek_byte(self) -> int:
        """Read a single byte but don't consume it."""
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n bytes but don't consume them."""
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n bytes, when exact=True it errors if there isn't enough data."""
        raise NotImplementedError

    @abstractmethod
    def read_all(self) -> Buffer:
        """Read all bytes until the window is empty."""
        raise NotImplementedError

    def read_struct(self, format: str) -> tuple[Any, ...]:
        size = struct.calcsize(format)
        data = self.read_bytes(size)
        return struct.unpack_from(format, data)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        """Wrap this deserializer so that at most `max_bytes` can be read through the wrapper."""
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    def with_optional_max_bytes(self, max_bytes: int | None) -> Deserializer:
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
