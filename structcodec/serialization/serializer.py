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
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer


class Serializer(ABC):
    """ Append-only byte sink used by every encoder.

    Encoders never look back at what was written, they only append, so the output of a compound value is always the
    concatenation of the outputs of its parts in the order they were written.
    """

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        """How many bytes were written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        raise NotImplementedError

    def write_struct(self, data: tuple[Any, ...], format: str) -> None:
        self.write_bytes(struct.pack(format, *data))

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        """Wrap this serializer so that at most `max_bytes` can be written through the wrapper."""
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    def with_optional_max_bytes(self, max_bytes: int | None) -> Serializer:
        """Same as `with_max_bytes`, but `None` means unbounded and returns `self`."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
