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
Compound encoders delegate the encoding of the values they contain to other encoders.

For example the encoder of `list[T]` writes its own count prefix and then calls an encoder for `T` once per element.
They don't know how a Python type maps to an encoder, that is resolved by `structcodec.codecs`, they just receive
already resolved `Encoder`/`Decoder` callables. Each submodule `x` deals with a single shape:

    def encode_x(serializer: Serializer, value: ValueType, ...inner encoders...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...inner decoders...) -> ValueType:
        ...

Decoders never catch errors raised by the inner decoders, the first failure propagates as is and no partially built
value is returned.
"""

from typing import Protocol, TypeVar

from structcodec.serialization.deserializer import Deserializer
from structcodec.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
