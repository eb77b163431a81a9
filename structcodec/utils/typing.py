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

from typing import Any


def is_newtype(type_: Any) -> bool:
    """ Whether the given object was made with `typing.NewType`.

    >>> from typing import NewType
    >>> is_newtype(NewType('N', int))
    True
    >>> is_newtype(int)
    False
    """
    return getattr(type_, '__supertype__', None) is not None


def type_name(type_: Any) -> str:
    """ Shows a cleaner string representation for a type, used in logs and error messages.

    >>> type_name(int)
    'int'
    >>> type_name(list[int])
    'list[int]'
    >>> type_name(None)
    'None'
    """
    if type_ is None or type_ is type(None):
        return 'None'
    if hasattr(type_, '__args__'):
        return str(type_)
    return getattr(type_, '__qualname__', None) or getattr(type_, '__name__', None) or repr(type_)
