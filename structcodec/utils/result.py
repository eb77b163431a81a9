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
Decoding results as values: `Ok((value, consumed))` when the bytes decode, `Err(error)` when they don't.

`Codec.try_decode` is built with `as_result`, which turns the listed exception types into an `Err`:

>>> @as_result(ValueError)
... def parse(text: str) -> int:
...     return int(text)
>>> parse('12')
Ok(12)
>>> parse('x').is_err()
True
>>> parse('x').unwrap_or(0)
0
>>> Err(KeyError('k')).unwrap()
Traceback (most recent call last):
...
structcodec.utils.result.UnwrapError: Called `Result.unwrap()` on an `Err` value: KeyError('k')
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Literal, NoReturn, ParamSpec, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)
E = TypeVar('E', covariant=True)
U = TypeVar('U')
P = ParamSpec('P')
TE = TypeVar('TE', bound=Exception)


class Ok(Generic[T]):
    """The decoded value."""

    __slots__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, _default: U) -> T:
        return self._value


class Err(Generic[E]):
    """The error that stopped the decoding."""

    __slots__ = ('_value',)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f'Called `Result.unwrap()` on an `Err` value: {self._value!r}')
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_or(self, default: U) -> U:
        return default


Result: TypeAlias = Ok[T] | Err[E]


class UnwrapError(Exception):
    """Raised by `Err.unwrap()`, the `Err` is kept in `.result` and its error is the `__cause__`."""

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.result = result


def as_result(*exceptions: type[TE]) -> Callable[[Callable[P, T]], Callable[P, Result[T, TE]]]:
    """ Decorator factory: the wrapped function returns `Ok(return_value)`, or `Err(exc)` for the given exceptions.

    Any other exception propagates.
    """
    if not exceptions or not all(isinstance(exc, type) and issubclass(exc, BaseException) for exc in exceptions):
        raise TypeError('as_result() requires one or more exception types')

    def decorator(f: Callable[P, T]) -> Callable[P, Result[T, TE]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, TE]:
            try:
                return Ok(f(*args, **kwargs))
            except exceptions as exc:
                return Err(exc)

        return wrapper

    return decorator


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()
