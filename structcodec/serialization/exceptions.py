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


class SerializationError(ValueError):
    """ Base class for every error raised while decoding (and some while encoding) a byte sequence.

    It is a `ValueError` so callers that only care about "bad input" don't need to know about this hierarchy.
    """
    pass


class OutOfDataError(SerializationError):
    """ The input window is shorter than what the current decode step requires (truncated input).
    """
    pass


class TooLongError(SerializationError):
    """ A declared length or count is above the configured (or format) limit.
    """
    pass


class BadDataError(SerializationError):
    """ The bytes are long enough but don't describe a valid value.
    """
    pass


class InvalidDiscriminantError(BadDataError):
    """ An optional tag, a union variant index or an address family is outside of its valid set.
    """
    pass


class InvalidTextEncodingError(BadDataError):
    """ The bytes declared for a text string are not valid UTF-8.
    """
    pass


class InvalidValueError(BadDataError):
    """ The decoded value fails a post-condition of its target type (e.g. timestamp overflow).
    """
    pass


class UnsupportedTypeError(TypeError):
    """ A codec cannot be derived for the given type.

    This is a derivation-time error, it is raised when a codec is built (usually when a class is decorated), never
    while decoding.
    """
    pass
