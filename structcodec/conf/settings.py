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

from pathlib import Path
from typing import Union

from pydantic import field_validator

from structcodec.serialization.consts import MAX_LENGTH_PREFIX, MAX_VARIANTS
from structcodec.utils import pydantic
from structcodec.utils.yaml import dict_from_yaml

DEFAULT_MAX_SEQUENCE_LENGTH = 2**20


class CodecSettings(pydantic.BaseModel):
    # Maximum declared byte length accepted for a text string, the wire format itself can't go past 2**32 - 1
    MAX_TEXT_BYTES: int = MAX_LENGTH_PREFIX

    # Maximum declared element count accepted for a sequence (list, variable tuple or bytes), zero-width elements
    # (unit records, empty tuples) are decoded once per declared element without consuming any input
    MAX_SEQUENCE_LENGTH: int = DEFAULT_MAX_SEQUENCE_LENGTH

    # Maximum number of variants in a tagged union, fixed by the 1-byte discriminant
    MAX_UNION_VARIANTS: int = MAX_VARIANTS

    @field_validator('MAX_TEXT_BYTES', 'MAX_SEQUENCE_LENGTH')
    @classmethod
    def _check_length_limit(cls, value: int) -> int:
        if not 0 <= value <= MAX_LENGTH_PREFIX:
            raise ValueError(f'must be between 0 and {MAX_LENGTH_PREFIX}')
        return value

    @field_validator('MAX_UNION_VARIANTS')
    @classmethod
    def _check_union_variants(cls, value: int) -> int:
        if not 1 <= value <= MAX_VARIANTS:
            raise ValueError(f'must be between 1 and {MAX_VARIANTS}')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
