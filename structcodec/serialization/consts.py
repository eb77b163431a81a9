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

# length prefixes (text byte-length and sequence count) are always 4-byte big-endian unsigned integers
LENGTH_PREFIX_SIZE = 4
MAX_LENGTH_PREFIX = 2**32 - 1

# the union discriminant is a single byte, so at most 256 variants can be addressed
DISCRIMINANT_SIZE = 1
MAX_VARIANTS = 256

# optional tag values
OPTIONAL_ABSENT = 0x00
OPTIONAL_PRESENT = 0x01
