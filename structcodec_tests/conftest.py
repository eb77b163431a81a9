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

import os
import sys

import structlog

from structcodec.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['STRUCTCODEC_CONFIG_YAML'] = os.environ.get('STRUCTCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# structlog prints to stdout by default, which doctest would capture as unexpected output
structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))
