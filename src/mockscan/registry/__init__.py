# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""mockscan registry — discovery of ``@mock_of`` classes and spy lookup."""

from mockscan.registry.decorators import get_mock_of, is_mock, mock_of
from mockscan.registry.registry import MockRegistry, get_mock, get_registry, scan, set_registry
from mockscan.registry.scanner import MockCandidate, MockScanner
from mockscan.registry.settings import RegistrySettings
from mockscan.registry.spy import is_spy, spy

__all__ = [
    "MockCandidate",
    "MockRegistry",
    "MockScanner",
    "RegistrySettings",
    "get_mock",
    "get_mock_of",
    "get_registry",
    "is_mock",
    "is_spy",
    "mock_of",
    "scan",
    "set_registry",
    "spy",
]
