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
"""mockscan — discover ``@mock_of`` test doubles by package scanning.

Usage::

    from mockscan import get_mock, mock_of

    @mock_of(Greeter)
    class GreeterMock(Greeter):
        def greet(self) -> str:
            return "hi"

    greeter = get_mock(Greeter)      # spy of a fresh GreeterMock
    greeter.greet.return_value = "bye"
"""

from mockscan.core.bootstrap import configure
from mockscan.core.config import Config
from mockscan.kernel.exceptions import (
    CandidateLoadError,
    DuplicateMockError,
    InvalidMockDeclarationError,
    MockNotFoundError,
    MockscanException,
)
from mockscan.registry import (
    MockRegistry,
    MockScanner,
    get_mock,
    get_registry,
    is_mock,
    is_spy,
    mock_of,
    scan,
    set_registry,
    spy,
)

__all__ = [
    "CandidateLoadError",
    "Config",
    "DuplicateMockError",
    "InvalidMockDeclarationError",
    "MockNotFoundError",
    "MockRegistry",
    "MockScanner",
    "MockscanException",
    "configure",
    "get_mock",
    "get_registry",
    "is_mock",
    "is_spy",
    "mock_of",
    "scan",
    "set_registry",
    "spy",
]
