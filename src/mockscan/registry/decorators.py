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
"""The ``@mock_of`` marker that declares a class the mock of a real type."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from mockscan.kernel.exceptions import InvalidMockDeclarationError

T = TypeVar("T", bound=type)

MOCK_OF_ATTR = "__mockscan_mock_of__"


def mock_of(real_type: type) -> Callable[[T], T]:
    """Mark a class as the mock implementation of *real_type*.

    The marker is stored on the decorated class itself and is not inherited,
    so subclasses of a mock are not mocks unless decorated again.

    Usage::

        @mock_of(Greeter)
        class GreeterMock(Greeter):
            def greet(self) -> str:
                return "hi"
    """
    if not isinstance(real_type, type):
        raise InvalidMockDeclarationError(
            f"@mock_of expects a class or interface, got {real_type!r}",
            code="INVALID_MOCK_TARGET",
        )

    def decorator(cls: T) -> T:
        if not isinstance(cls, type):
            raise InvalidMockDeclarationError(
                f"@mock_of({real_type.__name__}) can only decorate classes, got {cls!r}",
                code="INVALID_MOCK_DECLARATION",
            )
        setattr(cls, MOCK_OF_ATTR, real_type)
        return cls

    return decorator


def get_mock_of(cls: type) -> type | None:
    """Return the real type *cls* was declared a mock of, or ``None``."""
    return vars(cls).get(MOCK_OF_ATTR)


def is_mock(obj: object) -> bool:
    """Check whether *obj* is a class decorated with ``@mock_of``."""
    return isinstance(obj, type) and get_mock_of(obj) is not None
