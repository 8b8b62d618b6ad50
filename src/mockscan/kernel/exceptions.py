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
"""Unified exception hierarchy for mockscan.

All library exceptions inherit from MockscanException, so callers can catch
one base type or a specific subclass.

Categories:
- MockNotFoundError: no mock could be located for a requested type (public)
- CandidateLoadError: a discovered mock class could not be loaded (internal)
- DuplicateMockError: two mock classes claim the same real type
- InvalidMockDeclarationError: @mock_of used on something that is not a class
"""

from __future__ import annotations

from collections.abc import Iterable


class MockscanException(Exception):
    """Base exception for all mockscan errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MOCK_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class MockNotFoundError(MockscanException, LookupError):
    """No mock class is registered for the requested real type.

    Raised after the type's own package and the caller's default package
    have both been scanned without finding a ``@mock_of`` declaration.
    """

    def __init__(self, *, real_type: type, scanned_packages: Iterable[str] = ()) -> None:
        self.real_type = real_type
        self.scanned_packages = sorted(scanned_packages)

        type_name = f"{real_type.__module__}.{real_type.__qualname__}"
        lines = [f"Could not find mock of class '{type_name}'"]
        lines.append("")
        if self.scanned_packages:
            lines.append(f"  Scanned packages: {', '.join(self.scanned_packages)}")
        else:
            lines.append("  Scanned packages: (none)")
        lines.append("")
        lines.append("  Suggestions:")
        lines.append(f"    - Decorate a class with @mock_of({real_type.__name__})")
        lines.append("    - Call scan('<package>') with the package that holds the mock")
        lines.append("    - Or register it explicitly with MockRegistry.register()")

        super().__init__(
            "\n".join(lines),
            code="MOCK_NOT_FOUND",
            context={"real_type": type_name, "scanned_packages": self.scanned_packages},
        )


class CandidateLoadError(MockscanException):
    """A discovered mock candidate could not be loaded or has no marker."""

    def __init__(self, class_name: str, reason: str) -> None:
        self.class_name = class_name
        self.reason = reason
        super().__init__(
            f"Couldn't load mock candidate '{class_name}': {reason}",
            code="CANDIDATE_LOAD",
            context={"class_name": class_name},
        )


class DuplicateMockError(MockscanException):
    """A second, different mock class was registered for the same real type."""

    def __init__(self, *, real_type: type, existing: type, duplicate: type) -> None:
        self.real_type = real_type
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Real type '{real_type.__qualname__}' already has mock "
            f"'{existing.__qualname__}', refusing '{duplicate.__qualname__}'",
            code="DUPLICATE_MOCK",
            context={
                "real_type": real_type.__qualname__,
                "existing": existing.__qualname__,
                "duplicate": duplicate.__qualname__,
            },
        )


class InvalidMockDeclarationError(MockscanException, TypeError):
    """``@mock_of`` was given, or applied to, something that is not a class."""
