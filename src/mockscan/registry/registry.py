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
"""MockRegistry — maps real types to their mock classes and hands out spies."""

from __future__ import annotations

import sys
import threading
from typing import Literal, TypeVar

import structlog

from mockscan.kernel.exceptions import DuplicateMockError, MockNotFoundError
from mockscan.registry.scanner import MockScanner
from mockscan.registry.spy import spy

T = TypeVar("T")

DuplicatePolicy = Literal["replace", "error"]

logger = structlog.get_logger("mockscan.registry")


def package_of(real_type: type) -> str:
    """The package that holds the module *real_type* is defined in.

    For a module at the top level (no parent package) the module name itself
    is returned.
    """
    module_name = real_type.__module__
    module = sys.modules.get(module_name)
    if module is not None and hasattr(module, "__path__"):
        return module_name
    package = getattr(module, "__package__", None) or module_name.rpartition(".")[0]
    return package or module_name


class MockRegistry:
    """Registry of ``real type -> mock class`` mappings.

    Mappings come from package scans (see :class:`MockScanner`) or from
    :meth:`register`. :meth:`get_mock` scans on demand: first the real type's
    own package, then a default package derived from the caller.

    Args:
        default_depth: Leading segments of the caller's module used as the
            default scan package.
        on_duplicate: ``"replace"`` lets the last registration win;
            ``"error"`` keeps the first and rejects different later ones.
    """

    def __init__(self, *, default_depth: int = 2, on_duplicate: DuplicatePolicy = "replace") -> None:
        if on_duplicate not in ("replace", "error"):
            raise ValueError(f"on_duplicate must be 'replace' or 'error', got {on_duplicate!r}")
        if default_depth < 1:
            raise ValueError(f"default_depth must be at least 1, got {default_depth}")
        self._mocks: dict[type, type] = {}
        self._lock = threading.RLock()
        self._on_duplicate: DuplicatePolicy = on_duplicate
        self._scanner = MockScanner(self, default_depth=default_depth)

    @property
    def scanner(self) -> MockScanner:
        return self._scanner

    @property
    def on_duplicate(self) -> DuplicatePolicy:
        return self._on_duplicate

    @property
    def mocks(self) -> dict[type, type]:
        """Snapshot of the current mappings."""
        with self._lock:
            return dict(self._mocks)

    @property
    def scanned_packages(self) -> frozenset[str]:
        return self._scanner.scanned_packages

    def scan(self, *packages: str | None, caller: str | None = None) -> int:
        """Scan *packages* (and subpackages) for ``@mock_of`` classes.

        With no packages, the default package derived from the calling module
        is scanned. Never raises; problems with single modules or classes are
        logged and skipped.
        """
        return self._scanner.scan(*packages, caller=caller)

    def register(self, real_type: type, mock_type: type) -> None:
        """Register *mock_type* as the mock of *real_type* without scanning.

        Raises:
            TypeError: If *mock_type* is not a class.
            DuplicateMockError: If the policy is ``"error"`` and a different
                mock is already registered.
        """
        if not isinstance(mock_type, type):
            raise TypeError(f"mock_type must be a class, got {mock_type!r}")
        self._put(real_type, mock_type, strict=True)

    def get_mock_type(self, real_type: type) -> type | None:
        """Registered mock class for *real_type*, without scanning."""
        with self._lock:
            return self._mocks.get(real_type)

    def get_mock(self, real_type: type[T], *, caller: str | None = None) -> T:
        """Return a fresh spy of the mock registered for *real_type*.

        A new mock instance is constructed on every call.

        Raises:
            MockNotFoundError: If no mock is found after scanning the real
                type's package and the caller's default package.
        """
        logger.debug("mock_lookup", real=real_type.__qualname__)
        mock_type = self.get_mock_type(real_type)
        if mock_type is None:
            package = package_of(real_type)
            logger.debug("mock_missing_scanning_type_package", real=real_type.__qualname__, package=package)
            self.scan(package)
            mock_type = self.get_mock_type(real_type)
        if mock_type is None:
            logger.debug("mock_missing_scanning_default", real=real_type.__qualname__)
            self.scan(caller=caller)
            mock_type = self.get_mock_type(real_type)
        if mock_type is None:
            raise MockNotFoundError(real_type=real_type, scanned_packages=self.scanned_packages)
        return spy(mock_type())

    def reset(self) -> None:
        """Drop every mapping and forget scanned packages. Test isolation only."""
        self._scanner.reset()
        with self._lock:
            self._mocks.clear()

    def _put(self, real_type: type, mock_type: type, *, strict: bool) -> bool:
        """Store a mapping, applying the duplicate policy.

        Returns whether the mapping was stored. With ``strict`` a rejected
        duplicate raises instead of being logged.
        """
        with self._lock:
            existing = self._mocks.get(real_type)
            if existing is not None and existing is not mock_type:
                if self._on_duplicate == "error":
                    if strict:
                        raise DuplicateMockError(real_type=real_type, existing=existing, duplicate=mock_type)
                    logger.error(
                        "duplicate_mock_rejected",
                        real=real_type.__qualname__,
                        existing=existing.__qualname__,
                        duplicate=mock_type.__qualname__,
                    )
                    return False
                logger.warning(
                    "duplicate_mock_replaced",
                    real=real_type.__qualname__,
                    existing=existing.__qualname__,
                    replacement=mock_type.__qualname__,
                )
            self._mocks[real_type] = mock_type
        logger.debug("mock_registered", real=real_type.__qualname__, mock=mock_type.__qualname__)
        return True


_default_registry: MockRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> MockRegistry:
    """Return the process-wide default registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = MockRegistry()
        return _default_registry


def set_registry(registry: MockRegistry) -> MockRegistry:
    """Replace the process-wide default registry, returning the previous one."""
    global _default_registry
    with _default_lock:
        previous = _default_registry if _default_registry is not None else MockRegistry()
        _default_registry = registry
        return previous


def scan(*packages: str | None) -> None:
    """Scan *packages* into the default registry (see :meth:`MockRegistry.scan`)."""
    get_registry().scan(*packages)


def get_mock(real_type: type[T]) -> T:
    """Spy of the mock of *real_type* from the default registry."""
    return get_registry().get_mock(real_type)
