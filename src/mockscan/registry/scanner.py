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
"""Package scanner for auto-discovering ``@mock_of``-decorated classes.

Scanned packages are memoized hierarchically: once ``a.b`` has been scanned,
requests for ``a.b`` or any of its subpackages are no-ops, and classes under
``a.b`` are excluded from later scans of an enclosing package such as ``a``.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import re
import threading
import types
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from mockscan.kernel.exceptions import CandidateLoadError
from mockscan.registry.caller import calling_super_package, super_package
from mockscan.registry.decorators import get_mock_of, is_mock

if TYPE_CHECKING:
    from mockscan.registry.registry import MockRegistry

logger = structlog.get_logger("mockscan.registry.scanner")


@dataclass(frozen=True)
class MockCandidate:
    """A discovered, not yet loaded, mock class."""

    module: str
    qualname: str

    @property
    def class_name(self) -> str:
        return f"{self.module}.{self.qualname}"


def scan_module_mocks(module: types.ModuleType) -> list[MockCandidate]:
    """Extract all ``@mock_of``-decorated classes defined in a module."""
    candidates: list[MockCandidate] = []
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if is_mock(obj) and obj.__module__ == module.__name__:
            candidates.append(MockCandidate(obj.__module__, obj.__qualname__))
    return candidates


def load_candidate(candidate: MockCandidate) -> tuple[type, type]:
    """Load a candidate by name and read its marker.

    Returns:
        ``(real_type, mock_type)``.

    Raises:
        CandidateLoadError: If the class cannot be imported or is not marked.
    """
    try:
        target: object = importlib.import_module(candidate.module)
        for part in candidate.qualname.split("."):
            target = getattr(target, part)
    except (ImportError, AttributeError) as exc:
        raise CandidateLoadError(candidate.class_name, str(exc)) from exc

    if not isinstance(target, type):
        raise CandidateLoadError(candidate.class_name, "not a class")
    real_type = get_mock_of(target)
    if real_type is None:
        raise CandidateLoadError(candidate.class_name, "missing @mock_of marker")
    return real_type, target


def is_covered(package: str, scanned: Iterable[str]) -> bool:
    """Whether *package* equals, or is a subpackage of, any scanned package."""
    return any(package == p or package.startswith(p + ".") for p in scanned)


class MockScanner:
    """Finds mock classes under packages and records them in a registry.

    Args:
        registry: Registry that receives every ``real -> mock`` mapping found.
        default_depth: Number of leading segments of the caller's module kept
            when no package is given to :meth:`scan`.
    """

    def __init__(self, registry: MockRegistry, *, default_depth: int = 2) -> None:
        self._registry = registry
        self._default_depth = default_depth
        self._scanned: set[str] = set()
        self._exclude_patterns: list[re.Pattern[str]] = []
        # Guards discovery, registration and the exclude/scanned update
        self._lock = threading.RLock()

    @property
    def scanned_packages(self) -> frozenset[str]:
        return frozenset(self._scanned)

    @property
    def default_depth(self) -> int:
        return self._default_depth

    def scan(self, *packages: str | None, caller: str | None = None) -> int:
        """Scan packages for mocks and register them.

        Args:
            packages: Dotted package names. Empty or ``None`` entries are
                ignored. If none are given, a single default package is
                derived from *caller*, or from the calling module when
                *caller* is ``None``.
            caller: Module name to derive the default package from.

        Returns:
            Number of mappings registered by this call.
        """
        logger.debug("scan_requested", packages=packages, caller=caller)

        if not packages:
            if caller is not None:
                default = super_package(caller, self._default_depth)
            else:
                default = calling_super_package(self._default_depth)
            logger.debug("default_scan", package=default)
            packages = (default,)

        pending = [p for p in packages if self._needs_scan(p)]
        if not pending:
            return 0

        with self._lock:
            scanned_now: list[str] = []
            candidates: set[MockCandidate] = set()
            for package in pending:
                # Another thread may have finished an enclosing scan while we waited
                if is_covered(package, [*self._scanned, *scanned_now]):
                    logger.debug("already_scanned", package=package)
                    continue
                candidates.update(self._find_candidates(package))
                pattern = re.compile(rf"^{re.escape(package)}\..*")
                logger.debug("exclude_added", pattern=pattern.pattern)
                self._exclude_patterns.append(pattern)
                scanned_now.append(package)

            count = self._register_candidates(candidates)
            # Published only after registration so lookups never see a package
            # as scanned while its mocks are still missing
            self._scanned.update(scanned_now)
        return count

    def reset(self) -> None:
        """Forget every scanned package and exclusion."""
        with self._lock:
            self._scanned.clear()
            self._exclude_patterns.clear()

    def _needs_scan(self, package: str | None) -> bool:
        if not package:
            logger.debug("invalid_package", package=package)
            return False
        if is_covered(package, self.scanned_packages):
            logger.debug("already_scanned", package=package)
            return False
        return True

    def _find_candidates(self, package: str) -> set[MockCandidate]:
        try:
            root = importlib.import_module(package)
        except (Exception, SystemExit) as exc:
            logger.warning("package_import_failed", package=package, error=repr(exc))
            return set()

        modules = [root]
        if hasattr(root, "__path__"):
            modules.extend(self._walk_submodules(root))

        found: set[MockCandidate] = set()
        for module in modules:
            for candidate in scan_module_mocks(module):
                if self._is_excluded(candidate):
                    logger.debug("candidate_excluded", candidate=candidate.class_name)
                    continue
                found.add(candidate)
        logger.debug("candidates_found", package=package, count=len(found))
        return found

    def _walk_submodules(self, package: types.ModuleType) -> list[types.ModuleType]:
        """Import every submodule below *package*, depth first.

        ``__main__`` modules are never imported, since importing one runs the
        package as a program. A module that fails to import, or exits while
        importing, is logged and skipped along with its own submodules.
        """
        modules: list[types.ModuleType] = []
        for _finder, modname, ispkg in pkgutil.iter_modules(package.__path__, prefix=package.__name__ + "."):
            if modname.rpartition(".")[2] == "__main__":
                logger.debug("main_module_skipped", module=modname)
                continue
            try:
                module = importlib.import_module(modname)
            except (Exception, SystemExit) as exc:
                logger.warning("module_import_failed", module=modname, error=repr(exc))
                continue
            modules.append(module)
            if ispkg and hasattr(module, "__path__"):
                modules.extend(self._walk_submodules(module))
        return modules

    def _is_excluded(self, candidate: MockCandidate) -> bool:
        return any(p.match(candidate.class_name) for p in self._exclude_patterns)

    def _register_candidates(self, candidates: Iterable[MockCandidate]) -> int:
        count = 0
        for candidate in candidates:
            try:
                real_type, mock_type = load_candidate(candidate)
            except CandidateLoadError as exc:
                logger.warning("candidate_load_failed", candidate=exc.class_name, reason=exc.reason)
                continue
            logger.debug("mock_found", mock=mock_type.__qualname__, real=real_type.__qualname__)
            if self._registry._put(real_type, mock_type, strict=False):
                count += 1
        return count
