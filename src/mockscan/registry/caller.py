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
"""Resolve which module called into mockscan, for default package scans."""

from __future__ import annotations

import inspect

_LIBRARY_PACKAGE = "mockscan"


def _is_internal(module_name: str) -> bool:
    return module_name == _LIBRARY_PACKAGE or module_name.startswith(_LIBRARY_PACKAGE + ".")


def calling_module() -> str:
    """Return the name of the innermost module on the stack outside mockscan.

    Frames are skipped by the module they belong to rather than by a fixed
    depth, so extra layers inside the library do not change the result.
    Returns an empty string if every frame is internal.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            module_name = frame.f_globals.get("__name__", "")
            if module_name and not _is_internal(module_name):
                return module_name
            frame = frame.f_back
        return ""
    finally:
        del frame


def super_package(module_name: str, depth: int = 2) -> str:
    """Keep only the first *depth* dotted segments of *module_name*.

    >>> super_package("myapp.orders.service.tests", 2)
    'myapp.orders'
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")
    return ".".join(module_name.split(".")[:depth])


def calling_super_package(depth: int = 2) -> str:
    """Coarse project-level package of the module that called into mockscan."""
    return super_package(calling_module(), depth)
