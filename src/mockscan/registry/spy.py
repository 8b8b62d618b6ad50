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
"""Spy wrapping for mock instances, built on ``unittest.mock``."""

from __future__ import annotations

import inspect
from typing import Any, TypeVar
from unittest.mock import MagicMock

T = TypeVar("T")

_SPY_ATTR = "__mockscan_spy__"


def _spyable_names(cls: type) -> list[str]:
    """Public methods, staticmethods and classmethods, by their nearest definition.

    A name overridden lower in the MRO by a property or plain attribute is
    not a method on this class and is left alone.
    """
    seen: set[str] = set()
    names: list[str] = []
    for klass in inspect.getmro(cls):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if name.startswith("_") or name in seen:
                continue
            seen.add(name)
            if inspect.isfunction(value) or isinstance(value, (staticmethod, classmethod)):
                names.append(name)
    return names


def spy(instance: T) -> T:
    """Wrap every public method of *instance* in a call-through MagicMock.

    The instance keeps its class and state. Each method becomes a
    ``MagicMock(wraps=<bound method>)`` set on the instance, so it runs the
    real body by default and records calls. Per-instance overrides use the
    normal mock API::

        greeter = spy(GreeterMock())
        greeter.greet.return_value = "bye"
        greeter.greet.side_effect = TimeoutError()
    """
    if not hasattr(instance, "__dict__"):
        raise TypeError(f"Cannot spy on {type(instance).__name__}: instances have no __dict__")

    cls = type(instance)
    for name in _spyable_names(cls):
        target: Any = getattr(instance, name)
        setattr(instance, name, MagicMock(wraps=target, name=f"{cls.__name__}.{name}"))
    setattr(instance, _SPY_ATTR, True)
    return instance


def is_spy(obj: object) -> bool:
    """Check whether *obj* was produced by :func:`spy`."""
    return bool(getattr(obj, "__dict__", {}).get(_SPY_ATTR, False))
