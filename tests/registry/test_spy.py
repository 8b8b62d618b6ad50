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
"""Tests for spy wrapping of mock instances."""

import pytest

from acme.shop.adapters.greeter_mock import GREETING, GreeterMock
from acme.shop.adapters.nested.store_mock import StoreMock
from acme.shop.ports.clock_mock import FIXED_NOW, ClockMock
from mockscan.registry.spy import is_spy, spy


class TestSpyDefaults:
    def test_forwards_to_real_method(self):
        greeter = spy(GreeterMock())
        assert greeter.greet() == GREETING

    def test_returns_same_instance(self):
        instance = GreeterMock()
        assert spy(instance) is instance

    def test_keeps_instance_state(self):
        store = spy(StoreMock())
        store.put("sku", "42")
        assert store.get("sku") == "42"
        assert store.data == {"sku": "42"}

    def test_records_calls(self):
        store = spy(StoreMock())
        store.put("sku", "42")
        store.put.assert_called_once_with("sku", "42")
        store.get.assert_not_called()

    def test_wraps_static_methods(self):
        clock = spy(ClockMock())
        assert clock.zone() == "UTC"
        clock.zone.assert_called_once_with()

    def test_wraps_inherited_methods(self):
        clock = spy(ClockMock())
        assert clock.later(5) == FIXED_NOW + 5
        clock.later.assert_called_once_with(5)

    def test_is_spy(self):
        assert is_spy(spy(GreeterMock()))
        assert not is_spy(GreeterMock())
        assert not is_spy(object())


class TestSpyOverrides:
    def test_return_value_override(self):
        greeter = spy(GreeterMock())
        greeter.greet.return_value = "bye"
        assert greeter.greet() == "bye"

    def test_side_effect_raises(self):
        greeter = spy(GreeterMock())
        greeter.greet.side_effect = TimeoutError("slow")
        with pytest.raises(TimeoutError):
            greeter.greet()

    def test_override_visible_to_internal_calls(self):
        clock = spy(ClockMock())
        clock.now.return_value = 5.0
        assert clock.later(1) == 6.0

    def test_override_does_not_leak_to_other_spies(self):
        first = spy(GreeterMock())
        second = spy(GreeterMock())
        first.greet.return_value = "bye"
        assert second.greet() == GREETING

    def test_class_is_untouched(self):
        greeter = spy(GreeterMock())
        greeter.greet.return_value = "bye"
        assert GreeterMock().greet() == GREETING


class TestSpyErrors:
    def test_slotted_instance_rejected(self):
        class Slotted:
            __slots__ = ()

            def run(self) -> None:
                pass

        with pytest.raises(TypeError):
            spy(Slotted())


class TestSpyInheritance:
    def test_property_override_of_base_method_left_alone(self):
        class Base:
            def value(self) -> int:
                return 1

            def label(self) -> str:
                return "base"

        class Child(Base):
            @property
            def value(self) -> int:  # type: ignore[override]
                return 2

        child = spy(Child())
        assert child.value == 2
        assert child.label() == "base"
        child.label.assert_called_once_with()

    def test_plain_attribute_override_of_base_method_left_alone(self):
        class Base:
            def mode(self) -> str:
                return "call"

        class Child(Base):
            mode = "fixed"  # type: ignore[assignment]

        child = spy(Child())
        assert child.mode == "fixed"

    def test_inherited_method_is_spied(self):
        class Base:
            def ping(self) -> str:
                return "pong"

        class Child(Base):
            pass

        child = spy(Child())
        assert child.ping() == "pong"
        child.ping.assert_called_once_with()
