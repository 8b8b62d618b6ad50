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
"""Tests for the mockscan exception hierarchy."""

from acme.shop.ports.greeter import Greeter
from acme.shop.ports.unmocked import Orphan
from mockscan.kernel.exceptions import (
    CandidateLoadError,
    DuplicateMockError,
    InvalidMockDeclarationError,
    MockNotFoundError,
    MockscanException,
)


class TestMockscanException:
    def test_basic_creation(self):
        exc = MockscanException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = MockscanException("bad", code="X_001", context={"key": "value"})
        assert exc.code == "X_001"
        assert exc.context["key"] == "value"

    def test_context_not_shared(self):
        a = MockscanException("a")
        b = MockscanException("b")
        a.context["x"] = 1
        assert b.context == {}


class TestMockNotFoundError:
    def test_message_and_context(self):
        exc = MockNotFoundError(real_type=Orphan, scanned_packages={"b.pkg", "a.pkg"})
        assert "acme.shop.ports.unmocked.Orphan" in str(exc)
        assert "a.pkg, b.pkg" in str(exc)
        assert exc.context["real_type"] == "acme.shop.ports.unmocked.Orphan"
        assert exc.code == "MOCK_NOT_FOUND"

    def test_no_scanned_packages(self):
        exc = MockNotFoundError(real_type=Orphan)
        assert "(none)" in str(exc)
        assert exc.scanned_packages == []

    def test_hierarchy(self):
        exc = MockNotFoundError(real_type=Orphan)
        assert isinstance(exc, MockscanException)
        assert isinstance(exc, LookupError)


class TestOtherErrors:
    def test_candidate_load_error(self):
        exc = CandidateLoadError("a.b.Missing", "no module named a")
        assert exc.class_name == "a.b.Missing"
        assert exc.code == "CANDIDATE_LOAD"
        assert "a.b.Missing" in str(exc)

    def test_duplicate_mock_error(self):
        class First:
            pass

        class Second:
            pass

        exc = DuplicateMockError(real_type=Greeter, existing=First, duplicate=Second)
        assert exc.code == "DUPLICATE_MOCK"
        assert "First" in str(exc) and "Second" in str(exc)

    def test_invalid_declaration_is_type_error(self):
        exc = InvalidMockDeclarationError("bad")
        assert isinstance(exc, TypeError)
        assert isinstance(exc, MockscanException)
