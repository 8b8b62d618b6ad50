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
"""Tests for configure() bootstrap of logging and the default registry."""

import pytest

from acme.shop.ports.clock import Clock
from acme.shop.ports.clock_mock import ClockMock
from mockscan.core.bootstrap import configure
from mockscan.core.config import Config
from mockscan.logging.port import LoggingPort
from mockscan.registry.registry import get_registry, set_registry


@pytest.fixture
def restore_default_registry():
    previous = get_registry()
    yield
    set_registry(previous)


class TestConfigure:
    def test_installs_new_default_registry(self, restore_default_registry):
        before = get_registry()
        registry = configure(Config({}))
        assert registry is get_registry()
        assert registry is not before

    def test_applies_registry_settings(self, restore_default_registry):
        registry = configure(
            Config({"mockscan": {"registry": {"default_depth": 3, "on_duplicate": "error"}}})
        )
        assert registry.scanner.default_depth == 3
        assert registry.on_duplicate == "error"

    def test_scans_configured_packages(self, restore_default_registry):
        registry = configure(Config({"mockscan": {"registry": {"scan_packages": ["acme.shop.ports"]}}}))
        assert registry.get_mock_type(Clock) is ClockMock
        assert registry.scanned_packages == {"acme.shop.ports"}

    def test_defaults_when_no_config(self, restore_default_registry):
        registry = configure()
        assert registry.scanner.default_depth == 2
        assert registry.mocks == {}


class _RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def info(self, event: str, **kw) -> None:
        self.events.append((event, kw))


class _RecordingLoggingPort:
    def __init__(self) -> None:
        self.configured: list[Config] = []
        self.logger_names: list[str] = []
        self.levels: dict[str, str] = {}
        self.logger = _RecordingLogger()

    def configure(self, config: Config) -> None:
        self.configured.append(config)

    def get_logger(self, name: str) -> _RecordingLogger:
        self.logger_names.append(name)
        return self.logger

    def set_level(self, name: str, level: str) -> None:
        self.levels[name] = level


class TestConfigureLoggingPort:
    def test_custom_port_is_configured_and_used(self, restore_default_registry):
        port = _RecordingLoggingPort()
        config = Config({"mockscan": {"registry": {"default_depth": 3}}})
        configure(config, logging_port=port)
        assert port.configured == [config]
        assert port.logger_names == ["mockscan.core"]
        event, fields = port.logger.events[0]
        assert event == "registry_configured"
        assert fields["default_depth"] == 3

    def test_recording_port_satisfies_protocol(self):
        assert isinstance(_RecordingLoggingPort(), LoggingPort)
