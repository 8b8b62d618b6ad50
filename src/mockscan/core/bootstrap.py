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
"""Apply a :class:`Config` to logging and the default mock registry."""

from __future__ import annotations

from mockscan.core.config import Config
from mockscan.logging.port import LoggingPort
from mockscan.logging.structlog_adapter import StructlogAdapter
from mockscan.registry.registry import MockRegistry, set_registry
from mockscan.registry.settings import RegistrySettings


def configure(config: Config | None = None, logging_port: LoggingPort | None = None) -> MockRegistry:
    """Configure logging and install a fresh default registry.

    Packages listed under ``mockscan.registry.scan_packages`` are scanned
    eagerly so later lookups are plain map hits.

    Args:
        config: Configuration to apply; library defaults when ``None``.
        logging_port: Logging backend to configure; a
            :class:`StructlogAdapter` when ``None``.

    Returns:
        The newly installed default registry.
    """
    config = config if config is not None else Config.defaults()
    logging_port = logging_port if logging_port is not None else StructlogAdapter()
    logging_port.configure(config)
    logger = logging_port.get_logger("mockscan.core")

    settings = config.bind(RegistrySettings)
    registry = MockRegistry(default_depth=settings.default_depth, on_duplicate=settings.on_duplicate)
    set_registry(registry)
    logger.info(
        "registry_configured",
        default_depth=settings.default_depth,
        on_duplicate=settings.on_duplicate,
        scan_packages=settings.scan_packages,
    )

    if settings.scan_packages:
        registry.scan(*settings.scan_packages)
    return registry
