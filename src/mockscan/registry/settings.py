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
"""Registry settings bound from the ``mockscan.registry`` config section."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from mockscan.core.config import config_properties


@config_properties(prefix="mockscan.registry")
class RegistrySettings(BaseModel):
    """Settings for the default :class:`~mockscan.registry.MockRegistry`."""

    default_depth: int = Field(default=2, ge=1)
    on_duplicate: Literal["replace", "error"] = "replace"
    scan_packages: list[str] = Field(default_factory=list)

    @field_validator("scan_packages", mode="before")
    @classmethod
    def _split_packages(cls, value: object) -> object:
        # Env overrides arrive as "a.b,c.d"
        if isinstance(value, str):
            return [p.strip() for p in value.split(",") if p.strip()]
        return value
