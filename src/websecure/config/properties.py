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
"""Settings bound from ``websecure.*`` and the effective header configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.merge import merge_layers
from websecure.config.model import SecurityConfig
from websecure.config.presets import resolve_template
from websecure.core.config import Config, config_properties


@config_properties(prefix="websecure")
@dataclass
class WebSecureProperties:
    """Configuration for websecure (websecure.*).

    ``template`` names a built-in template or preset layered over the
    defaults; ``headers`` is a partial configuration layered over that.
    """

    environment: str = "development"
    template: str | None = None
    headers: dict = field(default_factory=dict)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def build_security_config(config: Config) -> SecurityConfig:
    """Resolve defaults <- template <- headers from application settings."""
    props = config.bind(WebSecureProperties)
    template = resolve_template(props.template).config if props.template else None
    return merge_layers(DEFAULT_CONFIG, template, props.headers)
