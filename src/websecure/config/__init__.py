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
"""websecure config: model, defaults, merging, presets and file import/export."""

from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.io import dump_config, load_config_file
from websecure.config.merge import merge_config, merge_layers
from websecure.config.model import (
    ContentSecurityPolicy,
    CrossOriginEmbedderPolicy,
    CrossOriginOpenerPolicy,
    CrossOriginResourcePolicy,
    ExpectCt,
    Hsts,
    PermissionsPolicy,
    ReferrerPolicy,
    SecureCookies,
    SecurityConfig,
    XContentTypeOptions,
    XFrameOptions,
    XssProtection,
)
from websecure.config.presets import SecurityTemplate, get_preset, get_template, list_templates

__all__ = [
    "DEFAULT_CONFIG",
    "ContentSecurityPolicy",
    "CrossOriginEmbedderPolicy",
    "CrossOriginOpenerPolicy",
    "CrossOriginResourcePolicy",
    "ExpectCt",
    "Hsts",
    "PermissionsPolicy",
    "ReferrerPolicy",
    "SecureCookies",
    "SecurityConfig",
    "SecurityTemplate",
    "XContentTypeOptions",
    "XFrameOptions",
    "XssProtection",
    "dump_config",
    "get_preset",
    "get_template",
    "list_templates",
    "load_config_file",
    "merge_config",
    "merge_layers",
]
