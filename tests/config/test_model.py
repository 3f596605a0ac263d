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
"""Tests for the SecurityConfig model."""

import copy
import dataclasses
import pickle
from dataclasses import FrozenInstanceError
from types import MappingProxyType

import pytest

from websecure.config.defaults import DEFAULT_CONFIG
from websecure.config.model import (
    FEATURE_TYPES,
    ContentSecurityPolicy,
    Hsts,
    MergeStrategy,
    PermissionsPolicy,
    SecurityConfig,
    XFrameOptions,
    merge_strategy,
)


class TestFeatureDefaults:
    def test_every_feature_disabled_by_default(self):
        for feature_type in FEATURE_TYPES.values():
            assert feature_type().enabled is False

    def test_empty_config_has_no_features(self):
        assert all(sub is None for _, sub in SecurityConfig().items())

    def test_feature_order(self):
        names = [name for name, _ in SecurityConfig().items()]
        assert names[:3] == ["content_security_policy", "x_frame_options", "secure_cookies"]
        assert names[-1] == "cross_origin_resource_policy"
        assert len(names) == 12


class TestMergeStrategyTags:
    def test_union_fields(self):
        strategies = {f.name: merge_strategy(f) for f in dataclasses.fields(ContentSecurityPolicy)}
        assert strategies["directives"] is MergeStrategy.UNION
        assert strategies["report_only"] is MergeStrategy.REPLACE

        features = {f.name: merge_strategy(f) for f in dataclasses.fields(PermissionsPolicy)}
        assert features["features"] is MergeStrategy.UNION

    def test_scalar_features_are_replace_only(self):
        for f in dataclasses.fields(Hsts):
            assert merge_strategy(f) is MergeStrategy.REPLACE


class TestImmutability:
    def test_feature_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            XFrameOptions(enabled=True).enabled = False  # type: ignore[misc]

    def test_directives_are_read_only(self):
        csp = ContentSecurityPolicy(enabled=True, directives={"defaultSrc": ["'self'"]})
        with pytest.raises(TypeError):
            csp.directives["scriptSrc"] = ("'self'",)  # type: ignore[index]

    def test_lists_are_stored_as_tuples(self):
        csp = ContentSecurityPolicy(directives={"defaultSrc": ["'self'"]})
        assert csp.directives["defaultSrc"] == ("'self'",)

    def test_directive_keys_are_camel_case(self):
        csp = ContentSecurityPolicy(directives={"script-src": ["'self'"], "frame_ancestors": ["'none'"]})
        assert set(csp.directives) == {"scriptSrc", "frameAncestors"}

    def test_permission_feature_names_kept_verbatim(self):
        policy = PermissionsPolicy(features={"display-capture": "'none'"})
        assert "display-capture" in policy.features


class TestValueSemantics:
    def test_config_is_hashable(self):
        assert hash(DEFAULT_CONFIG) == hash(copy.deepcopy(DEFAULT_CONFIG))
        assert len({DEFAULT_CONFIG, copy.deepcopy(DEFAULT_CONFIG), SecurityConfig()}) == 2

    def test_different_directives_hash_differently(self):
        first = ContentSecurityPolicy(enabled=True, directives={"defaultSrc": ["'self'"]})
        second = ContentSecurityPolicy(enabled=True, directives={"defaultSrc": ["'none'"]})
        assert first != second
        assert len({first, second}) == 2

    def test_deepcopy_keeps_read_only_mappings(self):
        clone = copy.deepcopy(DEFAULT_CONFIG)
        assert clone == DEFAULT_CONFIG
        assert isinstance(clone.content_security_policy.directives, MappingProxyType)
        assert isinstance(clone.permissions_policy.features, MappingProxyType)

    def test_pickle(self):
        restored = pickle.loads(pickle.dumps(DEFAULT_CONFIG))
        assert restored == DEFAULT_CONFIG
        assert isinstance(restored.content_security_policy.directives, MappingProxyType)
        assert restored.content_security_policy.directives["defaultSrc"] == ("'self'",)


class TestToDict:
    def test_camel_case_export(self):
        data = DEFAULT_CONFIG.to_dict()
        assert data["hsts"] == {
            "enabled": True,
            "maxAge": 31536000,
            "includeSubDomains": True,
            "preload": True,
        }
        assert data["xFrameOptions"] == {"enabled": True, "option": "DENY"}
        assert data["contentSecurityPolicy"]["directives"]["defaultSrc"] == ["'self'"]

    def test_snake_case_export(self):
        data = DEFAULT_CONFIG.to_dict(camel_case=False)
        assert data["hsts"]["include_sub_domains"] is True
        assert "content_security_policy" in data

    def test_absent_values_are_omitted(self):
        data = SecurityConfig(hsts=Hsts(enabled=True)).to_dict()
        assert data == {"hsts": {"enabled": True, "includeSubDomains": False, "preload": False}}

    def test_exported_values_are_plain_types(self):
        data = DEFAULT_CONFIG.to_dict()
        assert type(data["xFrameOptions"]["option"]) is str
        assert isinstance(data["contentSecurityPolicy"]["directives"], dict)

    def test_from_dict_restores_export(self):
        assert SecurityConfig.from_dict(DEFAULT_CONFIG.to_dict()) == DEFAULT_CONFIG


class TestFromDict:
    def test_builds_without_defaults(self):
        config = SecurityConfig.from_dict({"xFrameOptions": {"enabled": True, "option": "SAMEORIGIN"}})
        assert config.x_frame_options == XFrameOptions(enabled=True, option="SAMEORIGIN")
        assert config.hsts is None
        assert config.content_security_policy is None
