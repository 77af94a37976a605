# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import pytest

from clidecl import OptionDefinition, OptionRegistry


@pytest.fixture
def registry() -> OptionRegistry:
    return OptionRegistry(
        [
            OptionDefinition(primary_name="/z", setting_name="zed"),
            OptionDefinition(primary_name="/a", alternative_name="/alpha"),
            OptionDefinition(primary_name="/M"),
        ]
    )


@pytest.mark.registry
class TestOptionRegistry:
    def test_sorted_by_primary_name(self, registry):
        assert [o.primary_name for o in registry] == ["/M", "/a", "/z"]
        assert len(registry) == 3

    def test_index_lookup(self, registry):
        assert registry[0].primary_name == "/M"
        assert registry[-1].primary_name == "/z"
        assert [o.primary_name for o in registry[1:]] == ["/a", "/z"]

    def test_name_lookup(self, registry):
        assert registry["/a"] is registry[1]
        assert registry.by_name("/z") is registry[2]

        with pytest.raises(KeyError):
            registry["/alpha"]
        with pytest.raises(KeyError):
            registry.by_name("/missing")

    def test_get(self, registry):
        assert registry.get("/a") is registry[1]
        assert registry.get("/alpha") is None
        assert registry.get("/missing") is None

    def test_contains(self, registry):
        assert "/a" in registry
        assert "/alpha" not in registry
        assert registry[0] in registry
        assert OptionDefinition(primary_name="/q") not in registry

    def test_find(self, registry):
        assert registry.find("/alpha") is registry["/a"]
        assert registry.find("/m") is None
        assert registry.find("/m", case_sensitive=False) is registry["/M"]
        assert registry.find("/ALPHA", case_sensitive=False) is None

    def test_find_setting(self, registry):
        assert registry.find_setting("zed") is registry["/z"]
        assert registry.find_setting("ZED") is None
        assert registry.find_setting("") is None

    def test_mapping_keys(self):
        registry = OptionRegistry([OptionDefinition(alternative_name="--only"), OptionDefinition(primary_name="/b")])

        assert set(registry.mapping) == {"--only", "/b"}
        assert registry[0].alternative_name == "--only"

    def test_duplicate_names(self):
        with pytest.raises(ValueError, match="Duplicate"):
            OptionRegistry([OptionDefinition(primary_name="/a"), OptionDefinition(primary_name="/a", has_argument=True)])

    def test_rejects_non_options(self):
        with pytest.raises(TypeError):
            OptionRegistry(["/a"])

    def test_equality(self, registry):
        same = OptionRegistry(list(registry))

        assert same == registry
        assert hash(same) == hash(registry)
        assert OptionRegistry() != registry
        assert len(OptionRegistry()) == 0

    def test_repr(self, registry):
        assert repr(registry) == "OptionRegistry('/M', '/a', '/z')"
