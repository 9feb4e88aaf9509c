"""Tests for the domain layer."""

import pytest
from dataclasses import FrozenInstanceError

from multimod.domain import (
    ModuleSet,
    ModuleInfo,
    ModuleTagName,
    VersioningConfig,
    REPO_ROOT_TAG,
)


class TestModuleTagName:
    """Tests for the root / named tag name variant."""

    def test_root_tag_is_root(self):
        assert REPO_ROOT_TAG.is_root
        assert ModuleTagName.root() == REPO_ROOT_TAG

    def test_named_tag_is_not_root(self):
        tag = ModuleTagName("sdk/metric")
        assert not tag.is_root
        assert tag.path == "sdk/metric"

    def test_named_tag_never_equals_root(self):
        """A directory literally named like a sentinel is still a named tag."""
        assert ModuleTagName("repoRootTag") != REPO_ROOT_TAG

    def test_full_tag(self):
        assert REPO_ROOT_TAG.full_tag("v1.0.0") == "v1.0.0"
        assert ModuleTagName("bridge/opencensus").full_tag("v0.20.0") == "bridge/opencensus/v0.20.0"

    def test_str(self):
        assert str(ModuleTagName("trace")) == "trace"
        assert str(REPO_ROOT_TAG) == "<repo root>"

    def test_immutable(self):
        tag = ModuleTagName("trace")
        with pytest.raises(FrozenInstanceError):
            tag.path = "other"


class TestModuleSet:

    def test_to_dict(self):
        module_set = ModuleSet(version="v1.0.0", modules=("a", "b"))
        assert module_set.to_dict() == {"version": "v1.0.0", "modules": ["a", "b"]}

    def test_module_info_to_dict(self):
        info = ModuleInfo(set_name="stable-v1", version="v1.0.0")
        assert info.to_dict() == {"module_set": "stable-v1", "version": "v1.0.0"}


class TestVersioningConfig:

    def test_module_sets_are_read_only(self):
        config = VersioningConfig(module_sets={"s": ModuleSet("v1.0.0", ("a",))})
        with pytest.raises(TypeError):
            config.module_sets["other"] = ModuleSet("v2.0.0")

    def test_source_dict_changes_do_not_leak(self):
        sets = {"s": ModuleSet("v1.0.0", ("a",))}
        config = VersioningConfig(module_sets=sets)
        sets["t"] = ModuleSet("v2.0.0")
        assert list(config.module_sets) == ["s"]

    def test_excluded_modules_become_tuple(self):
        config = VersioningConfig(excluded_modules=["x", "y"])
        assert config.excluded_modules == ("x", "y")

    def test_equality(self):
        a = VersioningConfig({"s": ModuleSet("v1.0.0", ("a",))}, ("x",))
        b = VersioningConfig({"s": ModuleSet("v1.0.0", ("a",))}, ("x",))
        assert a == b
        assert hash(a) == hash(b)
        assert a != VersioningConfig({"s": ModuleSet("v1.1.0", ("a",))}, ("x",))
