# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from types import SimpleNamespace

import pytest

from clidecl import OptionBuilder, OptionDefinition
from clidecl.option import noop_setter


@pytest.mark.option
@pytest.mark.builder
class TestOptionBuilder:
    def test_builder_from_definition(self):
        assert isinstance(OptionDefinition.builder("/f"), OptionBuilder)

    def test_build_defaults(self):
        option = OptionDefinition.builder("/f").build()

        assert option == OptionDefinition(primary_name="/f")

    def test_all_toggles(self):
        option = (
            OptionDefinition.builder("-o")
            .alternative_name("--output")
            .setting_name("output")
            .argument_name("file")
            .description("Output file")
            .required()
            .has_argument()
            .multiple()
            .build()
        )

        assert option.primary_name == "-o"
        assert option.alternative_name == "--output"
        assert option.setting_name == "output"
        assert option.argument_name == "file"
        assert option.description == "Output file"
        assert option.required
        assert option.has_argument
        assert option.multiple

    def test_toggles_can_be_reset(self):
        option = (
            OptionDefinition.builder("-o")
            .alternative_name("--output")
            .alternative_name(None)
            .description("text")
            .description(None)
            .required()
            .required(False)  # noqa: FBT003
            .build()
        )

        assert option.alternative_name == ""
        assert option.description == ""
        assert not option.required

    @pytest.mark.parametrize("name", [None, ""])
    def test_rejects_missing_name(self, name):
        with pytest.raises(ValueError):
            OptionBuilder(name)

    def test_rejects_non_string_name(self):
        with pytest.raises(TypeError):
            OptionBuilder(42)

    def test_setter(self):
        seen = []
        option = OptionDefinition.builder("/f").setter(lambda target, raw: seen.append(raw)).build()
        option.setter(None, "x")

        assert seen == ["x"]

    def test_setter_without_value(self):
        seen = []
        option = OptionDefinition.builder("/f").setter(lambda target: seen.append(target), None).build()
        option.setter("target", "ignored")

        assert seen == ["target"]

    def test_typed_setter(self):
        target = SimpleNamespace()
        option = OptionDefinition.builder("/n").setter(lambda t, v: setattr(t, "n", v), int).build()
        option.setter(target, "42")

        assert target.n == 42

    def test_none_setter_resets(self):
        option = OptionDefinition.builder("/f").store("f").setter(None).build()

        assert option.setter is noop_setter

    def test_store_and_append(self):
        target = SimpleNamespace()
        store = OptionDefinition.builder("/s").store("s", float).build()
        append = OptionDefinition.builder("/a").append("a").build()

        store.setter(target, "1.5")
        append.setter(target, "x")
        append.setter(target, "y")

        assert target.s == 1.5
        assert target.a == ["x", "y"]

    def test_unsupported_kind(self):
        with pytest.raises(TypeError):
            OptionDefinition.builder("/f").store("f", list)

    def test_builder_is_reusable(self):
        builder = OptionDefinition.builder("/f")
        first = builder.build()
        second = builder.has_argument().build()

        assert not first.has_argument
        assert second.has_argument
