# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import pytest

from clidecl import CommandLineBuilder, CommandLineSchema, OptionDefinition
from clidecl.command import noop_leftover_handler


@pytest.mark.command
@pytest.mark.builder
class TestCommandLineBuilder:
    def test_builder_from_schema(self):
        assert isinstance(CommandLineSchema.builder("tool"), CommandLineBuilder)

    def test_build(self):
        def handler(target, leftovers):
            pass

        schema = (
            CommandLineSchema.builder("tool")
            .description("Does things")
            .case_sensitive(False)  # noqa: FBT003
            .add_option(OptionDefinition.builder("/b"))
            .add_option(OptionDefinition(primary_name="/a"))
            .argument_names("source", "destination")
            .leftover_handler(handler)
            .build()
        )

        assert schema.command_name == "tool"
        assert schema.description == "Does things"
        assert schema.case_sensitive is False
        assert [o.primary_name for o in schema.options] == ["/a", "/b"]
        assert schema.trailing_argument_names == ("source", "destination")
        assert schema.leftover_handler is handler

    def test_defaults(self):
        schema = CommandLineSchema.builder("tool").add_option(OptionDefinition.builder("/a")).leftover_handler(None).build()

        assert schema.description == ""
        assert schema.case_sensitive is True
        assert schema.trailing_argument_names == ()
        assert schema.leftover_handler is noop_leftover_handler

    def test_build_without_options(self):
        with pytest.raises(ValueError, match="No option"):
            CommandLineSchema.builder("tool").build()

    def test_duplicate_option(self):
        builder = CommandLineSchema.builder("tool").add_option(OptionDefinition.builder("/a"))

        with pytest.raises(ValueError, match="already defined"):
            builder.add_option(OptionDefinition.builder("/a").has_argument())

    def test_rejects_invalid_options(self):
        builder = CommandLineSchema.builder("tool")

        with pytest.raises(ValueError):
            builder.add_option(None)
        with pytest.raises(TypeError):
            builder.add_option("/a")

    def test_rejects_missing_command_name(self):
        with pytest.raises(ValueError):
            CommandLineSchema.builder(None)

    def test_empty_command_name_fails_on_build(self):
        with pytest.raises(ValueError):
            CommandLineSchema.builder("").add_option(OptionDefinition.builder("/a")).build()
