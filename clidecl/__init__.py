# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

"""Declarative command-line option parsing.

Options are declared once in a :class:`CommandLineSchema`, which is then resolved against command-line tokens and a
map of fallback settings:

>>> from clidecl import CommandLineSchema, OptionDefinition
>>> schema = (
...     CommandLineSchema.builder("greet")
...     .add_option(OptionDefinition.builder("-n").alternative_name("--name").has_argument().setting_name("name").store("name"))
...     .add_option(OptionDefinition.builder("-l").alternative_name("--loud").setting_name("loud").store("loud", bool))
...     .leftover_handler(lambda target, leftovers: setattr(target, "rest", leftovers))
...     .build()
... )
>>> args = schema.get_parser().parse(["--name", "world", "extra"], {"loud": "no"})
>>> args.name, args.loud, args.rest
('world', False, ['extra'])
"""

import logging

from .command import CommandLineBuilder, CommandLineSchema, HelpFormatOptions, HelpFormatter
from .errors import ConversionError, ParseError, ParseErrorCategory
from .option import OptionBuilder, OptionDefinition, OptionRegistry, setters
from .parser import Parser, ResolutionContext, Resolver
from .settings import SettingsConfig, SettingsLoader
from .util.logging import ROOT_LOGGER_NAME


# The library stays silent until the embedding application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


__all__ = [
    "CommandLineBuilder",
    "CommandLineSchema",
    "ConversionError",
    "HelpFormatOptions",
    "HelpFormatter",
    "OptionBuilder",
    "OptionDefinition",
    "OptionRegistry",
    "ParseError",
    "ParseErrorCategory",
    "Parser",
    "ResolutionContext",
    "Resolver",
    "SettingsConfig",
    "SettingsLoader",
    "setters",
]
