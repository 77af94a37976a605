# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from .builder import CommandLineBuilder
from .help import HelpFormatOptions, HelpFormatter
from .schema import MISSING, CommandLineSchema, LeftoverHandler, noop_leftover_handler


__all__ = [
    "MISSING",
    "CommandLineBuilder",
    "CommandLineSchema",
    "HelpFormatOptions",
    "HelpFormatter",
    "LeftoverHandler",
    "noop_leftover_handler",
]
