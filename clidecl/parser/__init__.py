# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from ..errors import ConversionError, ParseError, ParseErrorCategory
from .context import ResolutionContext
from .parser import Parser
from .resolver import FALSY_SETTING_VALUES, Resolver


__all__ = [
    "FALSY_SETTING_VALUES",
    "ConversionError",
    "ParseError",
    "ParseErrorCategory",
    "Parser",
    "ResolutionContext",
    "Resolver",
]
