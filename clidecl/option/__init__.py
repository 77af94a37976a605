# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from . import setters
from .builder import OptionBuilder
from .definition import OptionDefinition, Setter, noop_setter
from .registry import OptionRegistry


__all__ = [
    "OptionBuilder",
    "OptionDefinition",
    "OptionRegistry",
    "Setter",
    "noop_setter",
    "setters",
]
