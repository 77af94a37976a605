# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from clidecl import CommandLineSchema


if TYPE_CHECKING:
    from clidecl import OptionBuilder, OptionDefinition
    from clidecl.option import Setter


__all__ = [
    "Recorder",
    "recorder",
]


class Recorder:
    """Records every setter invocation and the leftovers handed to the leftover handler."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.leftovers: list[str] | None = None

    def setter(self, name: str) -> Setter:
        def _record(target: Any, raw: str) -> None:
            self.calls.append((name, raw))

        return _record

    def values(self, name: str) -> list[str]:
        return [raw for called, raw in self.calls if called == name]

    def leftover_handler(self, target: Any, leftovers: list[str]) -> None:
        self.leftovers = list(leftovers)

    def schema(self, *options: OptionDefinition | OptionBuilder, case_sensitive: bool = True) -> CommandLineSchema:
        builder = CommandLineSchema.builder("test").case_sensitive(case_sensitive).leftover_handler(self.leftover_handler)
        for option in options:
            builder.add_option(option)
        return builder.build()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
