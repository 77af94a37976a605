# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, override


if TYPE_CHECKING:
    from ..option import OptionDefinition


class ResolutionContext:
    """Raw values resolved for each option during a single parse call, keyed by :attr:`OptionDefinition.key`."""

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}

    def is_resolved(self, option: OptionDefinition) -> bool:
        return bool(self._values.get(option.key))

    def record(self, option: OptionDefinition, value: str) -> None:
        self._values.setdefault(option.key, []).append(value)

    def values(self, option: OptionDefinition) -> Sequence[str]:
        return tuple(self._values.get(option.key, ()))

    def __len__(self) -> int:
        return len(self._values)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"
