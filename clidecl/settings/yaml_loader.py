# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

import os

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import yaml


if TYPE_CHECKING:
    from io import IOBase


@runtime_checkable
class NamedStreamProtocol(Protocol):
    @property
    def name(self) -> str: ...


class IncludeLoader(yaml.SafeLoader):
    """Safe YAML loader resolving ``!include <path>`` relative to the including file."""

    def __init__(self, stream: IOBase | str, root: Path | None = None) -> None:
        if root is None:
            root = Path(stream.name).resolve().parent if isinstance(stream, NamedStreamProtocol) else Path.cwd()
        self._root = root
        super().__init__(stream)

    def include(self, node: yaml.Node) -> Any:
        path = Path(os.path.expandvars(self._root / self.construct_scalar(node))).expanduser()  # pyright: ignore[reportArgumentType]
        return load_yaml(path)


IncludeLoader.add_constructor("!include", IncludeLoader.include)


def load_yaml(path: Path) -> Any:
    with path.open(encoding="UTF-8") as f:
        return yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader
