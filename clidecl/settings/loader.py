# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

import os

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from frozendict import frozendict

from ..util.mixins import LoggableMixin
from .config import SettingsConfig
from .env_file import read_env_file
from .yaml_loader import load_yaml


if TYPE_CHECKING:
    from pathlib import Path


def flatten(data: Mapping[Any, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into ``.`` joined keys with string values.

    >>> flatten({"server": {"host": "example.org", "port": 8080}, "debug": True})
    {'server.host': 'example.org', 'server.port': '8080', 'debug': 'True'}
    """
    result: dict[str, str] = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            result.update(flatten(value, f"{name}."))
        elif value is None:
            result[name] = ""
        else:
            result[name] = str(value)
    return result


class SettingsLoader(LoggableMixin):
    """Load the fallback settings consulted for options not given on the command line.

    Sources are merged in order, later ones overriding earlier ones: the YAML files, the env file, then the process
    environment.
    """

    def __init__(self, config: SettingsConfig | Mapping[str, Any] | None = None) -> None:
        if config is None:
            config = SettingsConfig()
        elif not isinstance(config, SettingsConfig):
            config = SettingsConfig.model_validate(config)
        self.config = config

    def load(self) -> frozendict[str, str]:
        settings: dict[str, str] = {}

        for path in self.config.files:
            settings.update(self._load_yaml(path))

        if self.config.env_file is not None:
            self.log.debug("Loading settings from env file %s", self.config.env_file)
            settings.update(read_env_file(self.config.env_file))

        if self.config.environment:
            settings.update(self._load_environment())

        self.log.debug("Loaded %d setting(s)", len(settings))
        return frozendict(settings)

    def _load_yaml(self, path: Path) -> dict[str, str]:
        self.log.debug("Loading settings from YAML file %s", path)

        data = load_yaml(path)
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            msg = f"Settings file '{path}' must contain a mapping, got {type(data).__name__}"
            raise TypeError(msg)
        return flatten(data)

    def _load_environment(self) -> dict[str, str]:
        prefix = self.config.env_prefix
        return {key.removeprefix(prefix): value for key, value in os.environ.items() if key.startswith(prefix) and key != prefix}
