# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from .config import SettingsConfig
from .env_file import read_env_file
from .loader import SettingsLoader, flatten
from .yaml_loader import IncludeLoader, load_yaml


__all__ = [
    "IncludeLoader",
    "SettingsConfig",
    "SettingsLoader",
    "flatten",
    "load_yaml",
    "read_env_file",
]
