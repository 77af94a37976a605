# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

# Logger / getLogger
from .logger import ROOT_LOGGER_NAME, LoggableProtocol, Logger, getLogger

# Configuration
from .config import LoggingConfig, LoggingLevels
from .levels import LoggingLevel
from .manager import LoggingManager


__all__ = [
    "ROOT_LOGGER_NAME",
    "LoggableProtocol",
    "Logger",
    "LoggingConfig",
    "LoggingLevel",
    "LoggingLevels",
    "LoggingManager",
    "getLogger",
]
