# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

"""Logging configuration for clidecl.

Configures file and TTY handlers on the ``clidecl`` logger, along with per-logger levels. Applications embedding
the library call :meth:`LoggingManager.initialize` once; without it the library stays silent.
"""

from __future__ import annotations

import logging
import re
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig
from .handlers import ConditionalFormatter, HandlerFilter
from .logger import ROOT_LOGGER_NAME


if TYPE_CHECKING:
    from .levels import LoggingLevel


######
# MARK: Constants

FILE_FORMAT = "%(asctime)s [%(levelname)s:%(name)s] %(message)s"
TTY_FORMAT = "[%(levelname).1s:%(name)s] %(message)s"


def get_log_file_name() -> str:
    return f"{script_info.get_script_name()}.log"


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    fh: logging.Handler | None
    ch: logging.Handler | None

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
            instance.fh = None
            instance.ch = None
        return typing_cast("Self", instance)

    def __init__(self) -> None:
        pass

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(ROOT_LOGGER_NAME)

    def initialize(self, config: LoggingConfig | dict[str, Any] | None = None) -> None:
        if config is None:
            config = LoggingConfig()
        elif not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = config.dir / get_log_file_name()

        self._configure_library_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def _configure_library_logger(self) -> None:
        self.logger.setLevel(self.config.levels.default.value if self.config.levels.default.enabled else logging.CRITICAL + 1)

    def _configure_file_handler(self) -> None:
        self.fh = None
        if not self.config.levels.file.enabled:
            return

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.log_file_path, mode="w", encoding="utf-8")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter(FILE_FORMAT))
        self.fh.addFilter(HandlerFilter("file"))
        self.logger.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from .rich_handler import CompactRichHandler

            self.ch = CompactRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter(TTY_FORMAT))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures log records on its own
        if not script_info.is_unit_test():
            self.logger.addHandler(self.ch)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Do nothing if logger already has an explicit level set
        if logger.level != logging.NOTSET:
            return

        # Apply the most specific matching custom level
        level: LoggingLevel | None = None
        pattern_len = 0

        for pattern, candidate in self.config.levels.custom.items():
            if (match := pattern.match(logger.name)) is not None and len(match.group(0)) > pattern_len:
                level = candidate
                pattern_len = len(match.group(0))

        if level is None or level == logging.NOTSET:
            return

        logger.setLevel(level.value if level.enabled else logging.CRITICAL + 1)

    def _configure_custom_logger_levels(self) -> None:
        prefix = re.escape(ROOT_LOGGER_NAME)
        for logger_name in list(logging.root.manager.loggerDict):
            if re.match(f"^{prefix}(\\.|$)", logger_name):
                self.apply_logging_level(logging.getLogger(logger_name))
