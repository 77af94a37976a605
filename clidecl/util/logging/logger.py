# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import logging

from abc import abstractmethod
from typing import Protocol, override, runtime_checkable


# Every logger created by the library hangs below this one
ROOT_LOGGER_NAME = "clidecl"


@runtime_checkable
class LoggableProtocol(Protocol):
    @property
    @abstractmethod
    def log(self) -> logging.Logger:
        msg = "Subclasses must implement log property"
        raise NotImplementedError(msg)


class Logger(logging.Logger):
    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        if handler == "tty":
            return self.isEnabledForTty(level)
        if handler == "file":
            return self.isEnabledForFile(level)
        msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
        raise ValueError(msg)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        ch = LoggingManager().ch
        if ch is None or ch.level > level:
            return False
        return super().isEnabledFor(level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        fh = LoggingManager().fh
        if fh is None or fh.level > level:
            return False
        return super().isEnabledFor(level)


def _logger_name(obj: object, name: str | None) -> str:
    if name is not None:
        return name
    if isinstance(obj, str):
        return obj
    if isinstance(obj, type):
        return obj.__name__
    cls_name = type(obj).__name__
    if not isinstance(cls_name, str):
        msg = f"Cannot determine logger name from object: {obj}"
        raise TypeError(msg)
    return cls_name


def getLogger(obj: object, parent: object = None, name: str | None = None) -> logging.Logger:  # noqa: N802 matches logging.getLogger
    """Return the library logger for ``obj``.

    Loggers are children of ``parent`` when it is a logger or carries one, and of the ``clidecl`` logger otherwise.
    Plain :class:`logging.Logger` instances are promoted to :class:`Logger`. The process-wide logger class is left
    untouched, so loggers of any other class set by the host application are returned as they are.
    """
    name = _logger_name(obj, name)

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    elif name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(ROOT_LOGGER_NAME).getChild(name)

    # Try to apply the logging level from the manager
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    if type(logger) is logging.Logger:
        logger.__class__ = Logger

    return logger
