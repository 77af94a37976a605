# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import logging

from typing import Any, overload, override

from ..logging import getLogger


class _ClassLogDescriptor:
    """Resolve ``log`` to the per-class logger, whether accessed through the class or one of its instances."""

    @overload
    def __get__(self, obj: None, cls: type) -> logging.Logger: ...
    @overload
    def __get__(self, obj: object, cls: type | None = None) -> logging.Logger: ...
    def __get__(self, obj: Any, cls: type | None = None) -> logging.Logger:
        if cls is None:
            cls = type(obj)

        # Cache on the class itself, never inherited from a parent class
        log = cls.__dict__.get("_LoggableMixin__log")
        if log is None:
            log = getLogger(cls.__log_name__)  # pyright: ignore[reportAttributeAccessIssue]
            setattr(cls, "_LoggableMixin__log", log)
        return log


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Provides a ``.log`` property usable both from the class and its instances. Loggers live below the ``clidecl``
    logger and are named after the class unless ``__log_name__`` is overridden.
    """

    __log_name__: str

    log = _ClassLogDescriptor()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if "__log_name__" not in cls.__dict__:
            cls.__log_name__ = cls.__name__

    # MARK: Printing
    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
