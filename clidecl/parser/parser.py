# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

import argparse

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, cast, override

from ..errors import ParseError, ParseErrorCategory
from ..settings import SettingsLoader
from ..util.mixins import LoggableMixin
from .resolver import Resolver


if TYPE_CHECKING:
    from ..command import CommandLineSchema


class Parser[T](LoggableMixin):
    """Bind a :class:`~clidecl.command.CommandLineSchema` to the destination populated by each parse call.

    The destination is produced by ``factory`` on every call. Use :meth:`for_target` to fill the same instance every
    time. Without a factory each call fills a fresh :class:`argparse.Namespace`.
    """

    def __init__(
        self,
        schema: CommandLineSchema,
        factory: Callable[[], T] | None = None,
        *,
        settings_loader: SettingsLoader | None = None,
    ) -> None:
        if factory is not None and not callable(factory):
            msg = f"Factory must be callable, got {type(factory).__name__}"
            raise TypeError(msg)

        self.schema = schema
        self.factory = cast("Callable[[], T]", argparse.Namespace) if factory is None else factory
        self.settings_loader = SettingsLoader() if settings_loader is None else settings_loader
        self.resolver = Resolver(schema)

    @classmethod
    def for_target(cls, schema: CommandLineSchema, target: T, *, settings_loader: SettingsLoader | None = None) -> Parser[T]:
        if target is None:
            msg = "Target must not be None"
            raise ValueError(msg)

        def _target() -> T:
            return target

        return cls(schema, _target, settings_loader=settings_loader)

    @classmethod
    def for_factory(cls, schema: CommandLineSchema, factory: Callable[[], T], *, settings_loader: SettingsLoader | None = None) -> Parser[T]:
        if factory is None:
            msg = "Factory must not be None"
            raise ValueError(msg)
        return cls(schema, factory, settings_loader=settings_loader)

    def parse(self, tokens: Iterable[str], settings: Mapping[str, str] | None = None) -> T:
        """Resolve ``tokens`` into the destination and return it.

        Args:
            tokens: Command-line tokens, usually ``sys.argv[1:]``.
            settings: Fallback settings. When ``None`` they are loaded through :attr:`settings_loader`.

        Raises:
            ParseError: If resolution fails. Failures loading the settings or producing the destination are reported
                as :attr:`ParseErrorCategory.UNEXPECTED_ERROR_HAS_OCCURRED`.

        """
        try:
            if settings is None:
                settings = self.settings_loader.load()
            target = self.factory()
        except Exception as err:
            self.log.debug("Could not prepare parse of %s: %r", self.schema.command_name, err)
            raise ParseError(ParseErrorCategory.UNEXPECTED_ERROR_HAS_OCCURRED, cause=err) from err

        self.log.debug("Parsing %s into %s", self.schema.command_name, type(target).__name__)
        self.resolver.resolve(tokens, settings, target)
        return target

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.schema.command_name}>"

