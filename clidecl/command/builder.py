# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from typing import Self

from ..option import OptionBuilder, OptionDefinition
from .schema import CommandLineSchema, LeftoverHandler, noop_leftover_handler


class CommandLineBuilder:
    """Fluent assembler for :class:`CommandLineSchema`.

    Example:
        >>> from clidecl import CommandLineSchema, OptionDefinition
        >>> schema = (
        ...     CommandLineSchema.builder("fetch")
        ...     .add_option(OptionDefinition.builder("/H").alternative_name("/HOST").has_argument().store("host"))
        ...     .add_option(OptionDefinition.builder("/D").store("dump", bool))
        ...     .build()
        ... )
        >>> [option.primary_name for option in schema.options]
        ['/D', '/H']
        >>> result = schema.get_parser().parse(["/HOST", "example.org", "/D"], {})
        >>> result.host, result.dump
        ('example.org', True)

    """

    def __init__(self, command_name: str) -> None:
        if command_name is None:
            msg = "Command name must not be None"
            raise ValueError(msg)

        self._command_name = command_name
        self._description = ""
        self._case_sensitive = True
        self._options: list[OptionDefinition] = []
        self._trailing_argument_names: tuple[str, ...] = ()
        self._leftover_handler: LeftoverHandler = noop_leftover_handler

    def description(self, text: str | None) -> Self:
        self._description = text or ""
        return self

    def case_sensitive(self, case_sensitive: bool = True) -> Self:  # noqa: FBT001, FBT002
        self._case_sensitive = case_sensitive
        return self

    def add_option(self, option: OptionDefinition | OptionBuilder) -> Self:
        if option is None:
            msg = "Option must not be None"
            raise ValueError(msg)
        if isinstance(option, OptionBuilder):
            option = option.build()
        if not isinstance(option, OptionDefinition):
            msg = f"Expected OptionDefinition or OptionBuilder, got {type(option).__name__}"
            raise TypeError(msg)

        if any(o.key == option.key for o in self._options):
            msg = f"Option '{option.key}' is already defined"
            raise ValueError(msg)

        self._options.append(option)
        return self

    def argument_names(self, *names: str) -> Self:
        self._trailing_argument_names = tuple(names)
        return self

    def leftover_handler(self, handler: LeftoverHandler | None) -> Self:
        self._leftover_handler = noop_leftover_handler if handler is None else handler
        return self

    def build(self) -> CommandLineSchema:
        if not self._options:
            msg = "No option specified"
            raise ValueError(msg)

        return CommandLineSchema(
            command_name=self._command_name,
            description=self._description,
            case_sensitive=self._case_sensitive,
            options=self._options,
            trailing_argument_names=self._trailing_argument_names,
            leftover_handler=self._leftover_handler,
        )
