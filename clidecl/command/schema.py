# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, override

from pydantic import Field, field_validator

from ..option import OptionRegistry
from ..util.config import BaseConfigModel


if TYPE_CHECKING:
    from ..parser import Parser
    from ..settings import SettingsLoader
    from .builder import CommandLineBuilder


type LeftoverHandler = Callable[[Any, list[str]], None]


def noop_leftover_handler(target: Any, leftovers: list[str]) -> None:
    pass


class _Missing:
    @override
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final[Any] = _Missing()


class CommandLineSchema(BaseConfigModel):
    """Immutable description of a command line: its name, options and how leftover tokens are handled.

    A schema is built once and can be shared by any number of parsers and parse calls.
    """

    command_name: str = Field(description="Name of the command, shown in help output")
    description: str = Field(default="", description="Description of the command, shown in help output")
    case_sensitive: bool = Field(default=True, description="Whether option names are matched case-sensitively")
    options: OptionRegistry = Field(description="Recognised options, sorted by primary name")
    trailing_argument_names: tuple[str, ...] = Field(default=(), description="Names of the trailing positional arguments, shown in help output")
    leftover_handler: LeftoverHandler = Field(
        default=noop_leftover_handler,
        repr=False,
        exclude=True,
        description="Called as handler(target, leftovers) with every token not consumed by an option",
    )

    @field_validator("command_name", mode="after")
    @classmethod
    def _validate_command_name(cls, value: str) -> str:
        if not value:
            msg = "Command name must be a non-empty string"
            raise ValueError(msg)
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("leftover_handler", mode="before")
    @classmethod
    def _none_as_noop(cls, value: Any) -> Any:
        return noop_leftover_handler if value is None else value

    @field_validator("options", mode="after")
    @classmethod
    def _validate_options(cls, value: OptionRegistry) -> OptionRegistry:
        if len(value) == 0:
            msg = "A command line needs at least one option"
            raise ValueError(msg)
        return value

    @classmethod
    def builder(cls, command_name: str) -> CommandLineBuilder:
        from .builder import CommandLineBuilder

        return CommandLineBuilder(command_name)

    def get_parser(self, target: Any = MISSING, *, factory: Callable[[], Any] | None = None, settings_loader: SettingsLoader | None = None) -> Parser:
        """Return a parser filling ``target``, instances produced by ``factory``, or a fresh namespace per call.

        Raises:
            ValueError: If ``target`` is explicitly ``None``, or both ``target`` and ``factory`` are given.

        """
        from ..parser import Parser

        if target is not MISSING and factory is not None:
            msg = "Pass either a target or a factory, not both"
            raise ValueError(msg)

        if target is not MISSING:
            return Parser.for_target(self, target, settings_loader=settings_loader)
        if factory is not None:
            return Parser.for_factory(self, factory, settings_loader=settings_loader)
        return Parser(self, settings_loader=settings_loader)
