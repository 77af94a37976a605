# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from pydantic import Field, field_validator, model_validator

from ..util.config import BaseConfigModel


if TYPE_CHECKING:
    from .builder import OptionBuilder


type Setter = Callable[[Any, str], None]


def noop_setter(target: Any, value: str) -> None:
    pass


class OptionDefinition(BaseConfigModel):
    """Immutable description of one recognised command-line option.

    The ``setter`` is called as ``setter(target, raw)`` where ``target`` is the destination object of the parse call
    and ``raw`` the resolved string: the following token for options taking an argument, the empty string for flags
    given on the command line, and ``"True"``/``"False"`` for flags taken from the fallback settings.
    """

    primary_name: str = Field(default="", description="Name matched against command-line tokens")
    alternative_name: str = Field(default="", description="Second name matched against command-line tokens, empty for none")
    setting_name: str = Field(default="", description="Key looked up in the fallback settings, empty for none")
    required: bool = Field(default=False, description="Whether parsing fails when the option is never resolved")
    has_argument: bool = Field(default=False, description="Whether the option consumes the following token as its value")
    multiple: bool = Field(default=False, description="Whether the option may be given more than once")
    argument_name: str = Field(default="", description="Placeholder for the argument in help output")
    description: str = Field(default="", description="Human readable description for help output")
    setter: Setter = Field(default=noop_setter, repr=False, exclude=True, description="Callback applying a resolved value")

    @field_validator("primary_name", "alternative_name", "setting_name", "argument_name", "description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_validator(mode="after")
    def _validate_names(self) -> Self:
        if not self.primary_name and not self.alternative_name:
            msg = f"Option needs a name or an alternative name (name={self.primary_name!r}, alternative_name={self.alternative_name!r})"
            raise ValueError(msg)
        return self

    @classmethod
    def builder(cls, name: str) -> OptionBuilder:
        from .builder import OptionBuilder

        return OptionBuilder(name)

    @property
    def key(self) -> str:
        """Registry key: the primary name, or the alternative name for options without one."""
        return self.primary_name or self.alternative_name

    @property
    def display_name(self) -> str:
        if self.primary_name and self.alternative_name:
            return f"{self.primary_name}, {self.alternative_name}"
        return self.key

    @property
    def is_flag(self) -> bool:
        return not self.has_argument

    def matches(self, specified_name: str, *, case_sensitive: bool = True) -> bool:
        """Test whether a command-line token names this option.

        Case-insensitive matching only looks at the primary name. Empty names never match anything.
        """
        if case_sensitive:
            return bool(specified_name) and specified_name in (self.primary_name, self.alternative_name)
        return bool(self.primary_name) and self.primary_name.upper() == specified_name.upper()

    def matches_setting(self, key: str) -> bool:
        """Test whether a fallback settings key belongs to this option. Keys are always compared verbatim."""
        return bool(self.setting_name) and self.setting_name == key
