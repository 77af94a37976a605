# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from collections.abc import Callable
from typing import Any, Self

from . import setters
from .definition import OptionDefinition, Setter, noop_setter


class OptionBuilder:
    """Fluent assembler for :class:`OptionDefinition`.

    Every toggle returns the builder, and :meth:`build` produces the immutable definition. Passing ``None`` to a text
    toggle resets it to the empty string.
    """

    def __init__(self, name: str) -> None:
        if name is None:
            msg = "Option name must not be None"
            raise ValueError(msg)
        if not isinstance(name, str):
            msg = f"Option name must be a string, got {type(name).__name__}"
            raise TypeError(msg)
        if not name:
            msg = "Option name must not be empty"
            raise ValueError(msg)

        self._name = name
        self._alternative_name = ""
        self._setting_name = ""
        self._required = False
        self._has_argument = False
        self._argument_name = ""
        self._multiple = False
        self._description = ""
        self._setter: Setter = noop_setter

    # MARK: Names
    def alternative_name(self, name: str | None) -> Self:
        self._alternative_name = name or ""
        return self

    def setting_name(self, name: str | None) -> Self:
        self._setting_name = name or ""
        return self

    def argument_name(self, name: str | None) -> Self:
        self._argument_name = name or ""
        return self

    def description(self, text: str | None) -> Self:
        self._description = text or ""
        return self

    # MARK: Flags
    def required(self, required: bool = True) -> Self:  # noqa: FBT001, FBT002
        self._required = required
        return self

    def has_argument(self, has_argument: bool = True) -> Self:  # noqa: FBT001, FBT002
        self._has_argument = has_argument
        return self

    def multiple(self, multiple: bool = True) -> Self:  # noqa: FBT001, FBT002
        self._multiple = multiple
        return self

    # MARK: Setters
    def setter(self, func: Callable[..., Any] | None, kind: type | None = str) -> Self:
        """Set the callback applying the resolved value.

        Args:
            func: Called as ``func(target, value)``, or as ``func(target)`` when ``kind`` is ``None``.
            kind: Type the raw string is converted to before calling ``func``; see :mod:`clidecl.option.setters`.

        """
        self._setter = noop_setter if func is None else setters.adapt(func, kind)
        return self

    def store(self, attribute: str, kind: type = str) -> Self:
        self._setter = setters.store(attribute, kind)
        return self

    def append(self, attribute: str, kind: type = str) -> Self:
        self._setter = setters.append(attribute, kind)
        return self

    # MARK: Build
    def build(self) -> OptionDefinition:
        return OptionDefinition(
            primary_name=self._name,
            alternative_name=self._alternative_name,
            setting_name=self._setting_name,
            required=self._required,
            has_argument=self._has_argument,
            argument_name=self._argument_name,
            multiple=self._multiple,
            description=self._description,
            setter=self._setter,
        )
