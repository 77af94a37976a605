# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, override


if TYPE_CHECKING:
    from .option import OptionDefinition


class ParseErrorCategory(Enum):
    """Kind of problem a :class:`ParseError` reports."""

    UNEXPECTED_ERROR_HAS_OCCURRED = 0
    """Anything not covered by the other categories, including failures of the leftover handler."""

    SETTER_ERROR_HAS_OCCURRED = 1
    """An option setter raised, including type conversion failures."""

    REQUIRED_OPTION_NOT_FOUND = 2
    """A required option was resolved neither from the tokens nor from the fallback settings."""

    DUPLICATED_OPTION = 3
    """An option that does not accept multiple occurrences was given twice."""


class ParseError(Exception):
    """Error raised while resolving a command line.

    Attributes:
        category: What went wrong.
        target_option: The option being processed when the error occurred, if any.
        target_value: The raw value being applied when the error occurred, if any.
        cause: The underlying exception, if any. It is also chained as ``__cause__``.

    """

    MESSAGE = "An error has occurred while parsing command line."

    def __init__(
        self,
        category: ParseErrorCategory,
        target_option: OptionDefinition | None = None,
        target_value: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.category = category
        self.target_option = target_option
        self.target_value = target_value
        self.cause = cause

        # args must match the constructor signature for copy and pickle
        super().__init__(category, target_option, target_value, cause)

        if cause is not None:
            self.__cause__ = cause

    @override
    def __str__(self) -> str:
        return self._format_message()

    def _format_message(self) -> str:
        parts = [self.MESSAGE, f"[{self.category.name}]"]
        if self.target_option is not None:
            parts.append(f"option={self.target_option.display_name!r}")
        if self.target_value is not None:
            parts.append(f"value={self.target_value!r}")
        if self.cause is not None:
            parts.append(f"cause={type(self.cause).__name__}: {self.cause}")
        return " ".join(parts)

    @override
    def __repr__(self) -> str:
        option = self.target_option.display_name if self.target_option is not None else None
        return f"{type(self).__name__}({self.category.name}, option={option!r}, value={self.target_value!r})"


class ConversionError(ValueError):
    """A typed setter could not convert the raw string it was given."""

    def __init__(self, value: str, kind: str, reason: str | None = None) -> None:
        self.value = value
        self.kind = kind
        self.reason = reason
        super().__init__(value, kind, reason)

    @override
    def __str__(self) -> str:
        msg = f"Cannot convert {self.value!r} to {self.kind}"
        if self.reason:
            msg = f"{msg}: {self.reason}"
        return msg
