# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

"""Resolution of command-line tokens and fallback settings against a :class:`~clidecl.command.CommandLineSchema`.

Resolution runs in four phases:

1. Tokens are scanned front to back. A token naming an option invokes its setter, with the following token as value
   when the option takes an argument (that token is then consumed) or the empty string otherwise. Tokens naming no
   option are kept, in order, as leftovers.
2. Fallback settings are applied to options that the tokens did not resolve. Flags receive ``"False"`` for the
   values in :data:`FALSY_SETTING_VALUES` (compared case-insensitively) and ``"True"`` for anything else.
3. The leftovers are handed to the schema's leftover handler.
4. Every required option must have been resolved at least once.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..errors import ParseError, ParseErrorCategory
from ..util.mixins import LoggableMixin
from .context import ResolutionContext


if TYPE_CHECKING:
    from ..command import CommandLineSchema
    from ..option import OptionDefinition


FALSY_SETTING_VALUES = frozenset(("FALSE", "NO", "0", "F", "N"))


def normalize_flag_setting(value: str) -> str:
    return str(value.upper() not in FALSY_SETTING_VALUES)


class Resolver(LoggableMixin):
    def __init__(self, schema: CommandLineSchema) -> None:
        self.schema = schema

    def resolve(self, tokens: Iterable[str], fallback_settings: Mapping[str, str], target: Any) -> None:
        """Apply ``tokens`` and ``fallback_settings`` to ``target`` through the option setters.

        Raises:
            ParseError: With the category describing the failure. Errors that do not fit any other category are
                wrapped as :attr:`ParseErrorCategory.UNEXPECTED_ERROR_HAS_OCCURRED`.

        """
        try:
            context = ResolutionContext()
            leftovers = self._resolve_tokens(tokens, context, target)
            self._resolve_settings(fallback_settings, context, target)

            self.log.debug("Passing %d leftover token(s) to the leftover handler: %r", len(leftovers), leftovers)
            self.schema.leftover_handler(target, leftovers)

            self._check_required(context)
        except ParseError:
            raise
        except Exception as err:
            self.log.debug("Unexpected error while resolving command line: %r", err)
            raise ParseError(ParseErrorCategory.UNEXPECTED_ERROR_HAS_OCCURRED, cause=err) from err

    # MARK: Phases
    def _resolve_tokens(self, tokens: Iterable[str], context: ResolutionContext, target: Any) -> list[str]:
        queue = deque(tokens)
        leftovers: list[str] = []

        while queue:
            former = queue.popleft()
            latter = queue[0] if queue else ""

            option = self.schema.options.find(former, case_sensitive=self.schema.case_sensitive)
            if option is None:
                leftovers.append(former)
                continue

            if context.is_resolved(option) and not option.multiple:
                self.log.debug("Option %s given more than once", option.display_name)
                raise ParseError(ParseErrorCategory.DUPLICATED_OPTION, target_option=option, target_value=latter)

            value = latter if option.has_argument else ""
            self.log.debug("Token %r resolved to option %s with value %r", former, option.display_name, value)
            self._apply(option, value, context, target)

            if option.has_argument and queue:
                queue.popleft()

        return leftovers

    def _resolve_settings(self, fallback_settings: Mapping[str, str], context: ResolutionContext, target: Any) -> None:
        for key, raw in fallback_settings.items():
            option = self.schema.options.find_setting(key)
            if option is None or context.is_resolved(option):
                continue

            value = raw if option.has_argument else normalize_flag_setting(raw)
            self.log.debug("Setting %r resolved to option %s with value %r", key, option.display_name, value)
            self._apply(option, value, context, target)

    def _check_required(self, context: ResolutionContext) -> None:
        for option in self.schema.options:
            if option.required and not context.is_resolved(option):
                self.log.debug("Required option %s was not resolved", option.display_name)
                raise ParseError(ParseErrorCategory.REQUIRED_OPTION_NOT_FOUND, target_option=option)

    # MARK: Setters
    def _apply(self, option: OptionDefinition, value: str, context: ResolutionContext, target: Any) -> None:
        try:
            option.setter(target, value)
        except Exception as err:
            raise ParseError(ParseErrorCategory.SETTER_ERROR_HAS_OCCURRED, target_option=option, target_value=value, cause=err) from err

        context.record(option, value)
