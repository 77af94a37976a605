# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, model_validator
from rich.console import Console

from ..util.config import BaseConfigModel


if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..option import OptionDefinition
    from .schema import CommandLineSchema


DEFAULT_ARGUMENT_NAME = "arg"


class HelpFormatOptions(BaseConfigModel):
    line_width: int = Field(default=80, gt=0, description="Total number of columns of a help line")
    indent_width: int = Field(default=20, ge=0, description="Column at which option descriptions and section contents start")

    @model_validator(mode="after")
    def _validate_widths(self) -> Self:
        if self.indent_width >= self.line_width:
            msg = f"Indent width ({self.indent_width}) must be smaller than the line width ({self.line_width})"
            raise ValueError(msg)
        return self

    @property
    def text_width(self) -> int:
        return self.line_width - self.indent_width


class HelpFormatter:
    """Render the help text of a :class:`~clidecl.command.CommandLineSchema`.

    The output has three sections. ``Syntax`` lists the command name, the required options, the optional ones in
    brackets and finally the trailing argument names. ``Description`` holds the command description. ``Options``
    lists every option with its description aligned at the indent column.

    Example:
        >>> from clidecl import CommandLineSchema, OptionDefinition
        >>> source = OptionDefinition.builder("-s").alternative_name("--source").has_argument().argument_name("path")
        >>> schema = (
        ...     CommandLineSchema.builder("copy")
        ...     .description("Copy files.")
        ...     .add_option(source.required().description("Source file"))
        ...     .argument_names("destination")
        ...     .build()
        ... )
        >>> print(HelpFormatter().format(schema))
        Syntax:
                            copy -s <path> <destination>
        <BLANKLINE>
        Description:
                            Copy files.
        <BLANKLINE>
        Options:
        -s, --source        Source file
        <BLANKLINE>

    """

    def __init__(self, options: HelpFormatOptions | None = None) -> None:
        self.options = HelpFormatOptions() if options is None else options

    def format(self, schema: CommandLineSchema) -> str:
        lines: list[str] = []
        lines.extend(self._render_section("Syntax", self.render_syntax(schema)))
        lines.extend(self._render_section("Description", schema.description))
        lines.append("Options:")
        for option in schema.options:
            lines.extend(self._render_option(option))
        return "\n".join(lines) + "\n"

    def print(self, schema: CommandLineSchema, console: Console | None = None) -> None:
        if console is None:
            console = Console()
        console.print(self.format(schema), end="", markup=False, highlight=False, soft_wrap=True)

    # MARK: Rendering
    def render_syntax(self, schema: CommandLineSchema) -> str:
        parts = [schema.command_name]
        parts.extend(self._render_usage(option) for option in schema.options if option.required)
        parts.extend(f"[{self._render_usage(option)}]" for option in schema.options if not option.required)
        parts.extend(f"<{name}>" for name in schema.trailing_argument_names)
        return " ".join(parts)

    def _render_usage(self, option: OptionDefinition) -> str:
        if not option.has_argument:
            return option.key
        return f"{option.key} <{option.argument_name or DEFAULT_ARGUMENT_NAME}>"

    def _render_section(self, title: str, content: str) -> Iterable[str]:
        indent = " " * self.options.indent_width
        yield f"{title}:"
        for chunk in self._split(content):
            yield f"{indent}{chunk}".rstrip()
        yield ""

    def _render_option(self, option: OptionDefinition) -> Iterable[str]:
        width = self.options.indent_width
        indent = " " * width

        names = option.display_name
        if not option.description:
            yield names
            return

        chunks = self._split(option.description)

        # Names wider than the indent column push the description onto its own line
        if len(names) > width:
            yield names
            yield f"{indent}{chunks[0]}"
        else:
            yield f"{names.ljust(width)}{chunks[0]}"

        for chunk in chunks[1:]:
            yield f"{indent}{chunk}"

    def _split(self, text: str) -> list[str]:
        width = self.options.text_width
        if not text:
            return [""]
        return [text[i : i + width] for i in range(0, len(text), width)]
