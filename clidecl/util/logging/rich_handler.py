# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, override

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


if TYPE_CHECKING:
    import logging


class CompactRichHandler(RichHandler):
    """Rich console handler printing ``[L:logger] message`` lines on stderr.

    Records logged with ``extra={"simple": True}`` are printed verbatim, without the level and logger prefix.
    """

    def __init__(self, *args, show_name: bool = True, level_color_everything: bool = True, **kwargs) -> None:
        kwargs.setdefault("console", Console(stderr=True))
        kwargs.setdefault("rich_tracebacks", True)
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_level", False)
        kwargs.setdefault("enable_link_path", False)
        super().__init__(*args, **kwargs)

        self.show_name = show_name
        self.level_color_everything = level_color_everything

    @staticmethod
    def is_simple(record: logging.LogRecord) -> bool:
        return bool(getattr(record, "simple", False))

    def get_level_style(self, record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()

        if not self.is_simple(record):
            text.append("[", style="dim")
            text.append(record.levelname[0], style=self.get_level_style(record))
            if self.show_name:
                text.append(f":{record.name}", style="dim")
            text.append("] ", style="dim")

        text.append(message, style=self.get_level_style(record) if self.level_color_everything else "log.message")
        return text
