# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import re

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from frozendict import frozendict
from pydantic import Field, field_validator

from ..config import BaseConfigModel
from .levels import LoggingLevel


class LoggingLevels(BaseConfigModel):
    file: LoggingLevel = Field(default=LoggingLevel.OFF, description="Log level for log file output")
    tty: LoggingLevel = Field(default=LoggingLevel.WARNING, description="Log level for TTY output")
    default: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Default log level for clidecl loggers not explicitly specified in 'custom'")

    custom: Mapping[re.Pattern[str], LoggingLevel] = Field(
        default_factory=frozendict,
        description="Custom logging levels, where the key is a regex matched against the logger name, and the value is the logging level.",
    )

    @field_validator("custom", mode="before")
    @classmethod
    def _compile_custom_level_patterns(cls, value: Any) -> dict[re.Pattern[str], Any]:
        if not isinstance(value, Mapping):
            msg = f"Custom logging levels must be a mapping, got {type(value)}"
            raise TypeError(msg)

        levels: dict[re.Pattern[str], Any] = {}
        for pattern, level in value.items():
            if isinstance(pattern, str):
                pattern = re.compile(pattern, re.IGNORECASE)  # noqa: PLW2901
            if not isinstance(pattern, re.Pattern):
                msg = f"Custom logging levels keys must be str or compiled regex patterns, got {type(pattern)}"
                raise TypeError(msg)
            levels[pattern] = level
        return levels

    @field_validator("custom", mode="after")
    @classmethod
    def _freeze_custom_levels(cls, value: Mapping[re.Pattern[str], LoggingLevel]) -> Mapping[re.Pattern[str], LoggingLevel]:
        return frozendict(value)


class LoggingConfig(BaseConfigModel):
    dir: Path = Field(default_factory=Path.cwd, description="Log file directory")
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Enable rich text (colors etc) in TTY output")
