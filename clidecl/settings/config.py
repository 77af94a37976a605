# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import os

from pathlib import Path
from typing import Annotated, Any

from pydantic import AfterValidator, Field, field_validator

from ..util.config import BaseConfigModel


def expand_path(value: Path) -> Path:
    return Path(os.path.expandvars(value.as_posix())).expanduser()


ExpandedPath = Annotated[Path, AfterValidator(expand_path)]


class SettingsConfig(BaseConfigModel):
    files: tuple[ExpandedPath, ...] = Field(default=(), description="YAML files read in order, later files overriding earlier ones")
    env_file: ExpandedPath | None = Field(default=None, description="File of KEY=VALUE lines applied after the YAML files")
    environment: bool = Field(default=True, description="Whether the process environment is applied last")
    env_prefix: str = Field(default="", description="Only environment variables with this prefix are used, with the prefix removed")

    @field_validator("files", mode="before")
    @classmethod
    def _single_file(cls, value: Any) -> Any:
        if isinstance(value, str | Path):
            return (value,)
        return value
