# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict


if TYPE_CHECKING:
    import rich.repr


class BaseConfigModel(BaseModel):
    """Base class for every configuration model in clidecl.

    Configuration is immutable once validated and rejects unknown keys, so a typo in a configuration file fails
    loudly instead of being ignored.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def __rich_repr__(self) -> rich.repr.Result:
        for attr, info in type(self).model_fields.items():
            if info.repr is False:
                continue
            yield attr, getattr(self, attr, None)
