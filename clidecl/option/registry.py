# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload, override

from frozendict import frozendict
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .definition import OptionDefinition


class OptionRegistry(Sequence[OptionDefinition]):
    """Ordered, read-only collection of option definitions.

    Options are sorted by primary name (ordinal order) and indexed by :attr:`OptionDefinition.key`. Lookups accept
    either a position or an exact primary name.
    """

    __slots__ = ("_by_key", "_ordered")

    def __init__(self, options: Iterable[OptionDefinition] = ()) -> None:
        by_key: dict[str, OptionDefinition] = {}
        for option in options:
            if not isinstance(option, OptionDefinition):
                msg = f"Expected OptionDefinition, got {type(option).__name__}"
                raise TypeError(msg)
            if option.key in by_key:
                msg = f"Duplicate option name '{option.key}'"
                raise ValueError(msg)
            by_key[option.key] = option

        self._ordered: tuple[OptionDefinition, ...] = tuple(sorted(by_key.values(), key=lambda o: o.primary_name))
        self._by_key: frozendict[str, OptionDefinition] = frozendict((o.key, o) for o in self._ordered)

    @overload
    def __getitem__(self, index: int) -> OptionDefinition: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[OptionDefinition]: ...
    @overload
    def __getitem__(self, index: str) -> OptionDefinition: ...
    @override
    def __getitem__(self, index: int | slice | str) -> OptionDefinition | Sequence[OptionDefinition]:  # pyright: ignore[reportIncompatibleMethodOverride]
        if isinstance(index, str):
            return self.by_name(index)
        return self._ordered[index]

    @override
    def __len__(self) -> int:
        return len(self._ordered)

    @override
    def __iter__(self) -> Iterator[OptionDefinition]:
        return iter(self._ordered)

    @override
    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(o.primary_name == item for o in self._ordered)
        return item in self._ordered

    def by_name(self, name: str) -> OptionDefinition:
        """Return the option whose primary name is exactly ``name``.

        Raises:
            KeyError: If no option has that primary name.

        """
        option = self.get(name)
        if option is None:
            msg = f"No option named '{name}'"
            raise KeyError(msg)
        return option

    def get(self, name: str) -> OptionDefinition | None:
        option = self._by_key.get(name)
        if option is not None and option.primary_name == name:
            return option
        return None

    def find(self, specified_name: str, *, case_sensitive: bool = True) -> OptionDefinition | None:
        """Return the first option, in registry order, that a command-line token names."""
        return next((o for o in self._ordered if o.matches(specified_name, case_sensitive=case_sensitive)), None)

    def find_setting(self, key: str) -> OptionDefinition | None:
        """Return the first option, in registry order, bound to a fallback settings key."""
        return next((o for o in self._ordered if o.matches_setting(key)), None)

    @property
    def mapping(self) -> frozendict[str, OptionDefinition]:
        return self._by_key

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, OptionRegistry):
            return self._ordered == other._ordered
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self._ordered)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(o.key) for o in self._ordered)})"

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            function=cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )

    @classmethod
    def validate(cls, value: Any) -> OptionRegistry:
        if isinstance(value, OptionRegistry):
            return value
        if isinstance(value, str | bytes) or not isinstance(value, Iterable):
            msg = f"Expected an iterable of OptionDefinition, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(value)
