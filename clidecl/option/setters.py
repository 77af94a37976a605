# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

"""Typed adapters from user callbacks to the ``setter(target, raw)`` contract.

Each adapter converts the raw string before calling the user callback, so conversion failures surface as a
:class:`~clidecl.errors.ConversionError` raised from the setter:

>>> from types import SimpleNamespace
>>> target = SimpleNamespace(port=None)
>>> setter = adapt(lambda t, v: setattr(t, "port", v), int)
>>> setter(target, "8080")
>>> target.port
8080
"""

import datetime
import decimal

from collections.abc import Callable
from typing import Any

from ..errors import ConversionError
from .definition import Setter


type Converter = Callable[[str], Any]


TRUE_STRINGS = frozenset(("TRUE",))
FALSE_STRINGS = frozenset(("FALSE",))


# MARK: Converters
def to_str(raw: str) -> str:
    return raw


def to_bool(raw: str) -> bool:
    # A flag given on the command line carries no text at all
    if raw == "":
        return True

    upper = raw.strip().upper()
    if upper in TRUE_STRINGS:
        return True
    if upper in FALSE_STRINGS:
        return False
    raise ConversionError(raw, "bool")


def _reject_digit_separators(raw: str, kind: str) -> None:
    # PEP 515 underscores are Python number syntax, not option value syntax
    if "_" in raw:
        raise ConversionError(raw, kind, "digit separators are not accepted")


def to_int(raw: str) -> int:
    _reject_digit_separators(raw, "int")
    try:
        return int(raw.strip())
    except ValueError as err:
        raise ConversionError(raw, "int") from err


def to_float(raw: str) -> float:
    _reject_digit_separators(raw, "float")
    try:
        return float(raw.strip())
    except ValueError as err:
        raise ConversionError(raw, "float") from err


def to_decimal(raw: str) -> decimal.Decimal:
    _reject_digit_separators(raw, "Decimal")
    try:
        return decimal.Decimal(raw.strip())
    except decimal.InvalidOperation as err:
        raise ConversionError(raw, "Decimal") from err


def to_datetime(raw: str) -> datetime.datetime:
    try:
        return datetime.datetime.fromisoformat(raw.strip())
    except ValueError as err:
        raise ConversionError(raw, "datetime", "expected an ISO 8601 date or date-time") from err


CONVERTERS: dict[type, Converter] = {
    str: to_str,
    bool: to_bool,
    int: to_int,
    float: to_float,
    decimal.Decimal: to_decimal,
    datetime.datetime: to_datetime,
}


def get_converter(kind: type) -> Converter:
    try:
        return CONVERTERS[kind]
    except KeyError:
        supported = ", ".join(k.__name__ for k in CONVERTERS)
        msg = f"Unsupported setter kind {kind!r}, expected None or one of: {supported}"
        raise TypeError(msg) from None


# MARK: Adapters
def adapt(func: Callable[..., Any], kind: type | None = str) -> Setter:
    """Wrap ``func`` into a setter.

    With ``kind=None`` the callback is invoked as ``func(target)`` and the raw value is ignored, otherwise it is
    invoked as ``func(target, kind_value)``.
    """
    if not callable(func):
        msg = f"Setter must be callable, got {type(func).__name__}"
        raise TypeError(msg)

    if kind is None:

        def _no_value_setter(target: Any, raw: str) -> None:
            func(target)

        return _no_value_setter

    if kind is str:
        return func

    convert = get_converter(kind)

    def _typed_setter(target: Any, raw: str) -> None:
        func(target, convert(raw))

    return _typed_setter


def store(attribute: str, kind: type = str) -> Setter:
    """Setter assigning the converted value to ``target.<attribute>``."""
    convert = get_converter(kind)

    def _store(target: Any, raw: str) -> None:
        setattr(target, attribute, convert(raw))

    return _store


def append(attribute: str, kind: type = str) -> Setter:
    """Setter appending the converted value to the list at ``target.<attribute>``, creating the list if needed."""
    convert = get_converter(kind)

    def _append(target: Any, raw: str) -> None:
        values = getattr(target, attribute, None)
        if values is None:
            values = []
            setattr(target, attribute, values)
        values.append(convert(raw))

    return _append
