# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

from pathlib import Path


QUOTES = ('"', "'")


def read_env_file(path: Path | str) -> dict[str, str]:
    """Read ``KEY=VALUE`` lines from ``path``.

    Blank lines and lines starting with ``#`` are skipped, and a value wrapped in matching quotes is unquoted.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a line has no ``=`` or an empty key.

    """
    path = Path(path)
    if not path.exists():
        msg = f"Environment file '{path}' does not exist."
        raise FileNotFoundError(msg)

    values: dict[str, str] = {}
    with path.open("r", encoding="utf-8") as f:
        for lineno, raw_line in enumerate(f, start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            key = key.strip()
            if not sep or not key:
                msg = f"Invalid line {lineno} in environment file '{path}': {line}"
                raise ValueError(msg)

            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTES:  # noqa: PLR2004
                value = value[1:-1]
            values[key] = value

    return values
