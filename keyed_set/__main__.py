"""Interface for ``python -m keyed_set``."""

from __future__ import annotations

import sys
from argparse import ArgumentParser, ArgumentTypeError
from pathlib import Path
from typing import TYPE_CHECKING

from ._version import version
from .sets import KeyedSet


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence


__all__ = ["main"]


def _positive_int(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        msg = f"invalid integer: {text!r}"
        raise ArgumentTypeError(msg) from None
    if number < 1:
        msg = "field numbers start at 1"
        raise ArgumentTypeError(msg)
    return number


def _delimiter(text: str) -> str:
    if not text:
        msg = "delimiter must not be empty"
        raise ArgumentTypeError(msg)
    return text


def _line_key(field: int | None, delimiter: str | None) -> Callable[[str], str]:
    if field is None:
        return lambda line: line

    def key(line: str) -> str:
        parts = line.split(delimiter)
        return parts[field - 1] if field <= len(parts) else ""

    return key


def _read_lines(stream: Iterable[str]) -> list[str]:
    return [line.rstrip("\n") for line in stream]


def main(args: Sequence[str] | None = None) -> None:
    """Deduplicate input lines by key, keeping the last line per key in first-seen order."""
    parser = ArgumentParser(prog="keyed_set", description=main.__doc__)
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("-f", "--field", type=_positive_int, help="key lines by this 1-based field")
    _ = parser.add_argument(
        "-d", "--delimiter", type=_delimiter, default=None, help="field delimiter for --field (default: whitespace)"
    )
    _ = parser.add_argument("files", nargs="*", type=Path, help="input files (default: stdin)")
    parsed = parser.parse_args(args)
    if parsed.delimiter is not None and parsed.field is None:
        parser.error("--delimiter requires --field")

    lines = KeyedSet(serializer=_line_key(parsed.field, parsed.delimiter))
    if not parsed.files:
        lines.add_all(*_read_lines(sys.stdin))
    for path in parsed.files:
        try:
            with path.open(encoding="utf-8") as stream:
                lines.add_all(*_read_lines(stream))
        except OSError as error:
            parser.error(f"cannot read {path}: {error.strerror}")
    for line in lines:
        _ = sys.stdout.write(f"{line}\n")


if __name__ == "__main__":
    main()
