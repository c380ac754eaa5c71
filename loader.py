"""Reading grids from their text form: one row per line, one label per character."""

from __future__ import annotations
from pathlib import Path
from typing import TextIO

from core import Grid


class GridFormatError(ValueError):
    """The text does not describe a non-empty rectangular grid."""


def parse_grid(text: str) -> Grid:
    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise GridFormatError("grid is empty")

    width = len(lines[0])
    for lineno, line in enumerate(lines, start=1):
        if line == "":
            raise GridFormatError(f"line {lineno}: blank line inside grid")
        if len(line) != width:
            raise GridFormatError(
                f"line {lineno}: row has length {len(line)}, expected {width}"
            )

    return Grid.from_rows(lines)


def read_grid(stream: TextIO) -> Grid:
    return parse_grid(stream.read())


def load_grid(path: str | Path) -> Grid:
    with open(path, encoding="utf-8") as f:
        return read_grid(f)
