"""Hex dump rendering: offsets, hex bytes and printable text per line."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

__all__ = [
    "BYTES_PER_LINE",
    "HexLine",
    "filter_text_char",
    "format_offset",
    "line_count",
    "hex_lines",
    "format_hex_dump",
    "main",
]

BYTES_PER_LINE = 0x10
_HEX_WIDTH = BYTES_PER_LINE * 3 - 1


def filter_text_char(value: int) -> str:
    """Printable ASCII character for ``value``, or ``'.'`` for anything else."""
    if 31 < value < 127:
        return chr(value)
    return "."


def format_offset(offset: int) -> str:
    """Offset column text: eight lower-case hex digits followed by ``h``."""
    return f"{offset:08x}h"


def line_count(size: int) -> int:
    """Number of lines needed to show ``size`` bytes; empty data still takes one."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return 1
    return ((size - 1) >> 4) + 1


@dataclass(frozen=True)
class HexLine:
    """One line of a hex dump."""

    offset: int
    data: bytes

    @property
    def hex(self) -> str:
        """The bytes as two-digit hex values separated by spaces."""
        return " ".join(f"{b:02x}" for b in self.data)

    @property
    def text(self) -> str:
        """The bytes as printable characters."""
        return "".join(filter_text_char(b) for b in self.data)

    def __str__(self) -> str:
        return f"{format_offset(self.offset)}  {self.hex.ljust(_HEX_WIDTH)}  {self.text}"


def hex_lines(data: bytes) -> Iterator[HexLine]:
    """Split ``data`` into dump lines of sixteen bytes each."""
    view = bytes(data)
    for line in range(line_count(len(view))):
        start = line * BYTES_PER_LINE
        yield HexLine(start, view[start : start + BYTES_PER_LINE])


def format_hex_dump(data: bytes) -> str:
    """Full hex dump of ``data``, one line per sixteen bytes."""
    return "\n".join(str(line) for line in hex_lines(data))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a hex dump of a file."""
    parser = argparse.ArgumentParser(description="Show a file as a hex dump.")
    parser.add_argument("path", help="file to dump")
    args = parser.parse_args(argv)
    try:
        with open(args.path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(format_hex_dump(data))
    return 0