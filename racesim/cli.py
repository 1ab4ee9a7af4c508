"""Command that reads a list of integers from the keyboard and echoes them."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

_CAPACITY = 100
_INT = re.compile(r"[+-]?\d+")


class _IntReader:
    """Reads whitespace-separated integers; after a failed read every read yields 0."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""
        self._failed = False

    def read_int(self) -> int:
        if self._failed:
            return 0
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                break
            line = self._stream.readline()
            if not line:
                self._failed = True
                return 0
            self._buffer = line
        match = _INT.match(self._buffer)
        if match is None:
            self._failed = True
            return 0
        self._buffer = self._buffer[match.end():]
        return int(match.group())


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers from standard input, then list them."""
    parser = argparse.ArgumentParser(
        prog="racesim", description="Read integers from the keyboard and list them."
    )
    parser.parse_args(argv)

    out = sys.stdout
    reader = _IntReader(sys.stdin)
    out.write("Hello, world!\n")
    out.write("Introduceți nr: ")
    out.flush()
    count = reader.read_int()
    if count > _CAPACITY:
        sys.stderr.write(f"at most {_CAPACITY} elements can be read\n")
        return 1

    values = []
    for index in range(count):
        out.write(f"v[{index}] = ")
        out.flush()
        values.append(reader.read_int())

    out.write("\n\n")
    out.write(f"Am citit de la tastatură {count} elemente:\n")
    for value in values:
        out.write(f"- {value}\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())