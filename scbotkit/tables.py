"""Semicolon separated table and log files with a timestamp column."""

from __future__ import annotations

import argparse
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Sequence

TIME_HEADER = "time (seconds)"
SEPARATOR = "; "


class Printer(ABC):
    """Receives every row that is echoed by a writer."""

    @abstractmethod
    def emit(self, message: str) -> None:
        """Output one formatted row."""


class StdPrinter(Printer):
    """Writes echoed rows to standard output."""

    def emit(self, message: str) -> None:
        print(message)


def _format_cell(kind: str, value: Any) -> str:
    if kind == "i":
        return str(int(value))
    if kind == "f":
        return "%f" % float(value)
    return f'"{value}"'


class TableWriter:
    """Appends timestamped rows of typed columns to a text table.

    Column types are given as one character each: ``i`` for integers,
    ``f`` for floats and ``s`` for strings.  A character of any other kind
    takes no value and repeats the text of the cell before it.
    """

    def __init__(self, filename: str | Path, append: bool = True) -> None:
        self.filename = Path(filename)
        self.printer: Printer | None = None
        self.column_types = ""
        self.start_time = int(time.time())
        self._write_headers = not append or not self.filename.is_file()
        self._stream = self.filename.open("a" if append else "w", encoding="utf-8")

    def set_column_headers(self, types: str, *args: str) -> None:
        """Declare the column types and, for a new file, write the header line."""
        if self._write_headers and len(args) < len(types):
            raise TypeError(
                f"expected {len(types)} column headers, got {len(args)}"
            )
        self.column_types = types
        if self._write_headers:
            headers = [TIME_HEADER, *args[: len(types)]]
            self._stream.write("".join(h + SEPARATOR for h in headers) + "\n")
            self._stream.flush()

    def add_row(self, *args: Any, echo: bool = True) -> str:
        """Write one row of values matching the column types and return it."""
        previous = f"{int(time.time())}{SEPARATOR}"
        line = previous
        values = iter(args)
        for kind in self.column_types:
            if kind in "ifs":
                try:
                    value = next(values)
                except StopIteration:
                    raise TypeError(
                        f"row needs values for column types {self.column_types!r}"
                    ) from None
                previous = _format_cell(kind, value)
            line += previous + SEPARATOR
        self._stream.write(line + "\n")
        self._stream.flush()
        if echo and self.printer is not None:
            self.printer.emit(line)
        return line

    def close(self) -> None:
        """Close the underlying file."""
        if not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> "TableWriter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class LogWriter(TableWriter):
    """A table with a single text column, always appended to."""

    def __init__(self, filename: str | Path) -> None:
        super().__init__(filename, True)
        self.set_column_headers("s", "Text")

    def add_line(self, message: str, echo: bool = True) -> str:
        """Write one timestamped line of text."""
        return self.add_row(message, echo=echo)


def main(argv: Sequence[str] | None = None) -> int:
    """Write a sample table and a sample log into a directory."""
    parser = argparse.ArgumentParser(description="Write sample table and log files.")
    parser.add_argument("directory", nargs="?", default=".")
    options = parser.parse_args(argv)
    directory = Path(options.directory)
    printer = StdPrinter()

    with TableWriter(directory / "testFile.csv") as table:
        table.printer = printer
        table.set_column_headers("sifi", "TestString", "Integer1", "Float", "Integer2")
        for _ in range(4):
            table.add_row("Eine Nachricht", 123, 456.78, 90)

    text = (
        "TestZeile, Hier kann ein ziemlich langer Text stehen! "
        "Sorry guys, just a habit to write texts in German. :D"
    )
    with LogWriter(directory / "testFile.log") as log:
        log.printer = printer
        for _ in range(3):
            log.add_line(text)
    return 0