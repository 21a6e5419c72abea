"""Sources of market ticks, including a CSV file loader."""

from __future__ import annotations

import math
import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from os import PathLike
from typing import TextIO

from backtester.models import Side, Tick

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_BUY_WORDS = frozenset({"buy", "b", "1"})
_SELL_WORDS = frozenset({"sell", "s", "0"})


class DataSource(ABC):
    """A stream of ticks; ``next`` returns ``None`` once exhausted."""

    @abstractmethod
    def next(self) -> Tick | None:
        """Return the next tick, or ``None`` when no more are available."""

    def __iter__(self) -> Iterator[Tick]:
        while (tick := self.next()) is not None:
            yield tick


def _parse_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group().strip())
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _parse_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    literal = match.group().strip()
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        return None
    return value


def _parse_side(text: str) -> Side:
    word = text.lower()
    if word in _BUY_WORDS:
        return Side.BUY
    if word in _SELL_WORDS:
        return Side.SELL
    return Side.UNKNOWN


def parse_tick(line: str) -> Tick | None:
    """Parse ``timestamp,price,quantity,side``; return ``None`` if malformed."""
    fields = line.split(",")
    if fields and fields[-1] == "":
        fields.pop()
    if len(fields) < 4:
        return None

    timestamp = _parse_int(fields[0])
    if timestamp is None:
        return None
    price = _parse_float(fields[1])
    if price is None:
        return None
    quantity = _parse_float(fields[2])
    if quantity is None:
        return None

    return Tick(timestamp, price, quantity, _parse_side(fields[3]))


class CsvTickLoader(DataSource):
    """Reads ticks from a CSV file whose first line is a header.

    A file that cannot be opened is reported on stderr and yields no ticks.
    Reading stops at the end of the file, at an empty line or at a line
    that cannot be parsed.
    """

    def __init__(self, file_path: str | PathLike[str]) -> None:
        self._file: TextIO | None
        try:
            self._file = open(file_path, encoding="utf-8", newline="\n")
        except OSError:
            print(f"[Error] Failed to open file: {file_path}", file=sys.stderr)
            self._file = None
            return
        self._file.readline()

    def next(self) -> Tick | None:
        if self._file is None or self._file.closed:
            return None
        raw = self._file.readline()
        if not raw:
            return None
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            return None
        return parse_tick(line)

    def close(self) -> None:
        """Close the underlying file, if it was opened."""
        if self._file is not None:
            self._file.close()

    def __enter__(self) -> CsvTickLoader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()