"""Buffered token reading and writing for whitespace-separated text streams."""

from __future__ import annotations

import sys
from typing import TextIO

_DIGITS = frozenset("0123456789")
_CHUNK_SIZE = 1 << 20


def _is_digit(c: str) -> bool:
    return bool(c) and c in _DIGITS


def format_fixed(value: float, precision: int = 6) -> str:
    """Format ``value`` with ``precision`` digits after the point.

    Digits are produced one at a time; the last one is rounded up when the
    digit after it is 5 or more, and a carry ripples into the integer part.
    """
    sign = "-" if value < 0 else ""
    x = -value if value < 0 else value
    whole = int(x)
    x -= whole
    digits: list[int] = []
    if x:
        while True:
            d = int(x * 10)
            digits.append(d)
            x = x * 10 - d
            if len(digits) >= precision - 1:
                break
        scaled = x * 10
        following = int((scaled - int(scaled)) * 10)
        digits.append(int(scaled + (1 if following > 4 else 0)))
        if digits[-1] == 10:
            nt = len(digits) - 1
            while digits[nt] == 10 and nt:
                digits[nt] = 0
                nt -= 1
                digits[nt] += 1
            if nt == 0 and digits[0] == 10:
                digits[0] = 0
                whole += 1
    padding = "0" * max(precision - len(digits), 0)
    return f"{sign}{whole}.{''.join(map(str, digits))}{padding}"


class TokenReader:
    """Reads characters, numbers and words from a text stream in large chunks."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._buffer = ""
        self._pos = 0
        self._failed = False

    def _fill(self) -> bool:
        if self._pos >= len(self._buffer):
            self._buffer = self._stream.read(_CHUNK_SIZE)
            self._pos = 0
        return self._pos < len(self._buffer)

    def get(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if not self._fill():
            self._failed = True
            return ""
        c = self._buffer[self._pos]
        self._pos += 1
        return c

    def peek(self) -> str:
        """Return the next character without consuming it ('' at end of input)."""
        if not self._fill():
            self._failed = True
            return ""
        return self._buffer[self._pos]

    def read_int(self) -> int:
        """Skip to the next run of digits and return it as an integer.

        The number is negative when the character just before the digits is '-'.
        """
        negative = False
        c = self.get()
        while c and not _is_digit(c):
            negative = c == "-"
            c = self.get()
        value = 0
        while _is_digit(c):
            value = value * 10 + int(c)
            c = self.get()
        return -value if negative else value

    def read_float(self) -> float:
        """Skip to the next number with an optional fractional part and return it."""
        negative = False
        c = self.get()
        while c and not _is_digit(c):
            negative = c == "-"
            c = self.get()
        whole = []
        while _is_digit(c):
            whole.append(c)
            c = self.get()
        fraction = []
        if c == ".":
            c = self.get()
            while _is_digit(c):
                fraction.append(c)
                c = self.get()
        value = float(f"{''.join(whole) or '0'}.{''.join(fraction) or '0'}")
        return -value if negative else value

    def read_char(self) -> str:
        """Return the next non-whitespace character ('' at end of input)."""
        c = self.get()
        while c and c.isspace():
            c = self.get()
        return c

    def read_word(self) -> str:
        """Return the next whitespace-delimited word ('' at end of input)."""
        c = self.get()
        while c and c.isspace():
            c = self.get()
        chars = []
        while c and not c.isspace():
            chars.append(c)
            c = self.get()
        return "".join(chars)

    def __bool__(self) -> bool:
        return not self._failed


class TokenWriter:
    """Collects output pieces in memory and writes them out on flush."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._parts: list[str] = []
        self._precision = 6

    def set_precision(self, digits: int) -> None:
        """Set the number of digits written after the point for floats."""
        self._precision = digits

    def write(self, *args: object) -> None:
        """Buffer each argument: ints, bools (as 1/0), floats, strings and sequences."""
        for arg in args:
            self._emit(arg)

    def _emit(self, value: object) -> None:
        if isinstance(value, bool):
            self._parts.append("1" if value else "0")
        elif isinstance(value, int):
            self._parts.append(str(value))
        elif isinstance(value, float):
            self._parts.append(format_fixed(value, self._precision))
        elif isinstance(value, str):
            self._parts.append(value)
        elif isinstance(value, (list, tuple)):
            for item in value:
                self._emit(item)
        else:
            raise TypeError(f"cannot write value of type {type(value).__name__}")

    def flush(self, force: bool = False) -> None:
        """Write buffered text to the stream; with ``force`` also flush the stream."""
        self._stream.write("".join(self._parts))
        self._parts.clear()
        if force:
            self._stream.flush()

    def __enter__(self) -> "TokenWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()