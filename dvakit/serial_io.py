"""Line-oriented helpers for talking to a character stream such as a UART."""

from __future__ import annotations

import re
from typing import TextIO

MAX_INPUT = 20
"""Size of the receive buffer, terminator included."""

_ATOI = re.compile(r"\s*([+-]?\d+)")


def write_text(stream: TextIO, data: str) -> None:
    """Write *data* to *stream* unchanged."""
    stream.write(data)


def read_string(stream: TextIO) -> str:
    """Read characters until a carriage return or a full buffer.

    At most ``MAX_INPUT - 1`` characters are kept. The carriage return is
    consumed but not returned; when the buffer fills, the character that
    would have overflowed it is consumed and dropped. Reading also stops at
    the end of the stream.
    """
    chars: list[str] = []
    while True:
        char = stream.read(1)
        if not char or char == "\r" or len(chars) == MAX_INPUT - 1:
            return "".join(chars)
        chars.append(char)


def send_int(stream: TextIO, value: int) -> None:
    """Write *value* in decimal, with no separator."""
    write_text(stream, str(int(value)))


def read_int(stream: TextIO) -> int:
    """Read one line and parse its leading integer, giving 0 if there is none."""
    match = _ATOI.match(read_string(stream))
    return int(match.group(1)) if match else 0