"""Line buffer for messages in the manner of the DBMS_OUTPUT package."""

from __future__ import annotations

import warnings
from typing import Callable, Optional

__all__ = [
    "BufferOverflowError",
    "DbmsOutput",
    "BUFSIZE_DEFAULT",
    "BUFSIZE_MIN",
    "BUFSIZE_MAX",
    "BUFSIZE_UNLIMITED",
]

BUFSIZE_DEFAULT = 20000
BUFSIZE_MIN = 2000
BUFSIZE_MAX = 1000000
BUFSIZE_UNLIMITED = BUFSIZE_MAX

_TERMINATOR = b"\0"


class BufferOverflowError(RuntimeError):
    """Raised when writing would exceed the buffer limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"buffer overflow, limit of {limit} bytes")
        self.limit = limit


class DbmsOutput:
    """Buffers lines of output, readable back or forwarded to a sink.

    With server output switched on every completed line is handed to
    ``sink`` at once instead of being kept.
    """

    def __init__(self, sink: Optional[Callable[[str], None]] = None) -> None:
        self._sink: Callable[[str], None] = sink if sink is not None else print
        self._server_output = False
        self._buffer: Optional[bytearray] = None
        self._size = 0
        self._get = 0

    # -- internals --------------------------------------------------------

    def _enable(self, size: int) -> None:
        if self._buffer is None:
            self._buffer = bytearray()
            self._size = size
            self._get = 0
        elif size > len(self._buffer):
            # The limit never drops below what is already held.
            self._size = size

    def _add(self, data: bytes) -> None:
        assert self._buffer is not None
        if self._get > 0:
            self._get = 0
            self._buffer.clear()
        if len(self._buffer) + len(data) > self._size:
            raise BufferOverflowError(self._size)
        self._buffer += data

    def _add_newline(self) -> None:
        self._add(_TERMINATOR)
        if self._server_output:
            self._send()

    def _send(self) -> None:
        assert self._buffer is not None
        if not self._buffer:
            return
        if not self._buffer.endswith(_TERMINATOR):
            raise RuntimeError("internal error: wrong message format detected")
        body = bytes(self._buffer[:-1]).replace(_TERMINATOR, b"\n")
        self._buffer.clear()
        self._sink(body.decode("utf-8", errors="replace"))

    def _next(self) -> Optional[str]:
        if self._buffer is None or self._get >= len(self._buffer):
            return None
        end = self._buffer.find(_TERMINATOR, self._get)
        if end < 0:
            end = len(self._buffer)
        line = bytes(self._buffer[self._get:end])
        self._get += len(line) + 1
        return line.decode("utf-8", errors="replace")

    # -- public interface -------------------------------------------------

    def enable(self, size: Optional[int] = BUFSIZE_DEFAULT) -> None:
        """Switch buffering on with a limit of ``size`` bytes.

        None means the largest limit; values outside the allowed range are
        clamped with a warning.
        """
        if size is None:
            size = BUFSIZE_UNLIMITED
        elif size > BUFSIZE_MAX:
            size = BUFSIZE_MAX
            warnings.warn(f"Limit decreased to {BUFSIZE_MAX} bytes.", stacklevel=2)
        elif size < BUFSIZE_MIN:
            size = BUFSIZE_MIN
            warnings.warn(f"Limit increased to {BUFSIZE_MIN} bytes.", stacklevel=2)
        self._enable(size)

    def disable(self) -> None:
        """Switch buffering off and drop everything buffered."""
        self._buffer = None
        self._size = 0
        self._get = 0

    def serveroutput(self, enabled: bool) -> None:
        """Forward completed lines to the sink; enables buffering if needed."""
        self._server_output = bool(enabled)
        if self._server_output and self._buffer is None:
            self._enable(BUFSIZE_DEFAULT)

    def put(self, text: str) -> None:
        """Append text to the current line."""
        if self._buffer is not None:
            self._add(text.encode("utf-8"))

    def put_line(self, text: str) -> None:
        """Append text and end the line."""
        if self._buffer is not None:
            self._add(text.encode("utf-8"))
            self._add_newline()

    def new_line(self) -> None:
        """End the current line."""
        if self._buffer is not None:
            self._add_newline()

    def get_line(self) -> tuple[Optional[str], int]:
        """The next buffered line and status 0, or (None, 1) when none is left."""
        line = self._next()
        if line is None:
            return None, 1
        return line, 0

    def get_lines(self, max_lines: int) -> tuple[list[str], int]:
        """Up to ``max_lines`` buffered lines and how many were returned."""
        lines: list[str] = []
        while len(lines) < max_lines:
            line = self._next()
            if line is None:
                break
            lines.append(line)
        return lines, len(lines)