"""A bounded ring of output lines, dumped to a stream on demand."""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO

DEFAULT_MAX_LINES = 100
DEFAULT_LINE_LIMIT = 80
_ELLIPSIS = "..."


def truncate_line(line: str, limit: int = DEFAULT_LINE_LIMIT) -> str:
    """Cut ``line`` to at most ``limit`` characters, ending with '...' if cut."""
    if limit < len(_ELLIPSIS):
        raise ValueError(f"limit must be at least {len(_ELLIPSIS)}")
    if len(line) > limit:
        return line[: limit - len(_ELLIPSIS)] + _ELLIPSIS
    return line


class SerialBuffer:
    """Keeps the most recent ``max_lines`` lines; older ones are dropped."""

    def __init__(self, max_lines: int = DEFAULT_MAX_LINES, stream: TextIO | None = None) -> None:
        if max_lines < 1:
            raise ValueError("max_lines must be at least 1")
        self.max_lines = max_lines
        self._stream = stream
        self._lines: deque[str] = deque(maxlen=max_lines)

    def println(self, line: str) -> None:
        """Append a line, replacing the oldest if the buffer is full."""
        self._lines.append(line)

    def lines(self) -> list[str]:
        """The buffered lines, oldest first."""
        return list(self._lines)

    def flush(self) -> None:
        """Write every buffered line, oldest first, to the stream."""
        stream = self._stream if self._stream is not None else sys.stdout
        for line in self._lines:
            stream.write(line + "\n")
        stream.flush()

    def clear(self) -> None:
        """Drop every buffered line."""
        self._lines.clear()