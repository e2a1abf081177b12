"""Fixed-width text rows and a bounded log of recent lines."""

from __future__ import annotations

from collections import deque

CONSOLE_BUFFER_COLS = 256
CONSOLE_BUFFER_ROWS = 1024


class Row:
    """A line of text that never grows past its capacity."""

    def __init__(self, capacity: int = CONSOLE_BUFFER_COLS) -> None:
        self.capacity = capacity
        self._chars = ""

    def copy_from(self, text: str) -> None:
        """Replace the contents, truncated to the capacity."""
        self._chars = text[: self.capacity]

    def append(self, text: str) -> None:
        """Append as much of text as still fits."""
        self._chars += text[: self.capacity - len(self._chars)]

    def text(self) -> str:
        return self._chars

    def clear(self) -> None:
        self._chars = ""

    def __len__(self) -> int:
        return len(self._chars)


class RowRing:
    """Keeps the most recent lines; index 0 is the newest."""

    def __init__(self, capacity: int = CONSOLE_BUFFER_ROWS, cols: int = CONSOLE_BUFFER_COLS) -> None:
        self.capacity = capacity
        self.cols = cols
        self._rows: deque[str] = deque(maxlen=capacity)

    def push_line(self, line: str) -> None:
        """Add a line, truncated to the row width, dropping the oldest when full."""
        self._rows.appendleft(line[: self.cols])

    def get(self, index: int) -> str:
        """The line at index, wrapping around the capacity; unused slots are empty."""
        slot = index % self.capacity
        return self._rows[slot] if slot < len(self._rows) else ""

    def __len__(self) -> int:
        return len(self._rows)