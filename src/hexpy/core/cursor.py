"""
Cursor and viewport management for the hex view.
"""

from dataclasses import dataclass
from typing import Sized

from .buffer import BYTES_PER_ROW


class Cursor:
    """Tracks the selected byte address, clamped to the buffer."""

    def __init__(self, buffer: Sized, index: int = 0) -> None:
        self.buffer = buffer
        self.index = index
        self.clamp()

    def __repr__(self) -> str:
        return f"Cursor(index={self.index})"

    @property
    def last_index(self) -> int:
        """Highest valid cursor address (0 for an empty buffer)."""

        return max(0, len(self.buffer) - 1)

    @property
    def row(self) -> int:
        """Row number the cursor is on."""

        return self.index // BYTES_PER_ROW

    @property
    def column(self) -> int:
        """Column within the cursor's row."""

        return self.index % BYTES_PER_ROW

    def clamp(self) -> None:
        """Pull the cursor back into ``[0, len - 1]``."""

        self.index = max(0, min(self.index, self.last_index))

    def up(self, n: int = 1) -> None:
        """Move up ``n`` rows."""

        step = BYTES_PER_ROW * n
        self.index = self.index - step if self.index >= step else 0

    def down(self, n: int = 1) -> None:
        """Move down ``n`` rows."""

        step = BYTES_PER_ROW * n
        if self.index + step < len(self.buffer):
            self.index += step
            return

        self.index = self.last_index

    def left(self, n: int = 1) -> None:
        """Move left ``n`` bytes."""

        # The buffer may have shrunk under the cursor.
        if self.index >= len(self.buffer):
            self.index = self.last_index
            return

        self.index = max(0, self.index - n)

    def right(self, n: int = 1) -> None:
        """Move right ``n`` bytes."""

        self.index = min(self.index + n, self.last_index)

    def to_start(self) -> None:
        """Jump to the first byte."""

        self.index = 0

    def to_end(self) -> None:
        """Jump to the last byte."""

        self.index = self.last_index

    def move_to(self, index: int) -> None:
        """Jump to an arbitrary address, clamped to the buffer."""

        self.index = index
        self.clamp()


@dataclass
class Viewport:
    """Row-aligned window ``[begin, end)`` of visible buffer addresses."""
    begin: int = 0
    end: int = 0

    def contains(self, index: int) -> bool:
        """Check whether an address lies inside the window."""

        return self.begin <= index < self.end

    def update(self, cursor_index: int, length: int, rows_visible: int) -> bool:
        """
        Scroll the window so the cursor's row is visible.

        The window is only moved when the cursor has left it, measured against
        the current height and length. Scrolling down puts the cursor's row at
        the bottom, scrolling up puts it at the top.

        Args:
            cursor_index: Address of the selected byte
            length: Current buffer length
            rows_visible: Number of rows the renderer can show

        Returns:
            bool: True if the window was moved
        """

        rows_visible = max(1, rows_visible)
        viewport_size = rows_visible * BYTES_PER_ROW
        cursor_row = cursor_index // BYTES_PER_ROW
        fresh = self.begin == self.end
        moved = False

        # The visible height may have changed since the last frame.
        self.end = min(self.begin + viewport_size, length)

        if not self.contains(cursor_index):
            if fresh or cursor_index < self.begin:
                top_row = cursor_row
            else:
                top_row = max(0, cursor_row - (rows_visible - 1))

            self.begin = top_row * BYTES_PER_ROW
            moved = True

        self.end = min(self.begin + viewport_size, length)
        return moved

    def rows(self) -> range:
        """Row numbers covered by the window."""

        first = self.begin // BYTES_PER_ROW
        last = (self.end + BYTES_PER_ROW - 1) // BYTES_PER_ROW
        return range(first, max(first, last))
