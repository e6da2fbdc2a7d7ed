"""
Editing session holding all mutable editor state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .buffer import BYTES_PER_ROW, ByteBuffer
from .changes import ChangeLog
from .cursor import Cursor, Viewport
from .inspector import Endianness, Inspection, inspect


class Mode(Enum):
    """How the next input token is interpreted."""

    NORMAL = 'normal'
    INSERT = 'insert'
    REPLACE = 'replace'


@dataclass(frozen=True)
class RenderState:
    """Snapshot of everything the renderer needs to draw one frame."""
    begin: int
    end: int
    data: bytes
    cursor: int
    length: int
    mode: Mode
    endianness: Endianness
    change_count: int
    inspection: Optional[Inspection]
    filename: Optional[str] = None
    status_message: Optional[str] = None

    @property
    def cursor_row(self) -> int:
        return self.cursor // BYTES_PER_ROW


class EditorSession:
    """Owns the buffer, change log, cursor, viewport and mode of one file."""

    def __init__(self, buffer: ByteBuffer) -> None:
        self.buffer = buffer
        self.changes = ChangeLog()
        self.cursor = Cursor(buffer)
        self.viewport = Viewport()
        self.mode = Mode.NORMAL
        self.endianness = Endianness.LITTLE
        self.status_message: Optional[str] = None

    @classmethod
    def from_file(cls, filename: str) -> 'EditorSession':
        """Start a session on a file. Raises OSError if it cannot be read."""

        return cls(ByteBuffer.load_file(filename))

    @property
    def filename(self) -> Optional[str]:
        return self.buffer.filename

    def toggle_endianness(self) -> Endianness:
        """Flip the byte order used by the value inspector."""

        self.endianness = self.endianness.toggled()
        return self.endianness

    def inspect(self) -> Optional[Inspection]:
        """Decode the bytes at the cursor."""

        return inspect(self.buffer.data, self.cursor.index, self.endianness)

    def save(self) -> str:
        """Overwrite the source file with the buffer; the change log is kept."""

        return self.buffer.save_file()

    def snapshot(self, rows_visible: int) -> RenderState:
        """
        Bring the viewport up to date and capture the state to render.

        Args:
            rows_visible: Number of hex rows the renderer can display

        Returns:
            RenderState: Immutable copy of the visible state
        """

        self.viewport.update(self.cursor.index, len(self.buffer), rows_visible)

        return RenderState(
            begin=self.viewport.begin,
            end=self.viewport.end,
            data=self.buffer.slice(self.viewport.begin, self.viewport.end),
            cursor=self.cursor.index,
            length=len(self.buffer),
            mode=self.mode,
            endianness=self.endianness,
            change_count=len(self.changes),
            inspection=self.inspect(),
            filename=self.filename,
            status_message=self.status_message,
        )
