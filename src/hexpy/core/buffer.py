"""
Buffer module for holding and mutating the bytes being edited.
"""

import logging
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

BYTES_PER_ROW = 16


class OutOfRangeError(IndexError):
    """Raised when a buffer operation is indexed outside its valid bounds."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for buffer of {length} bytes")
        self.index = index
        self.length = length


class ByteBuffer:
    """Mutable, ordered sequence of bytes loaded from a file."""

    def __init__(self, initial_data: bytes = b'', filename: Optional[str] = None) -> None:
        self.data = bytearray(initial_data)
        self.filename = filename

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __repr__(self) -> str:
        return f"ByteBuffer({bytes(self.data[:16])!r}{'...' if len(self.data) > 16 else ''}, len={len(self.data)})"

    @staticmethod
    def _check_value(value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

    def insert_at(self, index: int, value: int) -> None:
        """Insert a byte before ``index``; ``index`` may be one past the end."""

        self._check_value(value)

        if not 0 <= index <= len(self.data):
            raise OutOfRangeError(index, len(self.data))

        self.data.insert(index, value)

    def delete_at(self, index: int) -> int:
        """Remove the byte at ``index`` and return it."""

        if not 0 <= index < len(self.data):
            raise OutOfRangeError(index, len(self.data))

        removed = self.data[index]
        del self.data[index]
        return removed

    def replace_at(self, index: int, value: int) -> int:
        """Overwrite the byte at ``index`` and return the previous value."""

        self._check_value(value)

        if not 0 <= index < len(self.data):
            raise OutOfRangeError(index, len(self.data))

        previous = self.data[index]
        self.data[index] = value
        return previous

    def slice(self, begin: int, end: int) -> bytes:
        """Get a copy of the bytes in ``[begin, end)``, clipped to the buffer."""

        begin = max(0, begin)
        end = min(end, len(self.data))
        if begin >= end:
            return b''

        return bytes(self.data[begin:end])

    def get_row(self, row: int) -> bytes:
        """Get the bytes of one display row."""

        start = row * BYTES_PER_ROW
        return self.slice(start, start + BYTES_PER_ROW)

    def get_row_count(self) -> int:
        """Get the total number of display rows."""

        return (len(self.data) + BYTES_PER_ROW - 1) // BYTES_PER_ROW

    @classmethod
    def load_file(cls, filename: str) -> 'ByteBuffer':
        """
        Read an entire file into a new buffer.

        Args:
            filename: Path of the file to edit

        Returns:
            ByteBuffer: Buffer holding the file contents

        Raises:
            OSError: If the file cannot be opened or read
        """

        with open(filename, 'rb') as f:
            data = f.read()

        logger.info("Loaded %d bytes from %s", len(data), filename)
        return cls(data, filename=filename)

    def save_file(self, filename: Optional[str] = None) -> str:
        """
        Overwrite a file with the full buffer contents.

        Args:
            filename: Optional target path. If None, uses the loaded filename.

        Returns:
            str: The path that was written

        Raises:
            OSError: If no filename is known or the write fails
        """

        save_filename = filename or self.filename
        if not save_filename:
            raise OSError("No filename specified")

        with open(save_filename, 'wb') as f:
            f.write(bytes(self.data))

        self.filename = save_filename
        logger.info("Wrote %d bytes to %s", len(self.data), save_filename)
        return save_filename
