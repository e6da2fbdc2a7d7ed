"""
Change log module recording invertible buffer mutations for undo.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, TYPE_CHECKING

from .buffer import ByteBuffer

if TYPE_CHECKING:
    from .cursor import Cursor

logger = logging.getLogger(__name__)


class ChangeKind(Enum):
    """Kind of primitive mutation a change entry describes."""

    INSERT = 'insert'
    REMOVE = 'remove'
    REPLACE = 'replace'


@dataclass(frozen=True)
class Change:
    """Represents one committed edit and, implicitly, its inverse."""
    address: int
    old_value: int
    new_value: int
    kind: ChangeKind


def apply_inverse(change: Change, buffer: ByteBuffer, cursor: 'Cursor') -> None:
    """Undo a single change on the buffer and move the cursor to it."""

    if change.kind is ChangeKind.INSERT:
        buffer.delete_at(change.address)
        cursor.index = change.address

        if cursor.index == len(buffer):
            cursor.left(1)

    elif change.kind is ChangeKind.REMOVE:
        buffer.insert_at(change.address, change.old_value)
        cursor.index = change.address

    elif change.kind is ChangeKind.REPLACE:
        buffer.replace_at(change.address, change.old_value)
        cursor.index = change.address


class ChangeLog:
    """Append-only log of changes, popped from the end to undo."""

    def __init__(self) -> None:
        self._entries: List[Change] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Change]:
        return iter(self._entries)

    @property
    def last(self) -> Optional[Change]:
        """The most recently recorded change, if any."""

        if not self._entries:
            return None

        return self._entries[-1]

    def record(self, change: Change) -> None:
        """Append a change to the log."""

        self._entries.append(change)
        logger.debug("Recorded %s at 0x%08x: %02x -> %02x",
                     change.kind.value, change.address, change.old_value, change.new_value)

    def undo_last(self, buffer: ByteBuffer, cursor: 'Cursor') -> Optional[Change]:
        """
        Pop the newest change and apply its inverse.

        Args:
            buffer: Buffer the change was applied to
            cursor: Cursor to move onto the restored address

        Returns:
            The undone change, or None if the log was empty
        """

        if not self._entries:
            return None

        change = self._entries.pop()
        apply_inverse(change, buffer, cursor)

        logger.debug("Undid %s at 0x%08x", change.kind.value, change.address)
        return change
