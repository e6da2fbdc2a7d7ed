"""
Edit dispatcher mapping abstract key events to buffer and cursor operations.

The dispatcher is a small state machine over ``Mode``. Insert and replace
pull their value from an injected token provider, so the whole edit cycle
can run without a terminal.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Protocol

from .buffer import ByteBuffer, OutOfRangeError
from .changes import Change, ChangeKind
from .session import EditorSession, Mode
from ..utils.hex_utils import is_hex_digit, is_printable, parse_hex_pair

logger = logging.getLogger(__name__)

PLACEHOLDER_BYTE = 0x00
DEFAULT_PAGE_ROWS = 20


class InvalidEditInputError(ValueError):
    """Raised when a replace/insert token cannot be decoded into a byte."""


class Action(Enum):
    """Abstract editor commands produced by the input layer."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    PAGE_UP = 'page_up'
    PAGE_DOWN = 'page_down'
    HOME = 'home'
    END = 'end'
    START_REPLACE = 'replace'
    START_INSERT = 'insert'
    DELETE = 'delete'
    UNDO = 'undo'
    SAVE = 'save'
    TOGGLE_ENDIANNESS = 'toggle_endianness'
    REDRAW = 'redraw'
    QUIT = 'quit'


@dataclass(frozen=True)
class KeyEvent:
    """One decoded input event."""
    action: Action
    count: int = 1


class TokenProvider(Protocol):
    """Source of raw character tokens while an edit is in progress."""

    def next_token(self) -> Optional[str]:
        """Block for the next token; None if no input is available."""
        ...


def decode_token(first: Optional[str], next_token: Callable[[], Optional[str]]) -> int:
    """
    Turn the token(s) typed after replace/insert into a byte value.

    A hex digit consumes one more token as the low digit, defaulting to '0'
    when that token is missing or not a hex digit. A printable ASCII
    character stands for its own code.

    Args:
        first: First token typed
        next_token: Callable returning the following token

    Returns:
        int: The byte value

    Raises:
        InvalidEditInputError: If the first token is neither
    """

    if first is None:
        raise InvalidEditInputError("No input")

    if is_hex_digit(first):
        second = next_token()
        if not is_hex_digit(second):
            second = '0'
        return parse_hex_pair(first, second)

    if len(first) == 1 and is_printable(ord(first)):
        return ord(first)

    raise InvalidEditInputError(f"Cannot use {first!r} as a byte value")


class PendingInsert:
    """
    Tentative insert of a placeholder byte.

    Entering the context inserts the placeholder. Unless ``commit`` is
    called, leaving the context removes it again, whatever the exit path.
    """

    def __init__(self, buffer: ByteBuffer, index: int) -> None:
        self.buffer = buffer
        self.index = index
        self.committed = False

    def __enter__(self) -> 'PendingInsert':
        self.buffer.insert_at(self.index, PLACEHOLDER_BYTE)
        return self

    def commit(self, value: int) -> Change:
        """Overwrite the placeholder and return the change to record."""

        placeholder = self.buffer.replace_at(self.index, value)
        self.committed = True
        return Change(self.index, placeholder, value, ChangeKind.INSERT)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self.committed:
            self.buffer.delete_at(self.index)
        return False


class EditDispatcher:
    """Applies key events to an editing session."""

    def __init__(self, session: EditorSession, tokens: TokenProvider,
                 page_rows: int = DEFAULT_PAGE_ROWS,
                 on_mode_change: Optional[Callable[[EditorSession], None]] = None) -> None:
        self.session = session
        self.tokens = tokens
        self.page_rows = page_rows
        self.on_mode_change = on_mode_change
        self.handlers: Dict[Action, Callable[[int], None]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[Action, Callable[[int], None]]:
        """Set up the action handlers."""

        cursor = self.session.cursor

        return {
            Action.UP: cursor.up,
            Action.DOWN: cursor.down,
            Action.LEFT: cursor.left,
            Action.RIGHT: cursor.right,
            Action.PAGE_UP: lambda n: cursor.up(self.page_rows * n),
            Action.PAGE_DOWN: lambda n: cursor.down(self.page_rows * n),
            Action.HOME: lambda _: cursor.to_start(),
            Action.END: lambda _: cursor.to_end(),
            Action.START_REPLACE: lambda _: self._start_replace(),
            Action.START_INSERT: lambda _: self._start_insert(),
            Action.DELETE: lambda _: self._delete(),
            Action.UNDO: lambda _: self._undo(),
            Action.SAVE: lambda _: self._save(),
            Action.TOGGLE_ENDIANNESS: lambda _: self._toggle_endianness(),
            Action.REDRAW: lambda _: None,
        }

    def dispatch(self, event: KeyEvent) -> bool:
        """Handle a single event. Returns False if the session should end."""

        if event.action is Action.QUIT:
            logger.info("Quit requested")
            return False

        self.session.status_message = None

        handler = self.handlers.get(event.action)
        if handler is None:
            logger.warning("No handler for %s", event.action)
            return True

        handler(max(1, event.count))
        return True

    def _enter_mode(self, mode: Mode) -> None:
        self.session.mode = mode
        if self.on_mode_change:
            self.on_mode_change(self.session)

    def _read_value(self) -> int:
        return decode_token(self.tokens.next_token(), self.tokens.next_token)

    def _start_replace(self) -> None:
        """Overwrite the byte under the cursor with the next typed value."""

        session = self.session
        index = session.cursor.index

        try:
            self._enter_mode(Mode.REPLACE)
            value = self._read_value()
            previous = session.buffer.replace_at(index, value)
            session.changes.record(Change(index, previous, value, ChangeKind.REPLACE))
        except (InvalidEditInputError, OutOfRangeError) as e:
            logger.debug("Replace at 0x%08x aborted: %s", index, e)
        finally:
            session.mode = Mode.NORMAL

    def _start_insert(self) -> None:
        """Insert the next typed value before the cursor."""

        session = self.session
        index = session.cursor.index

        try:
            with PendingInsert(session.buffer, index) as pending:
                self._enter_mode(Mode.INSERT)
                value = self._read_value()
                session.changes.record(pending.commit(value))
        except (InvalidEditInputError, OutOfRangeError) as e:
            logger.debug("Insert at 0x%08x aborted: %s", index, e)
        finally:
            session.mode = Mode.NORMAL

        if session.cursor.index == len(session.buffer):
            session.cursor.left(1)

    def _delete(self) -> None:
        """Remove the byte under the cursor."""

        session = self.session
        index = session.cursor.index

        if not len(session.buffer) or index >= len(session.buffer):
            return

        removed = session.buffer.delete_at(index)
        session.changes.record(Change(index, removed, 0, ChangeKind.REMOVE))

        if index == len(session.buffer):
            session.cursor.left(1)

    def _undo(self) -> None:
        """Undo the last change."""

        if self.session.changes.undo_last(self.session.buffer, self.session.cursor) is None:
            self.session.status_message = "Nothing to undo"

    def _save(self) -> None:
        """Write the buffer over the source file."""

        try:
            filename = self.session.save()
        except OSError as e:
            logger.error("Failed to save %s: %s", self.session.filename, e)
            self.session.status_message = f"Error saving: {e}"
            return

        self.session.status_message = f"Saved: {filename}"

    def _toggle_endianness(self) -> None:
        endianness = self.session.toggle_endianness()
        logger.debug("Endianness is now %s", endianness.value)
