"""
Input handler module turning curses key codes into editor events.
"""

import curses
import logging
from typing import Dict, Final, List, Optional

from ..core.dispatcher import Action, KeyEvent

logger = logging.getLogger(__name__)

ESCAPE: Final[int] = 27

WHEEL_ROWS: Final[int] = 10
WHEEL_UP: Final[int] = curses.BUTTON4_PRESSED
# Older ncurses mouse ABIs have no fifth button.
WHEEL_DOWN: Final[int] = getattr(curses, "BUTTON5_PRESSED", 0)
WHEEL_MASK: Final[int] = WHEEL_UP | WHEEL_DOWN

NAMED_KEYS: Final[Dict[str, int]] = {
    "up": curses.KEY_UP,
    "down": curses.KEY_DOWN,
    "left": curses.KEY_LEFT,
    "right": curses.KEY_RIGHT,
    "pgup": curses.KEY_PPAGE,
    "pgdown": curses.KEY_NPAGE,
    "home": curses.KEY_HOME,
    "end": curses.KEY_END,
    "del": curses.KEY_DC,
    "backspace": curses.KEY_BACKSPACE,
    "enter": ord('\n'),
    "tab": ord('\t'),
    "esc": ESCAPE,
    "space": ord(' '),
}


def parse_key(name: str) -> Optional[int]:
    """
    Translate a key name from the config into a curses key code.

    Args:
        name: A single character, a named key (``"pgup"``) or ``"ctrl+<letter>"``

    Returns:
        The key code, or None if the name is not understood
    """

    key = name.strip()
    if len(key) == 1:
        return ord(key)

    lowered = key.lower()
    if lowered in NAMED_KEYS:
        return NAMED_KEYS[lowered]

    if lowered.startswith("ctrl+") and len(lowered) == 6 and lowered[5].isalpha():
        return ord(lowered[5]) & 0x1f

    if lowered.startswith("f") and lowered[1:].isdigit():
        return curses.KEY_F0 + int(lowered[1:])

    return None


class InputHandler:
    """Reads keys from a curses window and decodes them into events and tokens."""

    def __init__(self, stdscr: 'curses.window', keybindings: Dict[str, List[str]]) -> None:
        self.stdscr = stdscr
        self.command_handlers: Dict[int, Action] = self._setup_handlers(keybindings)

    @staticmethod
    def _setup_handlers(keybindings: Dict[str, List[str]]) -> Dict[int, Action]:
        """Set up the key code to action table."""

        handlers: Dict[int, Action] = {curses.KEY_RESIZE: Action.REDRAW}

        for action_name, keys in keybindings.items():
            try:
                action = Action(action_name)
            except ValueError:
                logger.warning("Unknown action in keybindings: %s", action_name)
                continue

            for key in keys:
                code = parse_key(key)
                if code is None:
                    logger.warning("Cannot bind %r to %s", key, action_name)
                    continue

                if code in handlers and handlers[code] is not action:
                    logger.warning("Key %r rebound from %s to %s", key, handlers[code].value, action_name)

                handlers[code] = action

        return handlers

    def read_key(self) -> int:
        """Block for the next key code."""

        return self.stdscr.getch()

    def read_mouse(self) -> Optional[KeyEvent]:
        """Turn a pending mouse event into a scroll; None for anything else."""

        try:
            _, _, _, _, bstate = curses.getmouse()
        except curses.error:
            return None

        if bstate & WHEEL_UP:
            return KeyEvent(Action.UP, WHEEL_ROWS)
        if WHEEL_DOWN and bstate & WHEEL_DOWN:
            return KeyEvent(Action.DOWN, WHEEL_ROWS)

        return None

    def decode(self, ch: int) -> Optional[KeyEvent]:
        """Map a key code to an event; None for unbound keys."""

        if ch == curses.KEY_MOUSE:
            return self.read_mouse()

        action = self.command_handlers.get(ch)
        if action is None:
            return None

        return KeyEvent(action)

    def read_event(self) -> KeyEvent:
        """Block until a bound key is pressed."""

        while True:
            try:
                ch = self.read_key()
            except KeyboardInterrupt:
                return KeyEvent(Action.QUIT)

            if ch == -1:
                continue

            event = self.decode(ch)
            if event is not None:
                return event

            logger.debug("Key not handled: %d", ch)

    def next_token(self) -> Optional[str]:
        """
        Read one raw character for an insert or replace.

        Returns:
            The character, or None for special keys and missing input
        """

        try:
            ch = self.read_key()
        except KeyboardInterrupt:
            return None

        if ch < 0 or ch > 0xFF:
            return None

        return chr(ch)
