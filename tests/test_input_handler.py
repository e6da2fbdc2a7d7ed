"""
Tests for key decoding.
"""

import curses

import pytest

from hexpy.config import DEFAULT_CONFIG
from hexpy.core.dispatcher import Action, KeyEvent
from hexpy.ui.input_handler import WHEEL_DOWN, WHEEL_ROWS, WHEEL_UP, InputHandler, parse_key


class FakeScreen:
    """Stands in for a curses window, replaying key codes."""

    def __init__(self, keys):
        self.keys = list(keys)

    def getch(self):
        if not self.keys:
            return -1
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key


def make_handler(keys, keybindings=None):
    return InputHandler(FakeScreen(keys), keybindings or DEFAULT_CONFIG["keybindings"])


@pytest.mark.parametrize("name, code", [
    ("q", ord('q')),
    ("Q", ord('Q')),
    ("pgup", curses.KEY_PPAGE),
    ("PgDown", curses.KEY_NPAGE),
    ("del", curses.KEY_DC),
    ("esc", 27),
    ("ctrl+s", 19),
    ("f2", curses.KEY_F0 + 2),
])
def test_parse_key(name, code):
    assert parse_key(name) == code


@pytest.mark.parametrize("name", ["", "nosuchkey", "ctrl+", "ctrl+1"])
def test_parse_key_unknown(name):
    assert parse_key(name) is None


class TestReadEvent:

    @pytest.mark.parametrize("key, action", [
        (ord('q'), Action.QUIT),
        (ord('w'), Action.SAVE),
        (ord('u'), Action.UNDO),
        (ord('x'), Action.DELETE),
        (curses.KEY_DC, Action.DELETE),
        (ord('r'), Action.START_REPLACE),
        (ord('i'), Action.START_INSERT),
        (ord('e'), Action.TOGGLE_ENDIANNESS),
        (ord('h'), Action.LEFT),
        (ord('j'), Action.DOWN),
        (ord('k'), Action.UP),
        (ord('l'), Action.RIGHT),
        (curses.KEY_LEFT, Action.LEFT),
        (curses.KEY_PPAGE, Action.PAGE_UP),
        (curses.KEY_NPAGE, Action.PAGE_DOWN),
        (curses.KEY_HOME, Action.HOME),
        (curses.KEY_END, Action.END),
        (curses.KEY_RESIZE, Action.REDRAW),
    ])
    def test_default_bindings(self, key, action):
        assert make_handler([key]).read_event() == KeyEvent(action)

    def test_unbound_keys_are_skipped(self):
        handler = make_handler([-1, ord('z'), ord('?'), ord('j')])

        assert handler.read_event() == KeyEvent(Action.DOWN)

    def test_interrupt_quits(self):
        handler = make_handler([KeyboardInterrupt()])

        assert handler.read_event() == KeyEvent(Action.QUIT)

    def test_custom_bindings(self):
        handler = make_handler([ord('s'), ord('w')], {"save": ["s"], "bogus": ["b"], "quit": ["nosuchkey"]})

        assert handler.decode(ord('s')) == KeyEvent(Action.SAVE)
        assert handler.decode(ord('w')) is None
        assert handler.decode(ord('b')) is None


class TestMouseWheel:

    @pytest.fixture
    def mouse_state(self, monkeypatch):
        states = []

        def getmouse():
            state = states.pop(0)
            if isinstance(state, BaseException):
                raise state
            return (0, 5, 5, 0, state)

        monkeypatch.setattr(curses, "getmouse", getmouse)
        return states

    def test_wheel_up_scrolls_up(self, mouse_state):
        mouse_state.append(WHEEL_UP)

        assert make_handler([curses.KEY_MOUSE]).read_event() == KeyEvent(Action.UP, WHEEL_ROWS)

    @pytest.mark.skipif(not WHEEL_DOWN, reason="curses build has no fifth mouse button")
    def test_wheel_down_scrolls_down(self, mouse_state):
        mouse_state.append(WHEEL_DOWN)

        assert make_handler([curses.KEY_MOUSE]).read_event() == KeyEvent(Action.DOWN, 10)

    def test_other_mouse_events_are_skipped(self, mouse_state):
        mouse_state.extend([curses.BUTTON1_CLICKED, curses.error("no event")])
        handler = make_handler([curses.KEY_MOUSE, curses.KEY_MOUSE, ord('k')])

        assert handler.read_event() == KeyEvent(Action.UP)

    def test_mouse_aborts_pending_edit_token(self):
        assert make_handler([curses.KEY_MOUSE]).next_token() is None


class TestNextToken:

    def test_plain_characters(self):
        handler = make_handler([ord('f'), ord('A'), 27])

        assert handler.next_token() == 'f'
        assert handler.next_token() == 'A'
        assert handler.next_token() == '\x1b'

    @pytest.mark.parametrize("key", [curses.KEY_LEFT, curses.KEY_RESIZE, -1])
    def test_special_keys_give_none(self, key):
        assert make_handler([key]).next_token() is None

    def test_interrupt_gives_none(self):
        assert make_handler([KeyboardInterrupt()]).next_token() is None
