"""
Window management module for the hex editor UI.
"""

import curses
import os
from typing import Dict, List, Optional

from ..core.buffer import BYTES_PER_ROW
from ..core.highlight import HexHighlighter
from ..core.session import EditorSession, Mode, RenderState
from ..utils.hex_utils import format_offset


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


LEGEND_ACTIONS = ('save', 'undo', 'delete', 'replace', 'insert', 'toggle_endianness', 'quit')


class WindowManager:
    """Manages the curses windows and draws render-state snapshots."""

    MIN_HEIGHT = 10
    MIN_WIDTH = 40
    HEADER_ROWS = 3
    FOOTER_ROWS = 3
    HEX_ROW_WIDTH = 10 + BYTES_PER_ROW * 3 + 1 + 2 + BYTES_PER_ROW
    INSPECTOR_WIDTH = 34
    INSPECTOR_GAP = 3

    MODE_COLORS = {Mode.NORMAL: 16, Mode.REPLACE: 17, Mode.INSERT: 18}

    def __init__(self, stdscr: 'curses.window', keybindings: Optional[Dict[str, List[str]]] = None):
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            raise ValueError(
                f"Terminal too small. Minimum size: {self.MIN_WIDTH}x{self.MIN_HEIGHT}, "
                f"Current size: {self.width}x{self.height}"
            )

        self.keybindings = keybindings or {}
        self.header_window: Optional['curses.window'] = None
        self.hex_window: Optional['curses.window'] = None
        self.inspector_window: Optional['curses.window'] = None
        self.status_window: Optional['curses.window'] = None
        self.too_small = False

        self.highlighter = HexHighlighter()

        curses.start_color()
        curses.use_default_colors()
        self.highlighter.init_colors()
        curses.init_pair(1, curses.COLOR_WHITE, -1)  # Status bar
        curses.init_pair(7, curses.COLOR_RED, -1)  # Error messages
        curses.init_pair(16, curses.COLOR_BLACK, curses.COLOR_WHITE)  # Selected byte
        curses.init_pair(17, curses.COLOR_WHITE, curses.COLOR_RED)  # Selected byte, replace
        curses.init_pair(18, curses.COLOR_WHITE, curses.COLOR_GREEN)  # Selected byte, insert

        self.setup_windows()

    @property
    def rows_visible(self) -> int:
        """Number of hex rows that fit on screen."""

        return max(1, self.height - self.HEADER_ROWS - self.FOOTER_ROWS)

    @property
    def show_inspector(self) -> bool:
        return self.width >= self.HEX_ROW_WIDTH + self.INSPECTOR_GAP + self.INSPECTOR_WIDTH

    def setup_windows(self) -> None:
        """Create and position all windows."""

        body_height = self.rows_visible

        self.header_window = curses.newwin(self.HEADER_ROWS, self.width, 0, 0)

        if self.show_inspector:
            hex_width = self.HEX_ROW_WIDTH + self.INSPECTOR_GAP
            self.inspector_window = curses.newwin(
                body_height,
                self.width - hex_width,
                self.HEADER_ROWS,
                hex_width
            )
        else:
            hex_width = self.width
            self.inspector_window = None

        self.hex_window = curses.newwin(body_height, hex_width, self.HEADER_ROWS, 0)
        self.status_window = curses.newwin(self.FOOTER_ROWS, self.width, self.height - self.FOOTER_ROWS, 0)

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()
        self.too_small = self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH
        if self.too_small:
            return

        self.stdscr.clear()
        self.stdscr.noutrefresh()
        self.setup_windows()

    def refresh_session(self, session: EditorSession) -> None:
        """Redraw straight from a session, e.g. while an edit awaits input."""

        self.render(session.snapshot(self.rows_visible))

    def render(self, state: RenderState) -> None:
        """Draw one frame."""

        if (self.height, self.width) != self.stdscr.getmaxyx():
            self.resize()

        if self.too_small:
            self.stdscr.clear()
            safe_addstr(self.stdscr, 0, 0, "Error: Terminal too small", curses.color_pair(7) | curses.A_BOLD)
            self.stdscr.refresh()
            return

        self.draw_header(state)
        self.draw_hex_view(state)
        self.draw_inspector(state)
        self.draw_status(state)
        curses.doupdate()

    def draw_header(self, state: RenderState) -> None:
        """Draw the title bar and the position summary."""

        if not self.header_window:
            return

        self.header_window.erase()

        name = os.path.basename(state.filename) if state.filename else '[No Name]'
        title = f" {name} [{state.length} bytes] [{state.mode.value.capitalize()}] [{state.endianness.value}]"
        safe_addstr(self.header_window, 0, 0, title, curses.color_pair(1) | curses.A_BOLD)

        summary = (
            f"cursor: {state.cursor} - row: {state.cursor_row}, "
            f"showing: {state.begin}..{state.end}, changes: {state.change_count}, length: {state.length}"
        )
        safe_addstr(self.header_window, 1, 0, summary)

        self.header_window.hline(2, 0, curses.ACS_HLINE, self.width)
        self.header_window.noutrefresh()

    def draw_hex_view(self, state: RenderState) -> None:
        """Draw the address column, hex cells and ASCII gutter."""

        if not self.hex_window:
            return

        self.hex_window.erase()

        for i in range(self.rows_visible):
            offset = i * BYTES_PER_ROW
            if offset >= len(state.data):
                break

            row_address = state.begin + offset
            chunk = state.data[offset:offset + BYTES_PER_ROW]
            cursor_in_row = row_address <= state.cursor < row_address + BYTES_PER_ROW

            x = 0
            for segment in self.highlighter.highlight_row(row_address, chunk):
                attr = self.highlighter.color_pair_for(segment.style)

                if segment.style == 'offset' and cursor_in_row:
                    attr |= curses.A_BOLD
                elif segment.index is not None and row_address + segment.index == state.cursor:
                    if segment.gutter:
                        attr |= curses.A_BOLD | curses.A_REVERSE
                    else:
                        attr = curses.color_pair(self.MODE_COLORS[state.mode])

                safe_addstr(self.hex_window, i, x, segment.text, attr)
                x += len(segment.text)

        self.hex_window.noutrefresh()

    def draw_inspector(self, state: RenderState) -> None:
        """Draw the value inspector, endianness and key legend."""

        if not self.inspector_window:
            return

        self.inspector_window.erase()
        height, width = self.inspector_window.getmaxyx()

        line = 0
        if state.inspection is not None:
            for label, text in state.inspection.rows():
                safe_addstr(self.inspector_window, line, 0, f"| {label + ':':<9} {text}")
                line += 1

        if line < height:
            self.inspector_window.hline(line, 0, curses.ACS_HLINE, min(width - 1, self.INSPECTOR_WIDTH))
            line += 1

        lines = [
            f"endianness: {state.endianness.value}",
            "",
        ]
        for action in LEGEND_ACTIONS:
            keys = self.keybindings.get(action)
            if keys:
                lines.append(f"{keys[0]}: {action.replace('_', ' ')}")

        for text in lines:
            if line >= height:
                break
            safe_addstr(self.inspector_window, line, 0, text)
            line += 1

        self.inspector_window.noutrefresh()

    def draw_status(self, state: RenderState) -> None:
        """Draw the status bar."""

        if not self.status_window:
            return

        self.status_window.erase()
        self.status_window.hline(0, 0, curses.ACS_HLINE, self.width)

        safe_addstr(self.status_window, 1, 0, f"byte address: 0x{format_offset(state.cursor)}")

        if state.status_message:
            attr = curses.color_pair(1) | curses.A_BOLD
            if state.status_message.startswith("Error"):
                attr = curses.color_pair(7) | curses.A_BOLD
            safe_addstr(self.status_window, 2, 0, " " + state.status_message, attr)

        self.status_window.noutrefresh()
