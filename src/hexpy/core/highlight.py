"""
Hex row highlighting for the editor using Pygments.
"""

import curses
from typing import Any, Dict, Final, List, NamedTuple, Optional

from pygments.lexers.hexdump import HexdumpLexer
from pygments.token import Token

from ..utils.hex_utils import format_dump_line, is_printable

BYTE_COLORS: Final[Dict[str, int]] = {
    'offset': 11,      # Default, bold on the cursor row
    'null': 12,        # Default
    'full': 13,        # Blue
    'printable': 14,   # Green
    'binary': 15,      # Yellow
    'ascii': 14,       # Green
    'default': 0,      # Default
}

TOKEN_STYLE_MAP: Final[Dict[Any, str]] = {
    Token.Name.Label: 'offset',
    Token.String: 'ascii',
    Token.Punctuation: 'default',
    Token.Text.Whitespace: 'default',
}


class Segment(NamedTuple):
    """A run of row text with one style; ``index`` is the byte position within the row."""
    text: str
    style: str
    index: Optional[int] = None
    gutter: bool = False


def byte_style(value: int) -> str:
    """Colour class of a single byte."""

    if value == 0x00:
        return 'null'
    if value == 0xFF:
        return 'full'
    if is_printable(value):
        return 'printable'

    return 'binary'


class HexHighlighter:
    """Splits hex rows into styled segments using the Pygments hexdump lexer."""

    def __init__(self) -> None:
        self.lexer = HexdumpLexer()
        self.color_pairs_initialized = False

    def init_colors(self) -> None:
        """Initialize color pairs for byte highlighting."""

        if self.color_pairs_initialized:
            return

        curses.init_pair(BYTE_COLORS['offset'], -1, -1)
        curses.init_pair(BYTE_COLORS['null'], -1, -1)
        curses.init_pair(BYTE_COLORS['full'], curses.COLOR_BLUE, -1)
        curses.init_pair(BYTE_COLORS['printable'], curses.COLOR_GREEN, -1)
        curses.init_pair(BYTE_COLORS['binary'], curses.COLOR_YELLOW, -1)

        self.color_pairs_initialized = True

    def highlight_row(self, offset: int, data: bytes) -> List[Segment]:
        """
        Highlight one row of the hex view.

        Args:
            offset: Address of the first byte in the row
            data: The row's bytes (at most 16)

        Returns:
            Segments for the address and hex cells, followed by one segment
            per ASCII gutter character. Hex and gutter segments carry the
            byte's index within the row.
        """

        result: List[Segment] = []
        byte_index = 0

        line = format_dump_line(offset, data, gutter=False)
        for token_type, text in self.lexer.get_tokens(line):
            if text == '\n':
                continue

            if token_type in Token.Number.Hex and byte_index < len(data):
                result.append(Segment(text, byte_style(data[byte_index]), byte_index))
                byte_index += 1
                continue

            if text.isspace():
                result.append(Segment(text, 'default'))
                continue

            result.append(Segment(text, self._get_token_style(token_type)))

        result.append(Segment('  ', 'default'))
        for i, value in enumerate(data):
            char = chr(value) if is_printable(value) else '.'
            result.append(Segment(char, byte_style(value), i, gutter=True))

        return result

    def _get_token_style(self, token_type: Any) -> str:
        """
        Get the style name for a token type.

        Args:
            token_type: The Pygments token type

        Returns:
            The style name
        """

        if token_type in TOKEN_STYLE_MAP:
            return TOKEN_STYLE_MAP[token_type]

        while token_type.parent:
            token_type = token_type.parent
            if token_type in TOKEN_STYLE_MAP:
                return TOKEN_STYLE_MAP[token_type]

        return 'default'

    @staticmethod
    def color_pair_for(style: str) -> int:
        """Get the curses attribute for a style name."""

        return curses.color_pair(BYTE_COLORS.get(style, 0))
