"""
Tests for hex row highlighting.
"""

import pytest

from hexpy.core.highlight import HexHighlighter, byte_style
from hexpy.utils.hex_utils import format_dump_line


@pytest.fixture
def highlighter():
    return HexHighlighter()


@pytest.mark.parametrize("value, style", [
    (0x00, 'null'),
    (0xFF, 'full'),
    (0x21, 'printable'),
    (0x41, 'printable'),
    (0x7E, 'printable'),
    (0x20, 'binary'),
    (0x7F, 'binary'),
    (0x80, 'binary'),
    (0x01, 'binary'),
])
def test_byte_style(value, style):
    assert byte_style(value) == style


class TestHighlightRow:

    def test_offset_comes_first(self, highlighter):
        segments = highlighter.highlight_row(0x10, b'AB')

        assert segments[0].text == '00000010'
        assert segments[0].style == 'offset'

    def test_hex_cells_are_styled_per_byte(self, highlighter):
        segments = highlighter.highlight_row(0x10, b'AB\x00\xff\x01')

        cells = [s for s in segments if s.index is not None and not s.gutter]

        assert [s.text for s in cells] == ['41', '42', '00', 'ff', '01']
        assert [s.style for s in cells] == ['printable', 'printable', 'null', 'full', 'binary']
        assert [s.index for s in cells] == [0, 1, 2, 3, 4]

    def test_gutter_has_one_segment_per_byte(self, highlighter):
        segments = highlighter.highlight_row(0x10, b'AB\x00\xff\x01')

        gutter = [s for s in segments if s.gutter]

        assert ''.join(s.text for s in gutter) == 'AB...'
        assert [s.style for s in gutter] == ['printable', 'printable', 'null', 'full', 'binary']
        assert [s.index for s in gutter] == [0, 1, 2, 3, 4]

    def test_text_matches_dump_layout(self, highlighter):
        data = bytes(range(0x30, 0x40))

        segments = highlighter.highlight_row(0x20, data)
        body = ''.join(s.text for s in segments if not s.gutter)

        assert body.rstrip() == format_dump_line(0x20, data, gutter=False).rstrip()

    def test_padding_is_unstyled(self, highlighter):
        segments = highlighter.highlight_row(0, b'\x01')

        padding = [s for s in segments if s.text.isspace()]

        assert padding
        assert all(s.style == 'default' for s in padding)
