"""
Tests for the editor session and render snapshots.
"""

import pytest

from hexpy.core.inspector import Endianness
from hexpy.core.session import EditorSession, Mode


class TestSnapshot:

    def test_initial_snapshot(self, make_session):
        session = make_session(bytes(range(100)))

        state = session.snapshot(rows_visible=4)

        assert (state.begin, state.end) == (0, 64)
        assert state.data == bytes(range(64))
        assert state.cursor == 0
        assert state.cursor_row == 0
        assert state.length == 100
        assert state.mode is Mode.NORMAL
        assert state.endianness is Endianness.LITTLE
        assert state.change_count == 0
        assert state.inspection.uint8 == 0

    def test_snapshot_follows_cursor(self, make_session):
        session = make_session(bytes(100))
        session.cursor.index = 70

        state = session.snapshot(rows_visible=4)

        assert (state.begin, state.end) == (64, 100)
        assert len(state.data) == 36
        assert state.cursor_row == 4

    def test_smaller_terminal_still_shows_cursor(self, make_session):
        session = make_session(bytes(100))
        session.snapshot(rows_visible=4)
        session.cursor.move_to(60)

        state = session.snapshot(rows_visible=2)

        assert state.begin <= state.cursor < state.end
        assert (state.begin, state.end) == (32, 64)

    def test_snapshot_is_a_copy(self, make_session):
        session = make_session(b'\x01\x02\x03')

        state = session.snapshot(rows_visible=4)
        session.buffer.replace_at(0, 0xAA)

        assert state.data == b'\x01\x02\x03'

    def test_snapshot_of_empty_buffer(self, make_session):
        state = make_session(b'').snapshot(rows_visible=4)

        assert (state.begin, state.end) == (0, 0)
        assert state.data == b''
        assert state.inspection is None

    def test_inspection_tracks_endianness(self, make_session):
        session = make_session(bytes([0x01, 0x02, 0x00]))

        assert session.snapshot(4).inspection.uint16 == 0x0201
        session.toggle_endianness()
        assert session.snapshot(4).inspection.uint16 == 0x0102


class TestFiles:

    def test_from_file(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b'\xde\xad\xbe\xef')

        session = EditorSession.from_file(str(path))

        assert bytes(session.buffer) == b'\xde\xad\xbe\xef'
        assert session.filename == str(path)
        assert session.snapshot(4).filename == str(path)

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            EditorSession.from_file(str(tmp_path / "nope.bin"))

    def test_save_overwrites_source(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b'\x00\x01')
        session = EditorSession.from_file(str(path))
        session.buffer.replace_at(1, 0x7F)

        assert session.save() == str(path)
        assert path.read_bytes() == b'\x00\x7f'

    def test_save_without_filename(self, make_session):
        with pytest.raises(OSError):
            make_session(b'\x00').save()
