"""
Core package for hex editing functionality.

This package implements the editing core: the ByteBuffer holding the file
contents, the ChangeLog used for undo, cursor and viewport tracking, the
value inspector, and the EditDispatcher state machine that ties them
together inside an EditorSession.
"""

from .buffer import ByteBuffer, OutOfRangeError
from .changes import Change, ChangeKind, ChangeLog
from .cursor import Cursor, Viewport
from .dispatcher import Action, EditDispatcher, InvalidEditInputError, KeyEvent
from .inspector import Endianness, Inspection, inspect
from .session import EditorSession, Mode, RenderState

__all__ = [
    'ByteBuffer',
    'OutOfRangeError',
    'Change',
    'ChangeKind',
    'ChangeLog',
    'Cursor',
    'Viewport',
    'Action',
    'EditDispatcher',
    'InvalidEditInputError',
    'KeyEvent',
    'Endianness',
    'Inspection',
    'inspect',
    'EditorSession',
    'Mode',
    'RenderState',
]
