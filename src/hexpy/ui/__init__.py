"""
UI package for the hex editor interface components.

This package implements the curses front end: the WindowManager that draws
render-state snapshots and the InputHandler that turns key presses into
editor events and edit tokens.
"""

from .window import WindowManager
from .input_handler import InputHandler

__all__ = ['WindowManager', 'InputHandler']
