"""
HexPy - a terminal hex editor with undo and a value inspector.
"""

__version__ = "0.1.0"
