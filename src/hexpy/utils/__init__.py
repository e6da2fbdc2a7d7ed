"""
Utility package for hex editor support functions.
"""

from .hex_utils import (
    is_hex_digit,
    is_printable,
    parse_hex_pair,
    format_offset,
    format_dump_line,
    to_ascii
)
from .logging_config import setup_logging

__all__ = [
    'is_hex_digit',
    'is_printable',
    'parse_hex_pair',
    'format_offset',
    'format_dump_line',
    'to_ascii',
    'setup_logging'
]
