"""
Utility functions for byte classification and hex formatting.
"""

import string
from typing import Optional

HEX_DIGITS = frozenset(string.hexdigits)

PRINTABLE_MIN = 0x21
PRINTABLE_MAX = 0x7E


def is_hex_digit(char: Optional[str]) -> bool:
    """
    Check if a token is a single ASCII hex digit.

    Args:
        char (str): Token to check, may be None

    Returns:
        bool: True for 0-9, a-f and A-F
    """

    return char is not None and len(char) == 1 and char in HEX_DIGITS


def is_printable(byte: int) -> bool:
    """Check if a byte is printable ASCII, excluding space."""

    return PRINTABLE_MIN <= byte <= PRINTABLE_MAX


def parse_hex_pair(high: str, low: str) -> Optional[int]:
    """
    Parse two hex digits into a byte value.

    Args:
        high (str): First (most significant) digit
        low (str): Second digit

    Returns:
        int: Parsed byte or None if invalid
    """

    if not (is_hex_digit(high) and is_hex_digit(low)):
        return None

    return int(high + low, 16)


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}x}"


def to_ascii(data: bytes) -> str:
    """Render bytes for the ASCII gutter, non-printables as dots."""

    return ''.join(chr(b) if is_printable(b) else '.' for b in data)


def format_dump_line(offset: int, data: bytes, row_width: int = 16, gutter: bool = True) -> str:
    """
    Format one row in the canonical ``hexdump -C`` layout.

    Short rows are padded so the gutter stays aligned.

    Args:
        offset (int): Address of the first byte in the row
        data (bytes): Up to ``row_width`` bytes
        row_width (int): Bytes per full row
        gutter (bool): Whether to append the ``|ascii|`` column

    Returns:
        str: e.g. ``00000010  41 42 ...  |AB|``
    """

    half = row_width // 2
    cells = [f"{b:02x}" for b in data] + ['  '] * (row_width - len(data))
    line = f"{format_offset(offset)}  {' '.join(cells[:half])}  {' '.join(cells[half:])}"

    if not gutter:
        return line

    return f"{line}  |{to_ascii(data)}|"
