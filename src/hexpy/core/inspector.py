"""
Value inspector decoding the bytes at the cursor into numeric readings.
"""

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple, Union

from ..utils.hex_utils import is_printable

Number = Union[int, float]

FLOAT_FORMATS = {2: 'e', 4: 'f', 8: 'd'}


class Endianness(Enum):
    """Byte order used for multi-byte readings."""

    LITTLE = 'little'
    BIG = 'big'

    def toggled(self) -> 'Endianness':
        return Endianness.BIG if self is Endianness.LITTLE else Endianness.LITTLE

    @property
    def struct_prefix(self) -> str:
        return '<' if self is Endianness.LITTLE else '>'


def read_value(data: Sequence[int], index: int, width: int,
               endianness: Endianness, kind: str = 'u') -> Optional[Number]:
    """
    Decode ``width`` bytes starting at ``index``.

    A reading is only produced when ``index + width < len(data)``, so the
    last full-width reading at the very end of the data is never offered.

    Args:
        data: Bytes to read from
        index: Address of the first byte
        width: Number of bytes to decode
        endianness: Byte order of the reading
        kind: 'u' for unsigned, 'i' for two's complement signed, 'f' for IEEE float

    Returns:
        The decoded value, or None if not enough bytes follow the cursor
    """

    if index < 0 or index + width >= len(data):
        return None

    raw = bytes(data[index:index + width])

    if kind == 'f':
        if width not in FLOAT_FORMATS:
            raise ValueError(f"No float format for width {width}")
        return struct.unpack(endianness.struct_prefix + FLOAT_FORMATS[width], raw)[0]

    if kind not in ('u', 'i'):
        raise ValueError(f"Unknown reading kind: {kind!r}")

    return int.from_bytes(raw, endianness.value, signed=(kind == 'i'))


@dataclass(frozen=True)
class Inspection:
    """Readings of the byte(s) at one address."""
    address: int
    endianness: Endianness
    uint8: int
    int8: int
    boolean: bool
    ascii: str
    binary: str
    uint16: Optional[int] = None
    int16: Optional[int] = None
    float16: Optional[float] = None
    uint32: Optional[int] = None
    int32: Optional[int] = None
    float32: Optional[float] = None
    uint64: Optional[int] = None
    int64: Optional[int] = None
    uint128: Optional[int] = None
    int128: Optional[int] = None

    def rows(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(label, text)`` pairs in display order; absent readings render empty."""

        def fmt(value: Optional[Number]) -> str:
            return '' if value is None else f"{value}"

        yield 'binary', self.binary
        yield 'uint8', f"{self.uint8}"
        yield 'int8', f"{self.int8}"
        yield 'uint16', fmt(self.uint16)
        yield 'int16', fmt(self.int16)
        yield 'float16', fmt(self.float16)
        yield 'uint32', fmt(self.uint32)
        yield 'int32', fmt(self.int32)
        yield 'float32', fmt(self.float32)
        yield 'uint64', fmt(self.uint64)
        yield 'int64', fmt(self.int64)
        yield 'uint128', fmt(self.uint128)
        yield 'int128', fmt(self.int128)
        yield 'bool', 'true' if self.boolean else 'false'
        yield 'ascii', self.ascii


def inspect(data: Sequence[int], index: int, endianness: Endianness) -> Optional[Inspection]:
    """Decode every reading available at ``index``; None for an empty buffer."""

    if not 0 <= index < len(data):
        return None

    byte = data[index]

    return Inspection(
        address=index,
        endianness=endianness,
        uint8=byte,
        int8=byte - 0x100 if byte & 0x80 else byte,
        boolean=byte != 0,
        ascii=chr(byte) if is_printable(byte) else '',
        binary=f"{byte:08b}",
        uint16=read_value(data, index, 2, endianness, 'u'),
        int16=read_value(data, index, 2, endianness, 'i'),
        float16=read_value(data, index, 2, endianness, 'f'),
        uint32=read_value(data, index, 4, endianness, 'u'),
        int32=read_value(data, index, 4, endianness, 'i'),
        float32=read_value(data, index, 4, endianness, 'f'),
        uint64=read_value(data, index, 8, endianness, 'u'),
        int64=read_value(data, index, 8, endianness, 'i'),
        uint128=read_value(data, index, 16, endianness, 'u'),
        int128=read_value(data, index, 16, endianness, 'i'),
    )
