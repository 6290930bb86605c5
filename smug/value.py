"""Typed memory values: decoding, parsing and formatting."""

from __future__ import annotations

import enum
import math
import re
import struct

from . import numparse
from .errors import NumError, ParseNumberError
from .numparse import IntType

_FLOAT_SYNTAX = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)
_U64_MASK = (1 << 64) - 1


class ValueType(enum.Enum):
    """The kinds of values that can be shown, scanned and compared."""

    F32 = ("f", 4, 25, "<f", None)
    F64 = ("F", 8, 25, "<d", None)
    U8 = ("b", 1, 2, "<B", IntType.U8)
    U16 = ("w", 2, 4, "<H", IntType.U16)
    U32 = ("d", 4, 8, "<I", IntType.U32)
    U64 = ("q", 8, 16, "<Q", IntType.U64)
    I8 = ("B", 1, 4, "<b", IntType.I8)
    I16 = ("W", 2, 6, "<h", IntType.I16)
    I32 = ("D", 4, 11, "<i", IntType.I32)
    I64 = ("Q", 8, 21, "<q", IntType.I64)

    def __init__(self, letter, size, width, struct_format, int_type):
        self.letter = letter
        self.int_type = int_type
        self._size = size
        self._width = width
        self._struct_format = struct_format

    @classmethod
    def from_letter(cls, letter):
        """Return the value type named by a command letter such as ``q`` or ``F``."""
        for member in cls:
            if member.letter == letter:
                return member
        raise NumError(f"unknown value type {letter!r}")

    @property
    def is_float(self):
        return self.int_type is None

    def byte_size(self):
        """Number of bytes one value occupies in memory."""
        return self._size

    def display_width(self):
        """Number of characters one formatted value occupies."""
        return self._width

    def decode(self, data):
        """Decode one little-endian value from exactly ``byte_size()`` bytes."""
        if len(data) != self._size:
            raise ValueError(f"{self.name} needs {self._size} bytes, got {len(data)}")
        return struct.unpack(self._struct_format, bytes(data))[0]

    def parse(self, text):
        """Parse text into a number of this type."""
        if self.int_type is not None:
            return numparse.parse(text, self.int_type)
        if not _FLOAT_SYNTAX.fullmatch(text):
            raise ParseNumberError(text, self.name.lower(), "invalid float literal")
        number = float(text)
        if self is ValueType.F32:
            try:
                return struct.unpack("<f", struct.pack("<f", number))[0]
            except OverflowError:
                return math.copysign(math.inf, number)
        return number

    def format(self, number):
        """Format a number the way memory dumps show it."""
        if self.is_float:
            if math.isnan(number):
                return f"{'NaN':>{self._width}}"
            return f"{number:{self._width}.6f}"
        if self.int_type.signed:
            return f"{number:{self._width}d}"
        return f"{number:0{self._width}x}"

    def format_hex(self, number):
        """Format the raw bits of a number as zero-padded lower-case hex."""
        mask = (1 << (self._size * 8)) - 1
        return f"{self.as_u64(number) & mask:0{self._size * 2}x}"

    def as_u64(self, number):
        """Reinterpret a number as an unsigned 64-bit integer."""
        if self.is_float:
            return int.from_bytes(struct.pack(self._struct_format, number), "little")
        return number & _U64_MASK