"""Hex dumps of remote memory in several value formats."""

from __future__ import annotations

from .. import numparse, remote
from ..errors import CommandError, NumError
from ..numparse import IntType
from .utils import parse_arg, parse_value_type

VALUES_PER_LINE = 16
"""Bytes shown on each dump line."""

DEFAULT_BYTES = 0x40
"""Bytes shown when no length is given."""

_BLUE = "\x1b[0;34m"
_GREEN = "\x1b[0;32m"
_RESET = "\x1b[0m"
_U64_MASK = (1 << 64) - 1


def _address_header(addr):
    return f"{_BLUE}{addr & _U64_MASK:016x}{_RESET} │ "


def _ascii(data):
    text = "".join(chr(b) if 0x21 <= b <= 0x7E else "." for b in data)
    return f"│ {text}\n"


def _format_value(chunk, value_type, is_pointer):
    if len(chunk) != value_type.byte_size():
        return "?" * value_type.display_width() + " "
    number = value_type.decode(chunk)
    text = value_type.format(number)
    if is_pointer(value_type.as_u64(number)):
        return f"{_GREEN}{text}{_RESET} "
    return f"{text} "


def render_dump(memory, addr, value_type, is_pointer):
    """Render ``memory`` read at ``addr`` as dump lines of values and ASCII.

    ``is_pointer`` is called with each value's bits and decides whether the
    value is highlighted as a readable address.
    """
    size = value_type.byte_size()
    per_line = VALUES_PER_LINE // size
    chunks = [memory[offset:offset + size] for offset in range(0, len(memory), size)]
    total = len(chunks)

    parts = [_address_header(addr)]
    for count, chunk in enumerate(chunks, start=1):
        parts.append(_format_value(chunk, value_type, is_pointer))
        if count % per_line == 0:
            base = (count - per_line) * size
            parts.append(_ascii(memory[base:base + VALUES_PER_LINE]))
            if count != total:
                parts.append(_address_header(addr + count * size))

    if total % per_line:
        tail = memory[(total // per_line) * VALUES_PER_LINE:]
        pad = (VALUES_PER_LINE - len(tail)) // size * (value_type.display_width() + 1)
        parts.append(" " * pad)
        parts.append(_ascii(tail))
    return "".join(parts)


def _arg(args, index):
    return args[index] if len(args) > index else None


def handle(scanner, args):
    """Dump memory: ``d<type> <address> [<length>]``."""
    value_type = parse_value_type(_arg(args, 0))
    addr = parse_arg(_arg(args, 1), "Start address", IntType.U64)
    length_text = _arg(args, 2)
    if length_text is None:
        length = DEFAULT_BYTES
    else:
        try:
            length = numparse.parse(length_text, IntType.USIZE)
        except NumError as exc:
            raise CommandError(f"Length not a valid number: {exc}") from exc
    if length == 0:
        raise CommandError("Length must not be zero!")

    memory = remote.read(scanner.pid, addr, length)
    if memory is None:
        raise CommandError(f"Couldn't read remote memory at 0x{addr:X}")

    def is_pointer(bits):
        return remote.read(scanner.pid, bits, 1) is not None

    print(render_dump(memory, addr, value_type, is_pointer), end="")