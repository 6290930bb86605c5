"""Searching memory for plain, UTF-16 or UTF-32 strings."""

from __future__ import annotations

from ..errors import CommandError
from ..numparse import IntType
from ..proc_maps import Maps
from ..remote import read_vecs
from .utils import parse_arg, print_and_save_results

_U64_MAX = (1 << 64) - 1


def encode_needle(command, text):
    """Encode ``text`` as the command asks: UTF-16 LE, UTF-32 LE or UTF-8."""
    if command.endswith("16"):
        return text.encode("utf-16-le", errors="surrogatepass")
    if command.endswith("32"):
        return text.encode("utf-32-le", errors="surrogatepass")
    return text.encode("utf-8", errors="surrogatepass")


def _arg(args, index):
    return args[index] if len(args) > index else None


def _find_all(memory, needle):
    pos = memory.find(needle)
    while pos != -1:
        yield pos
        pos = memory.find(needle, pos + len(needle))


def handle(scanner, args):
    """Search scannable memory for a string: ``ss <start> <end> <text...>``."""
    start = parse_arg(_arg(args, 1), "Start address", IntType.U64)
    end = parse_arg(_arg(args, 2), "End address", IntType.U64) or _U64_MAX
    words = args[3:]
    if not words:
        raise CommandError("String missing!")
    needle = encode_needle(args[0], " ".join(words))
    try:
        maps = Maps.interesting_regions(scanner.pid)
    except OSError as exc:
        raise CommandError(f"Couldn't parse memory map: {exc}") from exc

    matches = []
    for batch in maps.chunks(start, end):
        for iovec, memory in zip(batch, read_vecs(scanner.pid, batch)):
            if memory is not None:
                matches.extend(iovec.base + offset for offset in _find_all(memory, needle))
    print_and_save_results(scanner, matches)