"""Scanning memory for values and rescanning earlier results."""

from __future__ import annotations

import itertools

from ..errors import CommandError
from ..numparse import IntType
from ..proc_maps import Maps
from ..remote import IoVec
from ..scanner import CHUNK_SIZE
from .utils import (
    parse_arg,
    parse_constraints,
    parse_value_type,
    print_and_save_results,
    scan_batch,
)

_U64_MAX = (1 << 64) - 1


def _arg(args, index):
    return args[index] if len(args) > index else None


def _batched(items, size):
    iterator = iter(items)
    while batch := list(itertools.islice(iterator, size)):
        yield batch


def handle_scan(scanner, args):
    """Scan memory for values: ``s<type> <start> <end> <constraints...>``."""
    value_type = parse_value_type(_arg(args, 0))
    start = parse_arg(_arg(args, 1), "Start address", IntType.U64)
    end = parse_arg(_arg(args, 2), "End address", IntType.U64) or _U64_MAX
    constraints = parse_constraints(args[3:], value_type)
    try:
        maps = Maps.interesting_regions(scanner.pid)
    except OSError as exc:
        raise CommandError(f"Couldn't parse memory map: {exc}") from exc

    matches = []
    for batch in maps.chunks(start, end):
        matches.extend(scan_batch(scanner.pid, batch, value_type, constraints))
    print_and_save_results(scanner, matches)


def handle_rescan(scanner, args):
    """Check the previous results again: ``u<type> <constraints...>``."""
    value_type = parse_value_type(_arg(args, 0))
    constraints = parse_constraints(args[1:], value_type)
    size = value_type.byte_size()
    iovecs = (IoVec(addr, size) for addr in scanner.results)

    matches = []
    for batch in _batched(iovecs, CHUNK_SIZE // size):
        matches.extend(scan_batch(scanner.pid, batch, value_type, constraints))
    print_and_save_results(scanner, matches)