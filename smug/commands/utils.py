"""Helpers shared by the command handlers."""

from __future__ import annotations

import bisect
import itertools
import struct

from .. import numparse
from ..constraint import Constraint
from ..errors import CommandError, NumError
from ..proc_maps import Maps
from ..remote import read_vecs
from ..value import ValueType

_GREEN = "\x1b[0;32m"
_RESET = "\x1b[0m"

_STRUCT_FORMATS = {
    ValueType.F32: "<f",
    ValueType.F64: "<d",
    ValueType.U8: "<B",
    ValueType.U16: "<H",
    ValueType.U32: "<I",
    ValueType.U64: "<Q",
    ValueType.I8: "<b",
    ValueType.I16: "<h",
    ValueType.I32: "<i",
    ValueType.I64: "<q",
}


def parse_arg(arg, name, int_type):
    """Parse a numeric argument, raising CommandError with a readable message."""
    if arg is None:
        raise CommandError(f"{name} missing")
    try:
        return numparse.parse(arg, int_type)
    except NumError as exc:
        raise CommandError(f"{name} not a valid number: {exc}") from exc


def parse_value_type(arg):
    """Read the value type from the second letter of a command word."""
    if arg is None or len(arg) < 2:
        raise CommandError("Missing or invalid type specifier")
    try:
        return ValueType.from_letter(arg[1])
    except NumError as exc:
        raise CommandError("Missing or invalid type specifier") from exc


def parse_constraints(args, value_type):
    """Parse every argument as a constraint on values of ``value_type``."""
    if not args:
        raise CommandError("Constraints missing")
    try:
        return [Constraint.parse(arg, value_type) for arg in args]
    except NumError as exc:
        raise CommandError(f"Couldn't parse constraints: {exc}") from exc


def print_and_save_results(scanner, results):
    """Report scan results and keep them in the scanner when there are any."""
    results = list(results)
    if not results:
        print("No results.")
        return
    if len(results) > 10:
        print(f"Found {len(results)} results.")
    else:
        if len(results) == 1:
            print("Found 1 match at:")
        else:
            print(f"Found {len(results)} results at:")
        print_results(scanner.pid, results)
    scanner.results = results


def print_results(pid, results, limit=None):
    """Print up to ``limit`` addresses, highlighting those in file-backed regions."""
    if limit == 0:
        return
    file_backed = [
        region for region in Maps.interesting_regions(pid)
        if region.is_likely_file_backed()
    ]
    for addr in itertools.islice(results, limit):
        if find_region(file_backed, addr) is not None:
            print(f"{_GREEN}0x{addr:X}{_RESET}")
        else:
            print(f"0x{addr:X}")


def find_region(regions, addr):
    """Return the region of the sorted ``regions`` that contains ``addr``, if any."""
    index = bisect.bisect_right(regions, addr, key=lambda region: region.start) - 1
    if index >= 0 and regions[index].start <= addr < regions[index].end:
        return regions[index]
    return None


def scan_batch(pid, batch, value_type, constraints):
    """Read a batch of ranges and return the addresses whose values meet every constraint."""
    size = value_type.byte_size()
    fmt = _STRUCT_FORMATS[value_type]
    matches = []
    for iovec, memory in zip(batch, read_vecs(pid, batch)):
        if memory is None:
            continue
        usable = len(memory) - len(memory) % size
        values = struct.iter_unpack(fmt, memoryview(memory)[:usable])
        for index, (number,) in enumerate(values):
            if all(constraint.check(number) for constraint in constraints):
                matches.append(iovec.base + index * size)
    return matches