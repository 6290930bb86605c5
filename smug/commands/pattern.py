"""Searching memory for IDA-style byte patterns with ``??`` wildcards."""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass

from ..errors import CommandError
from ..numparse import IntType
from ..proc_maps import Maps
from ..remote import read_vecs
from .utils import parse_arg, print_and_save_results

_U64_MAX = (1 << 64) - 1
_BYTE = re.compile(r"\+?[0-9a-fA-F]+")
WILDCARD = "??"


def _parse_byte(part):
    if _BYTE.fullmatch(part):
        value = int(part, 16)
        if value <= 0xFF:
            return value
    raise CommandError(f"Invalid byte '{part}'")


@dataclass(frozen=True)
class Anchor:
    """A run of known bytes at ``offset`` positions into a pattern."""

    offset: int
    data: bytes

    def __post_init__(self):
        if not self.data:
            raise ValueError("an anchor needs at least one byte")

    def score(self):
        """Heuristic measure of how unlikely the anchor is to appear in memory."""
        length = len(self.data)
        counts = Counter(self.data)
        unique = len(counts)
        diversity = unique / length
        entropy = sum(-(c / length) * math.log2(c / length) for c in counts.values())
        all_same_penalty = 5.0 if unique == 1 else 0.0
        repetition_penalty = 3.0 if max(counts.values()) / length > 0.9 else 0.0
        base = length * 1.5 + entropy * 2.0 + diversity * 3.0
        return base - all_same_penalty - repetition_penalty


@dataclass
class Pattern:
    """The anchors of a byte pattern, ordered by score."""

    anchors: list[Anchor]

    @classmethod
    def parse(cls, parts):
        """Build a pattern from tokens such as ``["48", "??", "6C"]``."""
        if parts is None:
            raise CommandError("No pattern provided")
        anchors = []
        current = bytearray()
        start = 0
        for index, part in enumerate(parts):
            if part == WILDCARD:
                if current:
                    anchors.append(Anchor(start, bytes(current)))
                    current.clear()
                continue
            byte = _parse_byte(part)
            if not current:
                start = index
            current.append(byte)
        if current:
            anchors.append(Anchor(start, bytes(current)))
        if not anchors:
            raise CommandError("Won't search for an all-wildcard pattern.")
        anchors.sort(key=Anchor.score)
        return cls(anchors)

    def best(self):
        """The anchor used to find candidate positions."""
        return self.anchors[0]

    def find_iter(self, memory):
        """Yield offsets into ``memory`` where the pattern starts."""
        best = self.best()
        needle = best.data
        pos = memory.find(needle)
        while pos != -1:
            origin = pos - best.offset
            if origin >= 0 and all(
                self._anchor_matches(memory, origin, anchor) for anchor in self.anchors[1:]
            ):
                yield origin
            pos = memory.find(needle, pos + len(needle))

    @staticmethod
    def _anchor_matches(memory, origin, anchor):
        start = origin + anchor.offset
        end = start + len(anchor.data)
        return end <= len(memory) and memory[start:end] == anchor.data


def _arg(args, index):
    return args[index] if len(args) > index else None


def handle(scanner, args):
    """Search readable memory for a byte pattern: ``sp <start> <end> <bytes...>``."""
    start = parse_arg(_arg(args, 1), "Start address", IntType.U64)
    end = parse_arg(_arg(args, 2), "End address", IntType.U64) or _U64_MAX
    pattern = Pattern.parse(list(args[3:]) if len(args) >= 3 else None)
    try:
        maps = Maps.r_regions(scanner.pid)
    except OSError as exc:
        raise CommandError(f"Couldn't parse memory map: {exc}") from exc

    matches = []
    for batch in maps.chunks(start, end):
        for iovec, memory in zip(batch, read_vecs(scanner.pid, batch)):
            if memory is not None:
                matches.extend(iovec.base + offset for offset in pattern.find_iter(memory))
    print_and_save_results(scanner, matches)