"""Parsing of ``/proc/<pid>/maps`` and batching of memory regions for reads."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .remote import IoVec
from .scanner import CHUNK_SIZE

_HEX = re.compile(r"\+?[0-9a-fA-F]+")
_U64_MAX = (1 << 64) - 1


def _parse_hex(text):
    if not _HEX.fullmatch(text):
        raise ValueError(f"not a hexadecimal number: {text!r}")
    number = int(text, 16)
    if number > _U64_MAX:
        raise ValueError(f"address out of range: {text!r}")
    return number


def maps_path(pid):
    """Path of the maps file of ``pid``."""
    return f"/proc/{pid}/maps"


@dataclass(frozen=True)
class Permissions:
    """Access permissions of a memory mapping."""

    read: bool
    write: bool
    execute: bool
    shared: bool

    @classmethod
    def parse(cls, text):
        """Parse a permission field such as ``rw-p``."""
        if len(text) < 4:
            raise ValueError(f"invalid permissions {text!r}")
        return cls(text[0] == "r", text[1] == "w", text[2] == "x", text[3] == "s")

    def __str__(self):
        return "".join((
            "r" if self.read else "-",
            "w" if self.write else "-",
            "x" if self.execute else "-",
            "s" if self.shared else "p",
        ))


@dataclass(frozen=True)
class Region:
    """One mapping listed in the maps file."""

    start: int
    end: int
    perms: Permissions
    path: str | None = None

    @property
    def size(self):
        return self.end - self.start

    @classmethod
    def parse(cls, line):
        """Return the region a maps line describes, or None for unusable lines."""
        fields = line.split()
        if len(fields) < 2:
            return None
        bounds = fields[0].split("-")
        if len(bounds) < 2:
            return None
        try:
            start = _parse_hex(bounds[0])
            end = _parse_hex(bounds[1])
        except ValueError:
            return None
        if start == end:
            return None
        try:
            perms = Permissions.parse(fields[1])
        except ValueError:
            return None
        path = " ".join(fields[5:]) or None
        return cls(start, end, perms, path)

    def is_interesting(self):
        """Whether the region is worth scanning for values."""
        if not (self.perms.read and self.perms.write):
            return False
        name = self.path
        if name is None:
            return True
        if name.startswith("[vvar") or name in ("[vdso]", "[vsyscall]"):
            return False
        if name.startswith(("/dev", "/sys", "/proc")):
            return False
        if name.startswith(("anon_inode:", "memfd:")):
            return False
        return not name.rstrip().endswith("(deleted)")

    def is_likely_file_backed(self):
        """Heuristic guess whether a real, stable file backs this region."""
        name = self.path
        if name is None or name.startswith("["):
            return False
        if name.startswith(("/dev", "/proc", "/sys", "/tmp", "/run")):
            return False
        if name.strip().endswith("(deleted)"):
            return False
        return not name.startswith("memfd:")

    def __str__(self):
        return (
            f"0x{self.start:014X} 0x{self.end:014X} | 0x{self.size:<9X} "
            f"{self.perms} {self.path or ''}"
        )


@dataclass
class Maps:
    """The regions of a process's address space, in the order listed."""

    entries: list[Region] = field(default_factory=list)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    @classmethod
    def accessible(cls, pid):
        """Raise OSError unless the maps and memory of ``pid`` can be opened."""
        for path in (maps_path(pid), f"/proc/{pid}/mem"):
            with open(path, "rb"):
                pass

    @classmethod
    def from_text(cls, text, predicate=None):
        """Parse maps text, keeping the regions for which ``predicate`` holds."""
        regions = (Region.parse(line) for line in text.splitlines())
        return cls([
            region for region in regions
            if region is not None and (predicate is None or predicate(region))
        ])

    @classmethod
    def regions(cls, pid, predicate=None):
        """Read the regions of ``pid`` that satisfy ``predicate``."""
        with open(maps_path(pid), encoding="utf-8", errors="replace") as fh:
            return cls.from_text(fh.read(), predicate)

    @classmethod
    def rw_regions(cls, pid):
        """Readable and writable regions of ``pid``."""
        return cls.regions(pid, lambda r: r.perms.read and r.perms.write)

    @classmethod
    def r_regions(cls, pid):
        """Readable regions of ``pid``."""
        return cls.regions(pid, lambda r: r.perms.read)

    @classmethod
    def interesting_regions(cls, pid):
        """Regions of ``pid`` worth scanning for values."""
        return cls.regions(pid, Region.is_interesting)

    @classmethod
    def all_regions(cls, pid):
        """Every region of ``pid``."""
        return cls.regions(pid)

    def chunks(self, start, end):
        """Yield batches of IoVecs within ``[start, end)``, each at most CHUNK_SIZE bytes."""
        spans = [
            (max(region.start, start), min(region.end, end)) for region in self.entries
        ]
        batch = []
        remaining = CHUNK_SIZE
        for low, high in spans:
            while low < high:
                take = min(high - low, remaining)
                batch.append(IoVec(low, take))
                low += take
                remaining -= take
                if remaining == 0:
                    yield batch
                    batch = []
                    remaining = CHUNK_SIZE
        if batch:
            yield batch