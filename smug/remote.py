"""Reading memory of another process through ``/proc/<pid>/mem``."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class IoVec:
    """A contiguous, non-empty range of memory in a remote process."""

    base: int
    length: int

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError("IoVec length must not be zero")

    @property
    def end(self):
        """The first address past the range."""
        return self.base + self.length


def _mem_path(pid):
    return f"/proc/{pid}/mem"


def _read_at(fd, addr, length):
    try:
        data = os.pread(fd, length, addr)
    except (OSError, OverflowError, ValueError):
        return None
    return data if len(data) == length else None


def read(pid, addr, length):
    """Read exactly ``length`` bytes at ``addr``; return None if that is not possible."""
    if length <= 0:
        raise ValueError("length must not be zero")
    try:
        fd = os.open(_mem_path(pid), os.O_RDONLY)
    except OSError:
        return None
    try:
        return _read_at(fd, addr, length)
    finally:
        os.close(fd)


def read_vecs(pid, iovecs):
    """Read every range in ``iovecs``.

    Returns one entry per range: its bytes, or None where the range could not
    be read completely.
    """
    iovecs = list(iovecs)
    if not iovecs:
        raise ValueError("at least one IoVec is required")
    try:
        fd = os.open(_mem_path(pid), os.O_RDONLY)
    except OSError:
        return [None] * len(iovecs)
    try:
        return [_read_at(fd, iovec.base, iovec.length) for iovec in iovecs]
    finally:
        os.close(fd)