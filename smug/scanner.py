"""Scanner state and process ID handling."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import PidError

CHUNK_SIZE = 1024 * 1024 * 1024
"""Amount of memory read in a single go when scanning."""

_PID_MAX = (1 << 64) - 1


def parse_pid(text):
    """Parse a non-zero decimal process ID."""
    body = text[1:] if text.startswith("+") else text
    if not body or not body.isascii() or not body.isdigit():
        raise PidError(f"PID is not a number: {text!r}")
    pid = int(body)
    if pid > _PID_MAX:
        raise PidError(f"PID is too large: {text!r}")
    if pid == 0:
        raise PidError("PID must not be zero")
    return pid


@dataclass
class Scanner:
    """State of a scanning session: the target process and the last results."""

    pid: int
    results: list[int] = field(default_factory=list)

    def __post_init__(self):
        if self.pid <= 0:
            raise PidError("PID must not be zero")