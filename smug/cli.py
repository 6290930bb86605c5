"""Interactive command line of the memory scanner."""

from __future__ import annotations

import os
import sys

from .commands.registry import command_handlers
from .errors import SmugError
from .proc_maps import Maps
from .scanner import Scanner, parse_pid

try:
    import readline
except ImportError:
    readline = None

_HISTORY_LENGTH = 0xFFFF


class Cli:
    """Reads commands, dispatches them and keeps a per-process history file."""

    def __init__(self, pid, prompt=">> ", history_file=None):
        Maps.accessible(pid)
        self.prompt = prompt
        self.history_file = history_file or f"/tmp/smug_{pid}"
        self.scanner = Scanner(pid)
        self.commands = command_handlers()
        if readline is not None:
            readline.set_history_length(_HISTORY_LENGTH)
            try:
                readline.read_history_file(self.history_file)
            except OSError:
                pass

    def next_command(self):
        """Read the next line and save the history file."""
        line = input(self.prompt)
        if readline is not None:
            try:
                readline.write_history_file(self.history_file)
            except OSError:
                pass
        return line

    def run_line(self, line):
        """Run one command line, reporting failures without raising."""
        words = line.split()
        if not words:
            return
        handler = self.commands.get(words[0])
        if handler is None:
            print("Unknown command!")
            return
        try:
            handler(self.scanner, words)
        except SmugError as exc:
            print(f"!!! {exc}")

    def main_loop(self):
        """Read and run commands until input ends or is interrupted."""
        while True:
            self.run_line(self.next_command())


def main(argv=None):
    """Start the scanner on the process given on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if len(argv) != 1:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "smug"
        print(f"Usage: {program} <pid>")
        return 0
    try:
        pid = parse_pid(argv[0])
        cli = Cli(pid)
    except (SmugError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        cli.main_loop()
    except (EOFError, KeyboardInterrupt) as exc:
        print(f"Error: {type(exc).__name__}", file=sys.stderr)
        return 1
    return 0