"""The table of commands and the words that invoke them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from . import basic, display, pattern, scan, string_scan


@dataclass(frozen=True)
class Command:
    """A handler with the command words it answers to and its help text."""

    names: tuple[str, ...]
    handler: Callable
    description: str
    arguments: str


def _typed(prefix):
    return tuple(prefix + letter for letter in "bwdqBWDQfF")


def all_commands():
    """Every command known to the application, in registration order."""
    return [
        Command(
            ("exit", "quit", "q"),
            basic.handle_exit,
            "Exits the application immediately.",
            "Takes no arguments.",
        ),
        Command(
            ("m", "maps"),
            basic.handle_maps,
            "Prints out all readable address maps.",
            "Takes no arguments.",
        ),
        Command(
            _typed("d"),
            display.handle,
            "Display memory bytes.",
            "<address> [<length>]: start address and byte count, both in hex.",
        ),
        Command(
            ("ss", "ss16", "ss32"),
            string_scan.handle,
            "Search for a string (or a UTF-16/UTF-32 LE wide string).",
            "<start_address> <end_address> <string>: 0 means no bound.",
        ),
        Command(
            ("sp", "p", "pattern"),
            pattern.handle,
            "Search for non-overlapping occurrences of an IDA byte pattern.",
            "<start_address> <end_address> <IDA_pattern>: 0 means no bound.",
        ),
        Command(
            _typed("s"),
            scan.handle_scan,
            "Scan the memory for values.",
            "<start_address> <end_address> <constraints>: 0 means no bound.",
        ),
        Command(
            _typed("u"),
            scan.handle_rescan,
            "Rescan the results from the previous scan for new values.",
            "<constraints>",
        ),
        Command(
            ("h", "hist", "history"),
            basic.handle_history,
            "Show the addresses of the last scan.",
            "<n_addresses>: maximum number shown; 0 shows all.",
        ),
        Command(
            ("r", "reg", "region"),
            basic.handle_region,
            "Show what region an address is mapped in.",
            "<address>",
        ),
    ]


def command_handlers():
    """Map every command word to its handler; a later registration wins."""
    return {
        name: command.handler
        for command in all_commands()
        for name in command.names
    }