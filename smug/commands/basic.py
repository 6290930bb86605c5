"""Small commands: exiting, listing maps, history and region lookup."""

from __future__ import annotations

from ..errors import CommandError
from ..numparse import IntType
from ..proc_maps import Maps
from .utils import find_region, parse_arg, print_results


def _arg(args, index):
    return args[index] if len(args) > index else None


def handle_exit(scanner, args):
    """Exit the application immediately."""
    raise SystemExit(0)


def handle_history(scanner, args):
    """Show addresses of the last scan: ``h <n_addresses>`` (0 shows all)."""
    count = parse_arg(_arg(args, 1), "Number of entries to show", IntType.USIZE)
    limit = None if count == 0 else count
    try:
        print_results(scanner.pid, scanner.results, limit)
    except OSError as exc:
        raise CommandError(f"Couldn't parse maps: {exc}") from exc


def handle_maps(scanner, args):
    """Print every readable mapping of the process."""
    try:
        maps = Maps.r_regions(scanner.pid)
    except OSError as exc:
        raise CommandError(f"Couldn't parse maps: {exc}") from exc
    print("\n".join(str(region) for region in maps))


def handle_region(scanner, args):
    """Show the mapping that contains an address: ``r <address>``."""
    addr = parse_arg(_arg(args, 1), "Address", IntType.U64)
    try:
        maps = Maps.all_regions(scanner.pid)
    except OSError as exc:
        raise CommandError("Couldn't read regions") from exc
    region = find_region(maps.entries, addr)
    if region is not None:
        print(region)