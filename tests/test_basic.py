import os

import pytest

from smug.commands.basic import (
    handle_exit,
    handle_history,
    handle_maps,
    handle_region,
)
from smug.errors import CommandError
from smug.proc_maps import Maps
from smug.scanner import Scanner

MISSING_PID = 999999999


def test_exit_raises_system_exit_with_zero():
    with pytest.raises(SystemExit) as info:
        handle_exit(Scanner(os.getpid()), ["q"])
    assert info.value.code == 0


def test_history_limits_number_of_addresses(capsys):
    scanner = Scanner(os.getpid(), [0x10, 0x20, 0x30])
    handle_history(scanner, ["h", "2"])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["0x10", "0x20"]


def test_history_zero_shows_everything(capsys):
    scanner = Scanner(os.getpid(), [0x10, 0x20, 0x30])
    handle_history(scanner, ["h", "0"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3


def test_history_missing_argument():
    with pytest.raises(CommandError, match="missing"):
        handle_history(Scanner(os.getpid()), ["h"])


def test_history_invalid_number():
    with pytest.raises(CommandError, match="not a valid number"):
        handle_history(Scanner(os.getpid()), ["h", "zz"])


def test_history_unreadable_process():
    with pytest.raises(CommandError):
        handle_history(Scanner(MISSING_PID, [0x10]), ["h", "0"])


def test_maps_lists_only_readable_regions(capsys):
    handle_maps(Scanner(os.getpid()), ["m"])
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert lines
    for line in lines:
        assert line.split()[4].startswith("r")


def test_maps_unreadable_process():
    with pytest.raises(CommandError, match="Couldn't parse maps"):
        handle_maps(Scanner(MISSING_PID), ["m"])


def test_region_prints_containing_mapping(capsys):
    pid = os.getpid()
    first = Maps.all_regions(pid).entries[0]
    handle_region(Scanner(pid), ["r", f"0x{first.start:X}"])
    assert capsys.readouterr().out.strip() == str(first).strip()


def test_region_unmapped_address_prints_nothing(capsys):
    handle_region(Scanner(os.getpid()), ["r", "0"])
    assert capsys.readouterr().out == ""


def test_region_missing_address():
    with pytest.raises(CommandError, match="Address missing"):
        handle_region(Scanner(os.getpid()), ["r"])


def test_region_unreadable_process():
    with pytest.raises(CommandError, match="Couldn't read regions"):
        handle_region(Scanner(MISSING_PID), ["r", "10"])