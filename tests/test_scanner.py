import pytest

from smug.errors import PidError
from smug.scanner import Scanner, parse_pid


def test_parse_pid_decimal():
    assert parse_pid("1234") == 1234


def test_parse_pid_plus_sign():
    assert parse_pid("+77") == 77


@pytest.mark.parametrize("text", ["0", "+0", "000"])
def test_parse_pid_zero(text):
    with pytest.raises(PidError, match="zero"):
        parse_pid(text)


@pytest.mark.parametrize("text", ["", "abc", "-5", " 5", "5 ", "0x10", "1_0", "+"])
def test_parse_pid_not_a_number(text):
    with pytest.raises(PidError, match="not a number"):
        parse_pid(text)


def test_parse_pid_too_large():
    with pytest.raises(PidError, match="too large"):
        parse_pid(str(2**64))


def test_scanner_starts_empty():
    scanner = Scanner(parse_pid("42"))
    assert scanner.pid == 42
    assert scanner.results == []


def test_scanner_results_are_independent():
    first = Scanner(1)
    second = Scanner(2)
    first.results.append(0x1000)
    assert second.results == []
    assert first.results == [0x1000]


def test_scanner_rejects_zero_pid():
    with pytest.raises(PidError):
        Scanner(0)