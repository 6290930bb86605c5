import pytest

from smug.commands import basic, display, pattern, scan, string_scan
from smug.commands.registry import Command, all_commands, command_handlers


@pytest.mark.parametrize(
    "word, handler",
    [
        ("q", basic.handle_exit),
        ("quit", basic.handle_exit),
        ("maps", basic.handle_maps),
        ("dq", display.handle),
        ("dF", display.handle),
        ("ss16", string_scan.handle),
        ("pattern", pattern.handle),
        ("sD", scan.handle_scan),
        ("uf", scan.handle_rescan),
        ("hist", basic.handle_history),
        ("reg", basic.handle_region),
    ],
)
def test_words_map_to_handlers(word, handler):
    assert command_handlers()[word] is handler


def test_every_name_is_registered():
    handlers = command_handlers()
    for command in all_commands():
        for name in command.names:
            assert handlers[name] is command.handler


def test_names_are_unique_across_commands():
    names = [name for command in all_commands() for name in command.names]
    assert len(names) == len(set(names)) == len(command_handlers())


def test_commands_have_help_text():
    for command in all_commands():
        assert isinstance(command, Command)
        assert command.names
        assert command.description.strip()
        assert command.arguments.strip()


def test_unknown_word_absent():
    assert "bogus" not in command_handlers()