# smug

An interactive memory scanner for running Linux processes. It reads a
process's memory through `/proc/<pid>/maps` and `/proc/<pid>/mem`. You can
use it to search that memory for values, strings and byte patterns, to narrow
the results down between scans and to dump memory as hex.

## Installation

```
pip install .
```

It has no dependencies outside the standard library. To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
smug <pid>
```

You need permission to read the target process's memory. Run it as the same
user with ptrace allowed, or as root. If the maps or memory file of the process
cannot be opened, `smug` prints an error and exits with status 1. Where Python's
`readline` module is available, command history is kept in `/tmp/smug_<pid>`.

At the `>> ` prompt the commands below are available. If a command fails, the
message is printed after `!!! ` and the prompt returns. An unknown command
prints `Unknown command!`.

Numbers are hexadecimal by default. The prefixes `0x`, `0d`, `0o` and `0b`
select base 16, 10, 8 or 2. You can also write simple `+ - * /` expressions
without spaces, for example `0d10*2+4`. In an expression, `*` and `/` bind
tighter than `+` and `-`, and results wrap to the width of the type.

Type letters:

- `b w d q`: unsigned 8, 16, 32 and 64-bit integers
- `B W D Q`: signed 8, 16, 32 and 64-bit integers
- `f F`: 32 and 64-bit floats, whose values are written in decimal

| Command | Description |
| --- | --- |
| `s<t> <start> <end> <constraints...>` | Scan writable memory for values of type `t` |
| `u<t> <constraints...>` | Rescan the addresses found by the previous scan |
| `ss`, `ss16`, `ss32 <start> <end> <text>` | Search writable memory for a UTF-8, UTF-16 LE or UTF-32 LE string |
| `sp`, `p`, `pattern <start> <end> <bytes...>` | Search all readable memory for a byte pattern, for example `48 65 ?? 6C` |
| `d<t> <address> [<length>]` | Display memory as values of type `t`, with an ASCII column (0x40 bytes by default) |
| `h`, `hist`, `history <n>` | Show the first `n` addresses of the last scan (`0` shows all) |
| `r`, `reg`, `region <address>` | Show the mapping that contains an address |
| `m`, `maps` | List all readable mappings |
| `q`, `quit`, `exit` | Leave |

For the scan and search commands, a start or end address of `0` means that
side has no bound.

Constraints are `=v`, `!v` (not equal), `>v`, `>=v`, `<v` and `<=v`. An address
matches only if every constraint given holds for it.

A scan that finds results keeps them for `u<t>` and `h`. If a scan finds more
than ten results, only their count is printed. Addresses that fall in a mapping
likely backed by a real file are shown in green, since these may be static
pointers. In `d<t>` dumps, values that point to readable memory are shown in
green.

The "writable memory" used by `s<t>` and `ss` is every region that is both
readable and writable. It leaves out kernel helper mappings, `/dev`, `/sys` and
`/proc` files, `anon_inode:` and `memfd:` mappings, and deleted files.

Example session:

```
>> sd 0 0 =64
Found 1234 results.
>> ud =65
Found 1 match at:
0x55D0C0DE1230
>> dd 55D0C0DE1230
```

## Library use

The pieces behind the commands can be used on their own:

```python
from smug.numparse import IntType, parse
from smug.value import ValueType
from smug.constraint import Constraint
from smug.commands.pattern import Pattern

parse("0d10*2", IntType.U32)                       # 20
Constraint.parse(">=0d5", ValueType.I32).check(7)  # True
list(Pattern.parse(["48", "??", "6C"]).find_iter(b"\x48\x00\x6c"))  # [0]
```

`smug.proc_maps.Maps.from_text` parses the text of a maps file, and
`smug.remote.read` and `smug.remote.read_vecs` read ranges of another
process's memory.

## Limitations

`smug` only reads memory. It cannot write values into the target process, and
it cannot freeze or watch addresses. It works only on Linux, through the
`/proc` filesystem.