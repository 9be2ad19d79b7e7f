# csworks

A small collection of classic data-structure and tooling exercises.

- `csworks.stack`: `Stack`, an unbounded last-in, first-out stack with `push`, `pop`, `top`,
  `empty`, `full` (always `False`), `copy` and `len()`. `pop` and `top` on an empty stack raise
  `IndexError`.
- `csworks.bigint`: `BigInt`, a non-negative integer of at most 200 decimal digits, built from an
  `int`, a digit string or another `BigInt`. It supports `+` and `*` (wrapping at 200 digits),
  `==` against `BigInt`, `int` or digit strings, digit indexing from the least significant digit,
  `times_digit`, `times_10` and `debug_string`. `str()` breaks the digits into lines of 80.
  `read_bigint(stream)` reads one `;`-terminated value, skipping whitespace, and returns `None`
  at the end of the stream.
- `csworks.assembler`: `postfix` turns a fully parenthesised infix expression into postfix;
  `assembly` writes a load/operate/store listing for a postfix expression to a text stream and
  returns the name of the location holding the result; `evaluate` writes the listing for one
  operation.
- `csworks.srcml`: `SrcML` and `AST` read a srcML document into a tree and render it back to
  source text. The tree can be instrumented for profiling: `main_header`, `file_header`,
  `main_report`, `function_count` and `line_count` insert the profile include, profile
  declarations, report statements and count calls. Helpers: `is_stop_tag`, `read_until`,
  `unescape`, `tokenize`.
- `csworks.profile`: `Profile`, a counter of executions keyed by line number, or by line number
  and function name, printed in key order under a `File:` heading; `int_to_string`.
- `csworks.sortlib`: in-place `quick_sort`, `selection_sort` and `bubble_sort`.
- `csworks.sortapp`: the sorting command, with `Options`, `process_command_line`,
  `generate_random_data`, `format_data`, `usage` and `RandomGenerator`, which reproduces the
  sequence of the C library's `srandom`/`random`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

Convert each line of an infix file to postfix, printing to the screen or writing to a file:

```
csworks-postfix expressions.txt
csworks-postfix expressions.txt postfix.txt
```

Lines must be fully parenthesised, with tokens separated by single spaces and ending with `;`,
for example `( AX + ( B * C ) ) ;`. Blank lines are skipped. Both conversion commands first
print the number of command-line words (the command name included).

Produce the postfix form and the assembly listing for every line:

```
csworks-assembler expressions.txt
csworks-assembler expressions.txt listing.txt
```

For `( AX + ( B * C ) ) ;` the output is:

```
Postfix: AX B C * +
    LD    B
    MU    C
    ST    TMP1
    LD    AX
    AD    TMP1
    ST    TMP2
```

Instrument srcML files, the file holding `main` first; each `name.cpp.xml` is written to
`p-name.cpp` in the current directory:

```
csworks-profiler main.cpp.xml utils.cpp.xml
```

Run the sorting workbench:

```
csworks-sort -sz 20 -rs 7 -mod 100 -od -osd -qs
```

Options: `-sz` data size (default 100), `-rs` random seed (default 1), `-mod` modulus for values
(default 0, meaning none), `-od` print data before sorting, `-osd` print sorted data,
`-qs` / `-ss` / `-bs` quick, selection or bubble sort, `-h` help. A sort must be given; if several
are, quick, then selection, then bubble sort run in turn. An unknown option or a missing value is
an error.

## Library use

```python
import io

from csworks.assembler import assembly, postfix
from csworks.bigint import BigInt
from csworks.stack import Stack

total = BigInt("432334903495705372") + BigInt("624238757305237900")
print(total)                # 1056573660800943272

s = Stack()
s.push("a")
s.push("b")
assert s.pop() == "b"

listing = io.StringIO()
result = assembly(postfix("( AX + ( B * C ) ) ;"), listing)
assert result == "TMP2"
```

## What is not included

The profiler only rewrites source text. It does not compile or run the instrumented files, and
it does not supply the `profile.hpp` header that those files include; `csworks.profile.Profile`
is a Python counter of the same shape, not that header.