"""Command that sorts pseudo-random integer data with a chosen algorithm."""

from __future__ import annotations

import os
import sys
from collections import deque
from dataclasses import dataclass
from typing import Optional

from csworks.sortlib import bubble_sort, quick_sort, selection_sort

_COLUMNS = 7
_WIDTH = 10
_VALUE_OPTIONS = {"-sz": "data_size", "-rs": "seed", "-mod": "mod"}
_FLAG_OPTIONS = {
    "-qs": "quick_sort",
    "-ss": "selection_sort",
    "-bs": "bubble_sort",
    "-od": "output_data",
    "-osd": "output_sorted_data",
}


@dataclass
class Options:
    """Settings gathered from the command line."""

    data_size: int = 100
    seed: int = 1
    mod: int = 0
    quick_sort: bool = False
    selection_sort: bool = False
    bubble_sort: bool = False
    output_data: bool = False
    output_sorted_data: bool = False


class UsageExit(Exception):
    """Raised when the usage message is to be shown and the program ended."""

    def __init__(self, cmd: str) -> None:
        super().__init__(cmd)
        self.cmd = cmd


class OptionError(Exception):
    """Raised for a bad or incomplete command line."""


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class RandomGenerator:
    """The additive feedback generator behind the C library's ``random()``.

    Seeded as ``srandom(seed)`` would be, it yields the same sequence of
    values in the range 0 to 2**31 - 1.
    """

    def __init__(self, seed: int = 1) -> None:
        seed &= 0xFFFFFFFF
        if seed == 0:
            seed = 1
        word = _int32(seed)
        initial = [word]
        for _ in range(30):
            hi = _trunc_div(word, 127773)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            initial.append(word)
        values = [v & 0xFFFFFFFF for v in initial]
        values.extend(values[:3])
        self._window: deque[int] = deque(values[3:], maxlen=31)
        for _ in range(310):
            self._step()

    def _step(self) -> int:
        value = (self._window[0] + self._window[-3]) & 0xFFFFFFFF
        self._window.append(value)
        return value

    def next(self) -> int:
        """Return the next value of the sequence."""
        return self._step() >> 1

    def __iter__(self) -> "RandomGenerator":
        return self

    def __next__(self) -> int:
        return self.next()


def _atoi(text: str) -> int:
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return _int32(sign * int(digits)) if digits else 0


def process_command_line(argv: list[str]) -> Options:
    """Parse ``argv`` (command name first) into Options.

    Raises UsageExit for ``-h`` or an empty command line and OptionError
    for a missing value or an unknown option.
    """
    cmd = argv[0] if argv else "sort"
    if len(argv) <= 1:
        raise UsageExit(cmd)
    opts = Options()
    args = iter(argv[1:])
    for opt in args:
        if opt == "-h":
            raise UsageExit(cmd)
        if opt in _FLAG_OPTIONS:
            setattr(opts, _FLAG_OPTIONS[opt], True)
        elif opt in _VALUE_OPTIONS:
            value = next(args, None)
            if value is None:
                raise OptionError(f"Value for {opt} option is missing.")
            setattr(opts, _VALUE_OPTIONS[opt], _atoi(value))
        else:
            raise OptionError(f"Error: Bad option: {opt}")
    return opts


def generate_random_data(size: int, seed: int, mod: int) -> list[int]:
    """Return ``size`` pseudo-random values, reduced modulo ``mod`` unless it is 0."""
    if size < 0:
        raise ValueError("data size must be non-negative")
    generator = RandomGenerator(seed)
    values = (generator.next() for _ in range(size))
    if mod:
        return [value % abs(mod) for value in values]
    return list(values)


def format_data(data: list[int]) -> str:
    """Lay out ``data`` in rows of seven right-aligned columns."""
    parts = []
    for idx, value in enumerate(data):
        if idx % _COLUMNS == 0:
            parts.append("\n")
        parts.append(f"{value:>{_WIDTH}} ")
    parts.append("\n")
    return "".join(parts)


def usage(cmd: str) -> str:
    """Return the usage message for command name ``cmd``."""
    return (
        f"Usage: {cmd} [options]\n"
        "  Options:\n"
        "     -sz  int  The number of data items\n"
        "     -rs  int  The random number generator seed\n"
        "     -mod int  The mod value for random numbers\n"
        "     -od       Output data to be sorted\n"
        "     -osd      Output sorted data\n"
        "     -qs       Use quick sort\n"
        "     -ss       Use selection sort\n"
        "     -bs       Use bubble sort\n"
        "     -h        This message\n"
        "\n"
        "  A sort must be specified, there is no default sort.\n"
        "  If more than 1 sort is specified then the first sort\n"
        "  specified from the following order will be done.\n"
        "     1. quick\n"
        "     2. selection\n"
        "     3. bubble\n"
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Generate data, sort it as the options say and print what was asked for."""
    if argv is None:
        cmd = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "sort"
        args = sys.argv[1:]
    else:
        cmd, args = "sort", list(argv)
    try:
        opts = process_command_line([cmd, *args])
    except UsageExit as exc:
        sys.stdout.write(usage(exc.cmd))
        return 0
    except OptionError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    try:
        data = generate_random_data(opts.data_size, opts.seed, opts.mod)
    except ValueError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    if opts.output_data:
        sys.stdout.write("\nData Before: " + format_data(data))

    if opts.quick_sort:
        quick_sort(data)
    if opts.selection_sort:
        selection_sort(data)
    if opts.bubble_sort:
        bubble_sort(data)
    if not (opts.quick_sort or opts.selection_sort or opts.bubble_sort):
        sys.stdout.flush()
        sys.stderr.write("Error: No sort specified.\n")
        return 1

    if opts.output_sorted_data:
        sys.stdout.write("\nData After: " + format_data(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())