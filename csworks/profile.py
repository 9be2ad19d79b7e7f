"""Execution counts keyed by source line, optionally with a function name."""

from __future__ import annotations

from typing import Optional


def int_to_string(n: int) -> str:
    """Return the decimal text of a non-negative integer."""
    if n < 0:
        raise ValueError("int_to_string requires a non-negative value")
    return str(n)


class Profile:
    """Counts how often each line (or line and function) of a file runs.

    Entries are keyed by ``"<line>"`` or ``"<line> <function>"`` and are
    reported in key order.
    """

    def __init__(self, filename: str = "") -> None:
        self.filename = filename
        self._counts: dict[str, int] = {}

    def count(self, line: int, function: Optional[str] = None) -> None:
        """Record one execution of ``line``, tagged with ``function`` if given."""
        key = int_to_string(line)
        if function is not None:
            key = f"{key} {function}"
        self._counts[key] = self._counts.get(key, 0) + 1

    def __str__(self) -> str:
        lines = [f"File: {self.filename}\n"]
        lines.extend(f"{key} {value}\n" for key, value in sorted(self._counts.items()))
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Profile({self.filename!r})"