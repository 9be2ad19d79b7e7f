"""Infix-to-postfix conversion and a tiny accumulator assembly generator.

Infix expressions are fully parenthesised, space separated and terminated
by a ``;`` token, for example ``( AX + ( B * C ) ) ;``.
"""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional, TextIO

from csworks.stack import Stack

_OPCODES = {
    "+": "AD",
    "-": "SB",
    "*": "MU",
    "/": "DV",
}


def postfix(expression: str) -> str:
    """Convert a fully parenthesised infix expression ending in ';' to postfix."""
    stack: Stack[str] = Stack()
    for token in expression.split(" "):
        if token == ";":
            break
        if token == ")":
            try:
                right = stack.pop()
                oper = stack.pop()
                left = stack.pop()
            except IndexError:
                raise ValueError(f"unbalanced expression: {expression!r}") from None
            stack.push(f"{left} {right} {oper}")
        elif token != "(":
            stack.push(token)
    else:
        raise ValueError(f"expression has no terminating ';': {expression!r}")
    if stack.empty():
        raise ValueError(f"empty expression: {expression!r}")
    return stack.top()


def evaluate(register: int, out: TextIO, left: str, token: str, right: str) -> str:
    """Write the load/operate/store sequence for one operation.

    Returns the name of the temporary that holds the result.
    """
    opcode = _OPCODES.get(token)
    if opcode is None:
        raise ValueError(f"unknown operator: {token!r}")
    out.write(f"    LD    {left}\n")
    out.write(f"    {opcode}    {right}\n")
    out.write(f"    ST    TMP{register}\n")
    return f"TMP{register}"


def assembly(expression: str, out: TextIO) -> str:
    """Write assembly for a space-separated postfix expression to ``out``.

    Returns the name of the location holding the final result.
    """
    stack: Stack[str] = Stack()
    register = 1
    for token in expression.split(" "):
        if token in _OPCODES:
            try:
                right = stack.pop()
                left = stack.pop()
            except IndexError:
                raise ValueError(
                    f"operator {token!r} lacks operands in {expression!r}"
                ) from None
            stack.push(evaluate(register, out, left, token, right))
            register += 1
        else:
            stack.push(token)
    if stack.empty():
        raise ValueError("empty postfix expression")
    return stack.top()


def _expressions(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        line = line.rstrip("\r\n")
        if line.strip():
            yield line


def _run(argv: Optional[list[str]], handle: Callable[[str, TextIO], None]) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    print(len(args) + 1)
    if not args:
        print("Missing input file", file=sys.stderr)
        return 1
    if len(args) > 2:
        return 0
    try:
        infile = open(args[0], encoding="utf-8")
    except OSError as exc:
        print(f"Cannot open {args[0]}: {exc.strerror}", file=sys.stderr)
        return 1
    with infile:
        if len(args) == 1:
            for line in _expressions(infile):
                handle(line, sys.stdout)
        else:
            with open(args[1], "w", encoding="utf-8") as outfile:
                for line in _expressions(infile):
                    handle(line, outfile)
    return 0


def _write_postfix(line: str, out: TextIO) -> None:
    out.write(postfix(line) + "\n")


def _write_assembly(line: str, out: TextIO) -> None:
    converted = postfix(line)
    out.write(f"Postfix: {converted}\n")
    assembly(converted, out)


def postfix_main(argv: Optional[list[str]] = None) -> int:
    """Convert each infix line of a file to postfix, to stdout or a second file."""
    return _run(argv, _write_postfix)


def main(argv: Optional[list[str]] = None) -> int:
    """Convert each infix line of a file to postfix and assembly."""
    return _run(argv, _write_assembly)


if __name__ == "__main__":
    sys.exit(main())