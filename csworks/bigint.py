"""Fixed-width unsigned decimal integers of up to 200 digits."""

from __future__ import annotations

from typing import TextIO, Union

CAPACITY = 200
_MODULUS = 10**CAPACITY
_LINE_WIDTH = 80


class BigInt:
    """An unsigned integer of at most ``CAPACITY`` decimal digits.

    Arithmetic wraps around: digits beyond the capacity are discarded.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, str, "BigInt"] = 0) -> None:
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, bool):
            raise TypeError("BigInt cannot be built from a bool")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigInt holds only non-negative values")
            self._value = value % _MODULUS
        elif isinstance(value, str):
            if len(value) > CAPACITY:
                raise ValueError(f"more than {CAPACITY} digits")
            if value and not (value.isascii() and value.isdigit()):
                raise ValueError(f"not a decimal number: {value!r}")
            self._value = int(value) if value else 0
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")

    @staticmethod
    def _coerce(other: object) -> "BigInt | None":
        if isinstance(other, BigInt):
            return other
        if isinstance(other, (int, str)) and not isinstance(other, bool):
            return BigInt(other)
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __getitem__(self, index: int) -> int:
        """Return the digit at ``index``, counting from the least significant."""
        if not 0 <= index < CAPACITY:
            raise IndexError("digit index out of range")
        return (self._value // 10**index) % 10

    def __add__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt((self._value + rhs._value) % _MODULUS)

    __radd__ = __add__

    def __mul__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        product = BigInt()
        for position in range(CAPACITY):
            digit = rhs[position]
            if digit:
                product = product + self.times_digit(digit).times_10(position)
        return product

    __rmul__ = __mul__

    def times_digit(self, digit: int) -> "BigInt":
        """Multiply by a single decimal digit."""
        if not 0 <= digit <= 9:
            raise ValueError("digit must be between 0 and 9")
        return BigInt((self._value * digit) % _MODULUS)

    def times_10(self, power: int) -> "BigInt":
        """Multiply by 10 to the given non-negative power."""
        if power < 0:
            raise ValueError("power must be non-negative")
        return BigInt((self._value * 10**power) % _MODULUS)

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        digits = str(self._value)
        lines = []
        for start in range(0, len(digits), _LINE_WIDTH):
            chunk = digits[start : start + _LINE_WIDTH]
            lines.append(chunk + ("\n" if len(chunk) == _LINE_WIDTH else ""))
        return "".join(lines)

    def __repr__(self) -> str:
        return f"BigInt({str(self._value)!r})"

    def debug_string(self) -> str:
        """Every stored digit, least significant first, each followed by ' | '."""
        return "".join(f"{self[i]} | " for i in range(CAPACITY))


def read_bigint(stream: TextIO) -> "BigInt | None":
    """Read digits from ``stream`` up to a ';', skipping whitespace.

    Returns None when the stream is exhausted before any character is read.
    """
    chars: list[str] = []
    seen = False
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            continue
        seen = True
        if ch == ";":
            break
        chars.append(ch)
    if not seen:
        return None
    return BigInt("".join(chars))