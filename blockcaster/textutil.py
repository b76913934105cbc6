"""Small text and integer helpers used by the map and asset loaders."""

from __future__ import annotations

from typing import Iterable, Iterator

_INT_BITS = 32
_WHITESPACE = "\t\n\v\f\r "
_TRIM_CHARS = " \n\t"
_MAX_FACTORIAL = 12
_SQRT_LIMIT = 50000


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives 0. The result wraps to a
    signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def trim(text: str) -> str:
    """Strip spaces, newlines and tabs from both ends of ``text``."""
    return text.strip(_TRIM_CHARS)


def capitalize(text: str) -> str:
    """Upper-case the first character of each alphanumeric run, lower the rest."""
    result = []
    in_word = False
    for char in text:
        if char.isascii() and char.isalnum():
            result.append(char.lower() if in_word else char.upper())
            in_word = True
        else:
            result.append(char)
            in_word = False
    return "".join(result)


def factorial(n: int) -> int:
    """Return ``n!`` for 0 <= n <= 12, the range that fits a 32-bit int."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    if n > _MAX_FACTORIAL:
        raise ValueError(f"factorial only defined up to {_MAX_FACTORIAL}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def int_sqrt(n: int) -> int:
    """Return the exact integer square root of ``n``, or 0 if there is none.

    Roots of 50000 and above are not searched and also give 0.
    """
    if n < 0:
        return 0
    root = _isqrt(n)
    if root * root != n or root >= _SQRT_LIMIT:
        return 0
    return root


def _isqrt(n: int) -> int:
    import math

    return math.isqrt(n)


def power(n: int, exponent: int) -> int:
    """Return ``n`` raised to a strictly positive ``exponent``."""
    if exponent <= 0:
        raise ValueError("exponent must be positive")
    return n**exponent


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of a text stream without their trailing newline.

    A final newline does not produce an extra empty line; a last line without
    a newline is still yielded.
    """
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line