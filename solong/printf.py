"""Small printf-style formatter with the conversions the game uses."""

from __future__ import annotations

import sys
from typing import IO, Any, Iterator

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def format_base(number: int | float, conversion: str, base: int) -> str:
    """Write ``number`` in ``base`` (2 to 16).

    Upper-case digits are used when ``conversion`` is ``"X"``. Negative
    numbers get a leading minus sign.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    digits = _UPPER_DIGITS if conversion == "X" else _LOWER_DIGITS
    sign = "-" if number < 0 else ""
    value = int(abs(number))
    out = []
    while True:
        value, remainder = divmod(value, base)
        out.append(digits[remainder])
        if not value:
            break
    return sign + "".join(reversed(out))


def _to_int32(value: int) -> int:
    return ((int(value) + 0x80000000) & _UINT_MASK) - 0x80000000


def _to_char(value: Any) -> str:
    if isinstance(value, str):
        return value
    return chr(int(value) & 0xFF)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    if conversion == "c":
        return _to_char(take())
    if conversion == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if conversion in ("d", "i"):
        return format_base(_to_int32(take()), conversion, 10)
    if conversion == "u":
        return format_base(int(take()) & _UINT_MASK, conversion, 10)
    if conversion in ("x", "X"):
        return format_base(int(take()) & _UINT_MASK, conversion, 16)
    if conversion == "p":
        return "0x" + format_base(int(take()) & _ULONG_MASK, conversion, 16)
    if conversion == "%":
        return "%"
    # Unknown conversions (and a trailing '%') produce nothing.
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supported conversions are %c, %s, %d, %i, %u, %x, %X, %p and %%.
    An unknown conversion character is dropped together with its '%'.
    """
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for char in chars:
        if char == "%":
            parts.append(_convert(next(chars, ""), values))
        else:
            parts.append(char)
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: IO[str] | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)