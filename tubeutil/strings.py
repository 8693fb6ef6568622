"""Small string helpers: byte sizes, digit extraction and command paths."""

from __future__ import annotations

import locale

_UNITS = (
    (1024, 1, "B"),
    (1048576, 1024, "KB"),
    (1073741824, 1048576, "MB"),
)
_GIGABYTE = 1073741824
_LONG_LONG_MAX = 2**63 - 1


def bytes_string(num_bytes: float) -> str:
    """Render a byte count with one decimal place and a B/KB/MB/GB unit."""
    for limit, divisor, unit in _UNITS:
        if num_bytes < limit:
            return f"{num_bytes / divisor:3.1f} {unit}"
    return f"{num_bytes / _GIGABYTE:3.1f} GB"


def _to_long_long(digits: str) -> int:
    """Parse a digit string the way a failed 64-bit conversion would: 0 on failure."""
    if not digits or not digits.isascii():
        return 0
    value = int(digits)
    return value if value <= _LONG_LONG_MAX else 0


def extract_digits(text: str, use_locale: bool = True) -> str:
    """Keep only the decimal digits of ``text``.

    With ``use_locale`` the digits are read as a number and formatted with
    the current locale's digit grouping.
    """
    digits = "".join(ch for ch in text if ch.isdecimal())
    if not use_locale:
        return digits
    return locale.format_string("%d", _to_long_long(digits), grouping=True)


def extract_path(text: str) -> str:
    """Take the leading path from a command line.

    Quote characters are dropped; whitespace ends the path unless it falls
    inside the first pair of quotes.
    """
    out = []
    quote_count = 0
    for ch in text:
        if ch in "\"'":
            quote_count += 1
        elif ch.isspace() and quote_count != 1:
            break
        else:
            out.append(ch)
    return "".join(out)