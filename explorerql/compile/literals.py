"""Rendering of match values, string literals and aliases.

Values reach the WHERE clause exactly as the explorer UI stringified them:
strings as double-quoted, backslash-escaped literals; everything else in its
JavaScript text form (``true``, ``3``, ``2.5``).
"""
from __future__ import annotations

import math
import re

from explorerql.schema.filters import MatchValue

_NON_WORD = re.compile(r"\W", re.ASCII)

_SPECIAL_ESCAPES: dict[str, str] = {
    "\0": "\\0",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\x0b": "\\x0B",
    '"': '\\"',
    "\\": "\\\\",
    "<": "\\u003C",
}


def _escape_char(ch: str) -> str:
    special = _SPECIAL_ESCAPES.get(ch)
    if special is not None:
        return special
    code = ord(ch)
    if 31 < code < 127:
        return ch
    if code < 256:
        return f"\\x{code:02X}"
    if code > 0xFFFF:
        # Astral characters are written as a UTF-16 surrogate pair.
        code -= 0x10000
        high, low = 0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF)
        return f"\\u{high:04X}\\u{low:04X}"
    return f"\\u{code:04X}"


def quote_string(value: str) -> str:
    """Return ``value`` as a double-quoted, escaped string literal.

    >>> quote_string('say "hi"')
    '"say \\\\"hi\\\\""'
    """
    return '"' + "".join(_escape_char(ch) for ch in value) + '"'


def _format_float(value: float) -> str:
    """Format ``value`` the way JavaScript's ``Number#toString`` does.

    The shortest round-tripping digits come from ``repr``; only the layout
    differs.  Exponent form is used when the decimal exponent is above 21 or
    below -6, with an explicit sign and no zero padding (``1e+21``,
    ``1.5e-7``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""

    mantissa, _, exponent = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    digits = int_part + frac_part
    # Position of the decimal point relative to the start of ``digits``.
    point = len(int_part) + (int(exponent) if exponent else 0)
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    exp = point - 1
    head = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{sign}{head}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def render_value(value: MatchValue) -> str:
    """Return the text form of a non-quoted match value.

    Booleans are lower-cased and floats follow JavaScript's number layout,
    so ``True`` renders as ``true``, ``2.0`` as ``2`` and ``1e21`` as
    ``1e+21``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def render_match_value(value: MatchValue, is_function: bool) -> str:
    """Quote string values unless they are function-call fragments."""
    if isinstance(value, str) and not is_function:
        return quote_string(value)
    return render_value(value)


def sanitize_alias(alias: str) -> str:
    """Replace every non-word character with ``_``.

    >>> sanitize_alias("a.b c")
    'a_b_c'
    """
    return _NON_WORD.sub("_", alias)
