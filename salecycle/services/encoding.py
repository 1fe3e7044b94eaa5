"""Pure formatting helpers for page variable values.

Nothing here touches the request state; every function maps plain input to
the string that ends up between the quotes of ``__sc["key"]="..."``.
"""
from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable

from salecycle.core.errors import InvalidArgument

PIPE = "|"
_CENTS = Decimal("0.01")

# json.dumps leaves these alone; inside an inline <script> they could end the
# tag or an HTML entity, and ' could end a single-quoted literal.
_HTML_UNSAFE = ("'", "<", ">", "&")

def javascript_string_encode(text: str) -> str:
    """Escape ``text`` for a double-quoted JavaScript string literal (no quotes added)."""
    encoded = json.dumps(text, ensure_ascii=False)[1:-1]
    for ch in _HTML_UNSAFE:
        encoded = encoded.replace(ch, "\\u%04x" % ord(ch))
    return encoded

def encode_segment(item: str | None) -> str:
    if item is None:
        return ""
    return javascript_string_encode(item.replace(PIPE, " "))

def pipeline(items: Iterable[str | None]) -> str:
    """Join ``items`` with ``|`` after neutralising embedded pipes and escaping.

    >>> pipeline(["a|b", None, 'say "hi"'])
    'a b||say \\\\"hi\\\\"'
    """
    return PIPE.join(encode_segment(x) for x in items)

def format_amount(value: Decimal | float | int | str) -> str:
    """Two fixed decimals, half-up. Floats go through ``str`` so 10.2 is 10.20."""
    if isinstance(value, bool):
        raise InvalidArgument(f"amount must be a number, got {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            raise InvalidArgument(f"amount must be finite, got {value!r}")
        return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise InvalidArgument(f"amount must be a number, got {value!r}") from e

def format_quantity(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"quantity must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"quantity must not be negative, got {value}")
    return str(value)

def append_segment(current: str | None, segment: str) -> str:
    return segment if current is None else f"{current}{PIPE}{segment}"
