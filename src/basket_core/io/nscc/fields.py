"""
fields.py

Positional field decoders for the NSCC/DTCC basket composition file.

Column positions follow the NSCC record layout document: 0-based and
inclusive at both ends, so a field documented as 17..25 is line[17:26].

Numeric decoders are forgiving: content with no leading digits decodes
as zero rather than raising.
"""

from __future__ import annotations

import re
from typing import Optional

_INT_RE = re.compile(r"^[+-]?\d+")
_FLOAT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)")


def _slice(line: str, start: int, end: int) -> str:
    return line[start:end + 1]


def text_field(line: str, start: int, end: int) -> Optional[str]:
    s = _slice(line, start, end).strip()
    return s or None


def char_field(line: str, pos: int) -> Optional[str]:
    if pos >= len(line):
        return None
    return line[pos]


def parse_int(raw: str) -> int:
    m = _INT_RE.match(raw.strip())
    return int(m.group(0)) if m else 0


def parse_float(raw: str) -> float:
    m = _FLOAT_RE.match(raw.strip())
    return float(m.group(0)) if m else 0.0


def int_field(line: str, start: int, end: int) -> int:
    return parse_int(_slice(line, start, end))


def float_field(line: str, start: int, end: int) -> float:
    return parse_float(_slice(line, start, end))


def signed_amount(
    line: str,
    int_start: int,
    int_end: int,
    frac_start: int,
    frac_end: int,
    sign_pos: int,
) -> float:
    """
    Decode a {magnitude, 2-digit fraction, trailing sign} monetary triple.

    '000000000002' + '91' + '-'  ->  -2.91
    """
    whole = _slice(line, int_start, int_end).strip()
    frac = _slice(line, frac_start, frac_end).strip()
    value = parse_float(f"{whole}.{frac}")
    if char_field(line, sign_pos) == "-":
        value = -value
    return value
