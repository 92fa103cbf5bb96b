"""
Presentation helpers (course -> display attributes).

All functions here are pure: the same input always gives the same output,
independent of any loaded catalog. This matters for colors in particular,
because other front ends compute the same hue from the same acronym.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from coursecatalog.model import CourseColors, RadarPoint


EMOJI_BY_ACRONYM = {
    "CS": "💻",
    "SE": "🛠️",
    "BIT": "📊",
    "CIT": "🌐",
    "DS": "📈",
    "CE": "⚙️",
}
FALLBACK_EMOJI = "📚"

# Leading decimal literal, same prefix rule as a JavaScript parseFloat
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# ---------------------------------------------------------------------------
# Radar chart strings
# ---------------------------------------------------------------------------


def _parse_float_prefix(text: str) -> float:
    """
    Parse the longest numeric prefix of text.

    '2.5' -> 2.5, ' 3kg' -> 3.0, 'abc' -> nan. Never raises.
    """
    m = _FLOAT_PREFIX.match(text.lstrip())
    if not m:
        return math.nan
    return float(m.group(0).replace("Infinity", "inf"))


def parse_radar_series(text: Optional[str]) -> list[RadarPoint]:
    """
    Parse 'label:value;label:value;...' into RadarPoint entries.

    Order is kept and duplicates are not merged. A pair without ':' gives
    a point whose value is None.
    """
    if not text:
        return []

    points: list[RadarPoint] = []
    for pair in text.split(";"):
        label, sep, value_text = pair.partition(":")
        value = _parse_float_prefix(value_text) if sep else None
        points.append(RadarPoint(label=label, value=value))
    return points


# ---------------------------------------------------------------------------
# Colors & emoji
# ---------------------------------------------------------------------------


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _code_unit(ch: str) -> int:
    # first UTF-16 code unit (high surrogate for astral characters)
    cp = ord(ch)
    if cp > 0xFFFF:
        return 0xD800 + ((cp - 0x10000) >> 10)
    return cp


def acronym_hash(acronym: str) -> int:
    """
    String hash of the form acc * 31 + c.

    The multiplication is done as (acc << 5) - acc with the shift wrapping
    at 32 bits, so the result matches the browser front end bit for bit.
    The accumulator itself is not wrapped: it stays congruent to the
    wrapped 32-bit hash mod 2**32, but for strings longer than about six
    characters the hue can differ from one computed on the wrapped value.
    """
    acc = 0
    for ch in acronym:
        acc = _code_unit(ch) + (_to_int32(_to_int32(acc) << 5) - acc)
    return acc


def derive_colors(acronym: str) -> CourseColors:
    """
    Derive primary/secondary/accent HSL colors from an acronym.
    """
    h = abs(acronym_hash(acronym)) % 360
    return CourseColors(
        primary=f"hsl({h}, 70%, 50%)",
        secondary=f"hsl({h}, 70%, 80%)",
        accent=f"hsl({(h + 180) % 360}, 70%, 50%)",
    )


def derive_emoji(acronym: str) -> str:
    """
    Emoji for a course acronym (exact match, no case folding).
    """
    return EMOJI_BY_ACRONYM.get(acronym, FALLBACK_EMOJI)
