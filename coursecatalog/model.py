"""
Small value types returned by the presentation helpers.

Course and module records themselves stay plain dicts exactly as decoded
from the catalog JSON; only derived values get their own types.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class RadarPoint:
    """
    One 'label:value' entry of a radar chart string.

    value is NaN when the text is not a number and None when the pair
    had no ':' at all.
    """

    label: str
    value: Optional[float]


@dataclass(frozen=True)
class CourseColors:
    """
    HSL color strings derived from a course acronym.
    """

    primary: str
    secondary: str
    accent: str

    def as_dict(self) -> Dict[str, str]:
        return {"primary": self.primary, "secondary": self.secondary, "accent": self.accent}
