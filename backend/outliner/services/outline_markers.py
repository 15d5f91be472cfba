"""Outline marker detection for prefixes like "(1)", "(a)", "(A)" and "12.".

The first three kinds open a deeper level; the bare "<digits>." form closes
one. The dedent form is a heuristic and will also fire on prose that happens
to start with a number followed by a period.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class MarkerKind(str, Enum):
    NUMERIC_DESCEND = "numeric-descend"
    LOWER_ALPHA_DESCEND = "lower-alpha-descend"
    UPPER_ALPHA_DESCEND = "upper-alpha-descend"
    NUMERIC_RETURN = "numeric-return"

    @property
    def descends(self) -> bool:
        return self is not MarkerKind.NUMERIC_RETURN


@dataclass(frozen=True)
class OutlineMarker:
    kind: MarkerKind
    raw: str


# Order matters: first match wins.
_MARKER_PATTERNS: tuple[tuple[re.Pattern[str], MarkerKind], ...] = (
    (re.compile(r"^\(\d+\)"), MarkerKind.NUMERIC_DESCEND),
    (re.compile(r"^\([a-z]\)"), MarkerKind.LOWER_ALPHA_DESCEND),
    (re.compile(r"^\([A-Z]\)"), MarkerKind.UPPER_ALPHA_DESCEND),
    (re.compile(r"^\d+\.(?!\d)"), MarkerKind.NUMERIC_RETURN),
)


def match_marker(text: str) -> OutlineMarker | None:
    """Classify the outline marker at the start of ``text``, if any."""
    candidate = text.lstrip()
    for pattern, kind in _MARKER_PATTERNS:
        m = pattern.match(candidate)
        if m:
            return OutlineMarker(kind=kind, raw=m.group(0))
    return None
