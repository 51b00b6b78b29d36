"""
rainbowarcs/config.py

Canvas metrics, default palette and argument parsing helpers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


# -------------------------
# Canvas (SVG y-down)
# -------------------------

@dataclass(frozen=True)
class Canvas:
    W: float = 1000
    STROKE: float = 20

    @property
    def H(self) -> float:
        return self.W / 2


# Outer band first
DEFAULT_PALETTE: Tuple[str, ...] = (
    "#ff0000",
    "#ff7f00",
    "#ffff00",
    "#00ff00",
    "#0000ff",
    "#800080",
)

STYLESHEET = "./svg.css"

HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_color(s: str) -> str:
    """
    Accepts #rgb, #rrggbb or #rrggbbaa (the leading '#' is optional).
    Returns the color as written, with a '#' prefix.
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    if len(t) in (3, 6, 8) and set(t) <= HEX_DIGITS:
        return "#" + t
    raise ValueError(f"Invalid color: {s!r} (use #rgb, #rrggbb, or #rrggbbaa)")


def parse_length(s: str) -> float:
    # zero and negative pass through; only inf and nan are rejected
    v = float(s)
    if not math.isfinite(v):
        raise ValueError(f"Invalid length: {s!r} (must be a finite number)")
    return v
