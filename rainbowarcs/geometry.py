"""
rainbowarcs/geometry.py

Bezier arcs for the rainbow bands, plus checks for degenerate configurations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from shapely.geometry import LineString, Polygon, box

from .config import Canvas

Pt = Tuple[float, float]


@dataclass(frozen=True)
class Arc:
    """
    One band: two cubic segments meeting at the apex.

      M start  C ctrl1, ctrl2, apex  S ctrl3, end
    """
    start: Pt
    end: Pt
    apex: Pt
    ctrl1: Pt
    ctrl2: Pt
    ctrl3: Pt


# -------------------------
# Band recurrence
# -------------------------

def outer_arc(c: Canvas) -> Arc:
    # Endpoints are padded by half a stroke so the outer band stays on the canvas.
    s = c.STROKE
    width = c.W - s
    height = width / 2

    start = (s / 2, c.H)
    end = (c.W - s / 2, c.H)
    apex = (c.W / 2, s / 2)
    ctrl1 = (start[0], c.H - height / 2)
    ctrl2 = (start[0] + (end[0] - start[0]) / 4, apex[1])
    ctrl3 = (end[0], ctrl1[1])
    return Arc(start, end, apex, ctrl1, ctrl2, ctrl3)


def next_arc(prev: Arc, stroke: float) -> Arc:
    start = (prev.start[0] + stroke, prev.start[1])
    end = (prev.end[0] - stroke, prev.end[1])
    apex = (prev.apex[0], prev.apex[1] + stroke)
    ctrl1 = (start[0], prev.ctrl1[1] + stroke / 2)
    ctrl2 = (prev.ctrl2[0] + stroke / 2, prev.ctrl2[1] + stroke)
    ctrl3 = (end[0], ctrl1[1])
    return Arc(start, end, apex, ctrl1, ctrl2, ctrl3)


def build_arcs(c: Canvas, count: int) -> List[Arc]:
    """Outermost band first; each band is stepped in from the one before it."""
    if count < 1:
        raise ValueError(f"Need at least one band, got {count}")
    arcs = [outer_arc(c)]
    for _ in range(count - 1):
        arcs.append(next_arc(arcs[-1], c.STROKE))
    return arcs


# -------------------------
# Sampling
# -------------------------

def reflected_ctrl(arc: Arc) -> Pt:
    # implicit first control point of the S segment
    return (2 * arc.apex[0] - arc.ctrl2[0], 2 * arc.apex[1] - arc.ctrl2[1])


def cubic_points(p0: Pt, p1: Pt, p2: Pt, p3: Pt, steps: int = 60) -> List[Pt]:
    x0, y0 = p0
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3

    pts: List[Pt] = []
    for i in range(steps):
        t = i / (steps - 1)
        mt = 1.0 - t
        x = (mt**3)*x0 + 3*(mt**2)*t*x1 + 3*mt*(t**2)*x2 + (t**3)*x3
        y = (mt**3)*y0 + 3*(mt**2)*t*y1 + 3*mt*(t**2)*y2 + (t**3)*y3
        pts.append((x, y))
    return pts


def centerline(arc: Arc, steps: int = 60) -> List[Pt]:
    left = cubic_points(arc.start, arc.ctrl1, arc.ctrl2, arc.apex, steps=steps)
    right = cubic_points(arc.apex, reflected_ctrl(arc), arc.ctrl3, arc.end, steps=steps)
    return left + right[1:]


def band_outline(arc: Arc, stroke: float, steps: int = 60) -> Polygon:
    # Flat caps: the square caps drawn by the SVG hang below the canvas on purpose.
    return LineString(centerline(arc, steps)).buffer(
        stroke / 2, cap_style="flat", join_style="round"
    )


# -------------------------
# Degenerate configurations (reported, never fatal)
# -------------------------

def inverted_bands(arcs: Sequence[Arc]) -> List[int]:
    return [i for i, a in enumerate(arcs) if a.start[0] >= a.end[0]]


def overflowing_bands(arcs: Sequence[Arc], c: Canvas) -> List[int]:
    """
    Indices of bands whose stroked outline leaves the canvas.

    A quarter stroke of slack absorbs the sampling error at the flat caps.
    A zero-width stroke has no outline, so the centerline is checked instead.
    """
    tol = c.STROKE / 4 or 1e-6
    frame = box(-tol, -tol, c.W + tol, c.H + tol)

    over: List[int] = []
    for i, a in enumerate(arcs):
        g = band_outline(a, c.STROKE)
        if g.is_empty:
            g = LineString(centerline(a))
        if not frame.contains(g):
            over.append(i)
    return over
