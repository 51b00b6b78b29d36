"""
rainbowarcs/svg.py

Path data, document assembly and read-back for rainbow SVGs.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

from .config import STYLESHEET, Canvas
from .geometry import Arc, Pt, build_arcs

SVG_NS = "http://www.w3.org/2000/svg"

# Lets a stylesheet animate stroke-dasharray/offset in percent of the path.
PATH_LENGTH = 100


def fmt(x: float) -> str:
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def pt(p: Pt) -> str:
    return f"{fmt(p[0])} {fmt(p[1])}"


def output_filename(c: Canvas) -> str:
    return f"rainbow-{fmt(c.W)}x{fmt(c.H)}.svg"


# -------------------------
# Path data
# -------------------------

def path_d(arc: Arc, indent: str = "      ") -> str:
    lines = [
        f"M {pt(arc.start)}",
        f"C {pt(arc.ctrl1)}, {pt(arc.ctrl2)}, {pt(arc.apex)}",
        f"S {pt(arc.ctrl3)}, {pt(arc.end)}",
    ]
    return "\n".join(indent + line for line in lines)


NUMBER = r"-?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?"
TOKEN_RE = re.compile(rf"{NUMBER}|[A-Za-z]")

# coordinate pairs per command
ARITY = {"M": 1, "C": 3, "S": 2}


def parse_path_d(d: str) -> List[Tuple[str, List[Pt]]]:
    """
    Returns [(command, points), ...].
    Supports absolute M/C/S only, which is all path_d() emits. Repeated
    coordinate groups after a command are read as repeats of that command.
    """
    tokens = TOKEN_RE.findall(d.replace(",", " "))
    i = 0
    cmd = None
    out: List[Tuple[str, List[Pt]]] = []

    def read_pair() -> Pt:
        nonlocal i
        if i + 1 >= len(tokens) or tokens[i].isalpha() or tokens[i + 1].isalpha():
            raise ValueError("Unexpected end of path data")
        x = float(tokens[i]); y = float(tokens[i + 1])
        i += 2
        return (x, y)

    while i < len(tokens):
        t = tokens[i]
        if t.isalpha():
            if t not in ARITY:
                raise ValueError(f"Unsupported SVG path command: {t}")
            cmd = t
            i += 1
            continue

        if cmd is None:
            raise ValueError("Path data missing command")

        out.append((cmd, [read_pair() for _ in range(ARITY[cmd])]))

    return out


# -------------------------
# Document
# -------------------------

def render_document(
    paths: Sequence[str],
    palette: Sequence[str],
    c: Canvas,
    stylesheet: str = STYLESHEET,
) -> str:
    if len(paths) != len(palette):
        raise ValueError(f"{len(paths)} paths for {len(palette)} colors")

    w, h, sw = fmt(c.W), fmt(c.H), fmt(c.STROKE)
    href = escape(stylesheet, {'"': "&quot;"})
    parts = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f'<?xml-stylesheet type="text/css" href="{href}" ?>',
        "<svg",
        f'  xmlns="{SVG_NS}"',
        f'  width="{w}"',
        f'  height="{h}"',
        f'  viewBox="0 0 {w} {h}"',
        '  fill="none"',
        '  stroke="none"',
        f'  stroke-width="{sw}"',
        '  stroke-linecap="square"',
        '  xml:space="preserve"',
        ">",
    ]
    for i, (d, color) in enumerate(zip(paths, palette)):
        parts.append(
            f"""  <path
    class="path-{i}"
    stroke="{color}"
    stroke-width="{sw}"
    pathLength="{PATH_LENGTH}"
    d="
{d}
    "
  />"""
        )
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def build_document(
    c: Canvas,
    palette: Sequence[str],
    stylesheet: str = STYLESHEET,
    arcs: Optional[Sequence[Arc]] = None,
) -> str:
    if arcs is None:
        arcs = build_arcs(c, len(palette))
    return render_document([path_d(a) for a in arcs], palette, c, stylesheet)


def write_rainbow(
    out_dir: Path,
    c: Canvas,
    palette: Sequence[str],
    stylesheet: str = STYLESHEET,
    arcs: Optional[Sequence[Arc]] = None,
) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / output_filename(c)
    out_path.write_text(build_document(c, palette, stylesheet, arcs), encoding="utf-8")
    return out_path


# -------------------------
# Read-back
# -------------------------

def arc_from_d(d: str) -> Arc:
    cmds = parse_path_d(d)
    if [name for name, _ in cmds] != ["M", "C", "S"]:
        raise ValueError(f"Not a rainbow band: {d.strip()!r}")
    (start,), (ctrl1, ctrl2, apex), (ctrl3, end) = (pts for _, pts in cmds)
    return Arc(start, end, apex, ctrl1, ctrl2, ctrl3)


def read_bands(svg_path: Path) -> List[Tuple[str, Arc]]:
    """
    Returns [(stroke color, arc), ...] in document order.
    """
    root = ET.parse(svg_path).getroot()
    ns = {"svg": SVG_NS}
    paths = root.findall(".//svg:path", ns) or root.findall(".//path")
    return [(p.attrib.get("stroke", ""), arc_from_d(p.attrib.get("d", ""))) for p in paths]
