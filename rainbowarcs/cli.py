"""
rainbowarcs/cli.py

Entry point behind `rainbow-svg` and tools/generate-svg.py.
Writes the rainbow SVG and prints [warn] lines for degenerate bands.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import DEFAULT_PALETTE, STYLESHEET, Canvas, parse_color, parse_length
from .geometry import Arc, build_arcs, inverted_bands, overflowing_bands
from .svg import fmt, write_rainbow


def report_degenerate(arcs: Sequence[Arc], c: Canvas) -> None:
    """Prints a [warn] line per inverted or overflowing band."""
    for i in inverted_bands(arcs):
        a = arcs[i]
        print(f"[warn] band {i} is inverted: start x {fmt(a.start[0])} >= end x {fmt(a.end[0])}",
              file=sys.stderr)
    for i in overflowing_bands(arcs, c):
        print(f"[warn] band {i} overflows the {fmt(c.W)}x{fmt(c.H)} canvas", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    d = Canvas()
    ap = argparse.ArgumentParser(description="Write a rainbow of nested Bezier arcs as SVG.")
    ap.add_argument("--out", type=Path, default=Path("."), help="Output dir (default: cwd)")
    ap.add_argument("--width", type=parse_length, default=d.W, help="Canvas width; height is half of it")
    ap.add_argument("--stroke", type=parse_length, default=d.STROKE, help="Band stroke width")
    ap.add_argument("--colors", nargs="+", type=parse_color, default=list(DEFAULT_PALETTE),
                    help="Band colors, outermost first (hex)")
    ap.add_argument("--css", type=str, default=STYLESHEET, help="Stylesheet href for the xml-stylesheet PI")
    args = ap.parse_args(argv)

    c = Canvas(W=args.width, STROKE=args.stroke)
    palette: List[str] = args.colors

    arcs = build_arcs(c, len(palette))
    # Degenerate geometry is still written out.
    report_degenerate(arcs, c)

    out_path = write_rainbow(args.out, c, palette, args.css, arcs=arcs)
    print(f"Wrote {len(palette)} bands to: {out_path}")


if __name__ == "__main__":
    main()
