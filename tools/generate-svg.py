#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tools/generate-svg.py

Writes rainbow-{W}x{H}.svg: one stroked Bezier arc per color, outermost first.
The file links ./svg.css (not generated here) for the dash animation.

Usage:
  python tools/generate-svg.py
  python tools/generate-svg.py --out dist --width 800 --stroke 16
  python tools/generate-svg.py --colors "#f00" "#0f0" "#00f"
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rainbowarcs.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
