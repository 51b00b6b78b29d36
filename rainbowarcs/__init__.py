"""rainbowarcs/__init__.py

Public API: canvas config, arc geometry and SVG output.
"""

from .config import Canvas, DEFAULT_PALETTE, STYLESHEET, parse_color, parse_length

from .geometry import (
    Arc,
    outer_arc,
    next_arc,
    build_arcs,
    inverted_bands,
    overflowing_bands,
)

from .svg import (
    path_d,
    render_document,
    build_document,
    output_filename,
    write_rainbow,
    read_bands,
)
