import xml.etree.ElementTree as ET

import pytest

from rainbowarcs.config import Canvas, DEFAULT_PALETTE, parse_color, parse_length
from rainbowarcs.geometry import build_arcs, outer_arc
from rainbowarcs.svg import (
    PATH_LENGTH,
    arc_from_d,
    build_document,
    fmt,
    output_filename,
    parse_path_d,
    path_d,
    read_bands,
    render_document,
    write_rainbow,
)

NS = {"svg": "http://www.w3.org/2000/svg"}


def test_fmt_drops_integral_fraction():
    assert fmt(10.0) == "10"
    assert fmt(500) == "500"
    assert fmt(372.5) == "372.5"
    assert fmt(-0.0) == "0"


def test_output_filename_default():
    assert output_filename(Canvas()) == "rainbow-1000x500.svg"
    assert output_filename(Canvas(W=801)) == "rainbow-801x400.5.svg"


def test_path_d_outer_band():
    assert path_d(outer_arc(Canvas())) == (
        "      M 10 500\n"
        "      C 10 255, 255 10, 500 10\n"
        "      S 990 255, 990 500"
    )


def test_parse_path_d_commands():
    cmds = parse_path_d("M 1 2 C 3 4, 5 6, 7.5 -8 S 1e-05 10, 11 12")
    assert cmds == [
        ("M", [(1, 2)]),
        ("C", [(3, 4), (5, 6), (7.5, -8)]),
        ("S", [(1e-05, 10), (11, 12)]),
    ]


@pytest.mark.parametrize("d", ["1 2 M 3 4", "M 1", "M 1 2 L 3 4", "M 1 2 C 3 4 5"])
def test_parse_path_d_rejects_malformed(d):
    with pytest.raises(ValueError):
        parse_path_d(d)


def test_arc_from_d_inverts_path_d():
    for a in build_arcs(Canvas(W=333, STROKE=7), 4):
        assert arc_from_d(path_d(a)) == a


def test_arc_from_d_rejects_other_shapes():
    with pytest.raises(ValueError):
        arc_from_d("M 0 0 C 1 1, 2 2, 3 3")


def test_document_structure():
    doc = build_document(Canvas(), DEFAULT_PALETTE)
    lines = doc.splitlines()
    assert lines[0] == '<?xml version="1.0" encoding="utf-8"?>'
    assert lines[1] == '<?xml-stylesheet type="text/css" href="./svg.css" ?>'

    root = ET.fromstring(doc.encode("utf-8"))
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.attrib["width"] == "1000"
    assert root.attrib["height"] == "500"
    assert root.attrib["viewBox"] == "0 0 1000 500"
    assert root.attrib["fill"] == "none"
    assert root.attrib["stroke"] == "none"
    assert root.attrib["stroke-width"] == "20"
    assert root.attrib["stroke-linecap"] == "square"
    assert root.attrib["{http://www.w3.org/XML/1998/namespace}space"] == "preserve"

    paths = root.findall("svg:path", NS)
    assert [p.attrib["stroke"] for p in paths] == list(DEFAULT_PALETTE)
    assert [p.attrib["class"] for p in paths] == [f"path-{i}" for i in range(6)]
    for p in paths:
        assert p.attrib["pathLength"] == "100"
        assert p.attrib["stroke-width"] == "20"


def test_document_paths_follow_recurrence():
    root = ET.fromstring(build_document(Canvas(), DEFAULT_PALETTE).encode("utf-8"))
    arcs = [arc_from_d(p.attrib["d"]) for p in root.findall("svg:path", NS)]
    assert arcs[0].start == (10, 500)
    assert arcs[0].end == (990, 500)
    assert arcs[0].apex == (500, 10)
    for i, a in enumerate(arcs):
        assert a.start == (10 + 20 * i, 500)
        assert a.end == (990 - 20 * i, 500)
        assert a.apex == (500, 10 + 20 * i)


def test_document_with_custom_palette_and_stylesheet():
    palette = ["#abc", "#123456"]
    doc = build_document(Canvas(W=200, STROKE=10), palette, stylesheet="css/anim.css")
    assert '<?xml-stylesheet type="text/css" href="css/anim.css" ?>' in doc
    root = ET.fromstring(doc.encode("utf-8"))
    assert [p.attrib["stroke"] for p in root.findall("svg:path", NS)] == palette
    assert doc.count(f'pathLength="{PATH_LENGTH}"') == 2


def test_render_document_needs_one_color_per_path():
    with pytest.raises(ValueError):
        render_document(["M 0 0"], ["#fff", "#000"], Canvas())


def test_build_document_is_deterministic():
    assert build_document(Canvas(), DEFAULT_PALETTE) == build_document(Canvas(), DEFAULT_PALETTE)


def test_write_rainbow_overwrites(tmp_path):
    target = tmp_path / "rainbow-1000x500.svg"
    target.write_text("stale", encoding="utf-8")

    out = write_rainbow(tmp_path, Canvas(), DEFAULT_PALETTE)
    assert out == target
    first = out.read_bytes()
    write_rainbow(tmp_path, Canvas(), DEFAULT_PALETTE)
    assert out.read_bytes() == first
    assert first.startswith(b'<?xml version="1.0" encoding="utf-8"?>')


def test_write_rainbow_creates_out_dir(tmp_path):
    out = write_rainbow(tmp_path / "dist" / "svg", Canvas(W=400), ["#f00"])
    assert out.name == "rainbow-400x200.svg"
    assert out.exists()


def test_write_rainbow_propagates_io_errors(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        write_rainbow(blocker, Canvas(), DEFAULT_PALETTE)


def test_read_bands(tmp_path):
    out = write_rainbow(tmp_path, Canvas(), DEFAULT_PALETTE)
    bands = read_bands(out)
    assert [color for color, _ in bands] == list(DEFAULT_PALETTE)
    assert [arc for _, arc in bands] == build_arcs(Canvas(), 6)


@pytest.mark.parametrize("s,expected", [
    ("#ff7f00", "#ff7f00"),
    ("ff7f00", "#ff7f00"),
    (" #abc ", "#abc"),
    ("#11223344", "#11223344"),
])
def test_parse_color(s, expected):
    assert parse_color(s) == expected


@pytest.mark.parametrize("s", ["", "#12", "#ggg", "red", "#12345", "-ab", "0x1", "+abcde"])
def test_parse_color_rejects(s):
    with pytest.raises(ValueError):
        parse_color(s)


def test_write_rainbow_uses_given_arcs(tmp_path):
    c = Canvas(W=300, STROKE=10)
    arcs = build_arcs(c, 3)
    out = write_rainbow(tmp_path, c, ["#f00", "#0f0", "#00f"], arcs=arcs)
    assert out.read_text(encoding="utf-8") == build_document(c, ["#f00", "#0f0", "#00f"])
    assert [arc for _, arc in read_bands(out)] == arcs


@pytest.mark.parametrize("s,expected", [("20", 20.0), ("0", 0.0), ("-5", -5.0), ("1e3", 1000.0)])
def test_parse_length(s, expected):
    assert parse_length(s) == expected


@pytest.mark.parametrize("s", ["inf", "-inf", "nan", "wide"])
def test_parse_length_rejects(s):
    with pytest.raises(ValueError):
        parse_length(s)
