import io as stdio
import logging

import pytest

from wgraph import io
from wgraph.graph.edge import WeightedEdge

SQUARE_TEXT = """4 5
A B C D
A B 1
B C 2
C D 1
A D 4
A C 3
"""


def test_loads_square():
    g = io.loads(SQUARE_TEXT)
    assert g.vertices() == ["A", "B", "C", "D"]
    assert g.m() == 5
    assert g.cost("D", "A") == 4.0


def test_tokens_may_span_lines_arbitrarily():
    g = io.loads("3 2 x y\nz x y 1.5 y z\n2")
    assert g.weighted_edges() == [WeightedEdge("x", "y", 1.5), WeightedEdge("y", "z", 2.0)]


def test_vertex_type_int():
    g = io.loads("3 2\n1 2 3\n1 2 5\n2 3 1\n", vertex_type=int)
    assert g.vertices() == [1, 2, 3]
    assert g.cost(2, 1) == 5.0
    # Integer ordering, not string ordering
    g = io.loads("2 1\n10 9\n10 9 1\n", vertex_type=int)
    assert g.weighted_edges() == [WeightedEdge(9, 10, 1.0)]


def test_load_from_stream():
    g = io.load(stdio.StringIO(SQUARE_TEXT))
    assert g.n() == 4


def test_rejected_edges_are_skipped_with_warning(caplog):
    caplog.set_level(logging.WARNING, logger="wgraph.io")
    g = io.loads("2 3\nA B\nA B 1\nB A 2\nA Z 3\n")
    assert g.m() == 1
    assert g.cost("A", "B") == 1.0
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "edge 2 of 3" in warnings[0]


@pytest.mark.parametrize(
    "text,match",
    [
        ("", "vertex count"),
        ("x 1", "expected an integer"),
        ("-1 0", "non-negative"),
        ("3 0\nA B", "vertex 3 of 3"),
        ("2 1\nA B\nA B", "edge 1 of 1"),
        ("2 1\nA B\nA B heavy", "Invalid cost 'heavy'"),
    ],
)
def test_malformed_input(text, match):
    with pytest.raises(ValueError, match=match):
        io.loads(text)


def test_dumps_format(square_graph):
    text = io.dumps(square_graph)
    assert text.splitlines() == [
        "4 5",
        "A B C D",
        "A B 1",
        "C D 1",
        "B C 2",
        "A C 3",
        "A D 4",
    ]


def test_roundtrip_preserves_graph(make_graph):
    g = make_graph([3, 1, 2], [(1, 2, 0.1), (3, 2, 2.5), (1, 3, 1e-7)])
    back = io.loads(io.dumps(g), vertex_type=int)
    assert back.vertices() == g.vertices()
    assert back.weighted_edges() == g.weighted_edges()


def test_dump_to_stream(square_graph):
    buf = stdio.StringIO()
    io.dump(square_graph, buf)
    assert buf.getvalue() == io.dumps(square_graph)


def test_format_graph_matches_str(square_graph):
    assert io.format_graph(square_graph) == str(square_graph)


def test_file_roundtrip(tmp_path, square_graph):
    path = tmp_path / "g.txt"
    io.write_file(square_graph, path)
    assert path.read_text() == io.dumps(square_graph)
    back = io.read_file(str(path))
    assert back.weighted_edges() == square_graph.weighted_edges()


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        io.read_file(tmp_path / "missing.txt")
