"""Tests for graphworks.io.text."""
import os
import stat

import pytest

from graphworks.errors import (
    InvalidVertexCount,
    MalformedInputError,
    MissingInputError,
    UnreadableInputError,
)
from graphworks.generate.driver import generate_graphs
from graphworks.graph.edges import WeightedEdge
from graphworks.io.text import (
    format_edge_list,
    format_spanning_tree,
    load_weight_matrix,
    parse_generated_graphs,
    parse_weight_matrix,
    read_graph,
    write_generated_graphs_file,
)
from graphworks.mst.prim import prim_mst


MATRIX_TEXT = """3
0 1 4
1 0 2
4 2 0
"""


# --- weight matrix input ---

def test_parse_weight_matrix():
    n, m = parse_weight_matrix(MATRIX_TEXT)
    assert n == 3
    assert m == [[0, 1, 4], [1, 0, 2], [4, 2, 0]]


def test_parse_weight_matrix_any_whitespace():
    n, m = parse_weight_matrix("2 0 3\t3\n\n0")
    assert n == 2
    assert m == [[0, 3], [3, 0]]


@pytest.mark.parametrize("text", ["", "3\n0 1 4\n1 0", "2\n0 x\n1 0", "-1"])
def test_parse_weight_matrix_malformed(text):
    with pytest.raises(MalformedInputError):
        parse_weight_matrix(text)


def test_load_missing_file(tmp_path):
    path = tmp_path / "input.txt"
    with pytest.raises(MissingInputError) as exc_info:
        load_weight_matrix(str(path))
    assert isinstance(exc_info.value, FileNotFoundError)
    assert isinstance(exc_info.value, UnreadableInputError)


def test_read_graph(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(MATRIX_TEXT)
    n, edges = read_graph(str(path))
    assert n == 3
    assert edges == [WeightedEdge(1, 0, 1), WeightedEdge(2, 0, 4), WeightedEdge(2, 1, 2)]


# --- generated graphs file ---

def test_write_and_parse_generated_graphs(tmp_path):
    path = tmp_path / "generated_graphs.txt"
    total = write_generated_graphs_file(3, str(path))
    assert total == 8
    matrices = parse_generated_graphs(path.read_text())
    assert matrices == [g.matrix for g in generate_graphs(3)]


def test_write_replaces_previous_output(tmp_path):
    path = tmp_path / "generated_graphs.txt"
    path.write_text("stale\n")
    write_generated_graphs_file(3, str(path))
    assert not path.read_text().startswith("stale")


def test_new_output_follows_umask(tmp_path):
    path = tmp_path / "generated_graphs.txt"
    old_mask = os.umask(0o022)
    try:
        write_generated_graphs_file(3, str(path))
    finally:
        os.umask(old_mask)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o644


def test_replaced_output_keeps_its_mode(tmp_path):
    path = tmp_path / "generated_graphs.txt"
    path.write_text("stale\n")
    os.chmod(path, 0o640)
    write_generated_graphs_file(3, str(path))
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o640


def test_invalid_vertex_count_leaves_output_untouched(tmp_path):
    path = tmp_path / "generated_graphs.txt"
    path.write_text("previous run\n")
    with pytest.raises(InvalidVertexCount):
        write_generated_graphs_file(2, str(path))
    assert path.read_text() == "previous run\n"
    assert os.listdir(tmp_path) == ["generated_graphs.txt"]


def test_parse_generated_graphs_malformed():
    with pytest.raises(MalformedInputError):
        parse_generated_graphs("3\n010\n10\n000\n\n")
    with pytest.raises(MalformedInputError):
        parse_generated_graphs("two\n")


# --- presentation ---

def test_format_edge_list():
    lines = format_edge_list([WeightedEdge(1, 0, 1), WeightedEdge(2, 1, 2)])
    assert lines == ["   Edge 0: <1, 0> weight[1]", "   Edge 1: <2, 1> weight[2]"]


def test_format_spanning_tree():
    edges = [WeightedEdge(1, 0, 1), WeightedEdge(2, 0, 4), WeightedEdge(2, 1, 2)]
    lines = format_spanning_tree(prim_mst(edges, 3))
    assert lines == [
        "   Edge 0: <1, 0> weight[1]",
        "   Edge 1: <2, 1> weight[2]",
        "",
        "Total weight of T:",
        "   3",
    ]
