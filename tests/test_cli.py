"""Tests for the graphworks command line."""
import argparse
import io

import pytest

import graphworks
from graphworks.cli import cmd_menu, main
from graphworks.io.text import parse_generated_graphs


MATRIX_TEXT = """4
0 1 4 0
1 0 2 3
4 2 0 1
0 3 1 0
"""


def test_combinations_command(capsys):
    assert main(["combinations", "5", "1"]) == 0
    assert capsys.readouterr().out == "4\n3\n2\n1\n0\n"


def test_combinations_invalid(capsys):
    assert main(["combinations", "3", "4"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_mst_command(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(MATRIX_TEXT)
    assert main(["mst", "--input", str(path)]) == 0
    out = capsys.readouterr().out
    assert "The spanning tree T of G:" in out
    assert out.rstrip().endswith("Total weight of T:\n   4")
    tree_block = out.split("The spanning tree T of G:\n", 1)[1]
    assert tree_block.splitlines() == [
        "   Edge 0: <1, 0> weight[1]",
        "   Edge 1: <2, 1> weight[2]",
        "   Edge 2: <3, 2> weight[1]",
        "",
        "Total weight of T:",
        "   4",
    ]


def test_mst_missing_input(tmp_path, capsys):
    assert main(["mst", "--input", str(tmp_path / "absent.txt")]) == 1
    assert "absent" in capsys.readouterr().err


def test_mst_disconnected(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("4\n0 1 0 0\n1 0 0 0\n0 0 0 2\n0 0 2 0\n")
    assert main(["mst", "--input", str(path)]) == 1
    assert "disconnected" in capsys.readouterr().err


def test_generate_command(tmp_path, capsys):
    path = tmp_path / "out.txt"
    assert main(["generate", "3", "--output", str(path)]) == 0
    assert len(parse_generated_graphs(path.read_text())) == 8
    err = capsys.readouterr().err
    assert "[v=3] 3 edge combinations complete (1 graphs)" in err


def test_generate_invalid_count(tmp_path):
    path = tmp_path / "out.txt"
    assert main(["generate", "2", "--output", str(path), "--quiet"]) == 1
    assert not path.exists()


def test_menu_generation(tmp_path, capsys):
    path = tmp_path / "out.txt"
    args = argparse.Namespace(input="unused.txt", output=str(path), quiet=True)
    # invalid choice, then generation, then two rejected vertex counts
    stdin = io.StringIO("x\n2\n1\nabc\n3\n")
    assert cmd_menu(args, stdin=stdin) == 0
    assert len(parse_generated_graphs(path.read_text())) == 8
    out = capsys.readouterr().out
    assert out.count(" 1: Spanning Tree") == 2
    assert out.count("up to how many vertices?") == 3


def test_menu_spanning_tree(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(MATRIX_TEXT)
    args = argparse.Namespace(input=str(path), output="unused.txt", quiet=True)
    assert cmd_menu(args, stdin=io.StringIO("1\n")) == 0
    assert "Total weight of T:" in capsys.readouterr().out


def test_menu_end_of_input():
    args = argparse.Namespace(input="unused.txt", output="unused.txt", quiet=True)
    assert cmd_menu(args, stdin=io.StringIO("")) == 1


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f"graphworks {graphworks.__version__}"
