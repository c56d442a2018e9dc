from __future__ import annotations

import os
import shutil
import tempfile
from typing import List, Optional, Sequence, Tuple

from graphworks.errors import MalformedInputError, MissingInputError
from graphworks.generate.driver import ProgressFn, write_generated_graphs
from graphworks.generate.materialize import Matrix
from graphworks.graph.edges import WeightedEdge, edges_from_matrix
from graphworks.mst.prim import SpanningTree


GRAPHWORKS_INPUT = os.environ.get("GRAPHWORKS_INPUT", "input.txt")
GRAPHWORKS_OUTPUT = os.environ.get("GRAPHWORKS_OUTPUT", "generated_graphs.txt")


# ---------------------------------------------------------------------------
# Weight matrix input
# ---------------------------------------------------------------------------

def parse_weight_matrix(text: str) -> Tuple[int, Matrix]:
    """
    Parse "V w_00 w_01 ... w_(V-1)(V-1)" (any whitespace) into (V, matrix).

    Values after the first V*V entries are ignored.
    """
    tokens = text.split()
    if not tokens:
        raise MalformedInputError("weight matrix input is empty")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise MalformedInputError(f"weight matrix input has a non-integer entry: {exc}") from None

    n = values[0]
    if n < 0:
        raise MalformedInputError(f"vertex count must be >= 0, got {n}")
    cells = values[1:]
    if len(cells) < n * n:
        raise MalformedInputError(f"expected {n * n} matrix entries for {n} vertices, found {len(cells)}")

    matrix = [cells[r * n:(r + 1) * n] for r in range(n)]
    return n, matrix


def load_weight_matrix(path: str = GRAPHWORKS_INPUT) -> Tuple[int, Matrix]:
    """Read and parse a weight matrix file."""
    try:
        with open(path, encoding="ascii") as f:
            text = f.read()
    except FileNotFoundError:
        raise MissingInputError(f"{path} is absent") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"cannot read {path}: {exc}") from None
    return parse_weight_matrix(text)


def read_graph(path: str = GRAPHWORKS_INPUT) -> Tuple[int, List[WeightedEdge]]:
    """Return (vertex_count, edge list) for a weight matrix file."""
    n, matrix = load_weight_matrix(path)
    return n, edges_from_matrix(matrix)


# ---------------------------------------------------------------------------
# Generated graphs
# ---------------------------------------------------------------------------

def parse_generated_graphs(text: str) -> List[Matrix]:
    """Read back blocks written by format_generated_graph."""
    out: List[Matrix] = []
    lines = [ln.strip() for ln in text.splitlines()]
    pos = 0
    while pos < len(lines):
        if not lines[pos]:
            pos += 1
            continue
        try:
            n = int(lines[pos])
        except ValueError:
            raise MalformedInputError(f"line {pos + 1}: expected a vertex count, got {lines[pos]!r}") from None
        rows = lines[pos + 1:pos + 1 + n]
        if len(rows) != n or any(len(r) != n or set(r) - {"0", "1"} for r in rows):
            raise MalformedInputError(f"line {pos + 1}: malformed {n}x{n} adjacency block")
        out.append([[int(c) for c in r] for r in rows])
        pos += 1 + n
    return out


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _match_permissions(tmp_path: str, path: str) -> None:
    """Give *tmp_path* the mode of *path*, or the umask default for a new file."""
    if os.path.exists(path):
        shutil.copymode(path, tmp_path)
    else:
        os.chmod(tmp_path, 0o666 & ~_current_umask())


def write_generated_graphs_file(
    max_vertices: int,
    path: str = GRAPHWORKS_OUTPUT,
    *,
    progress: Optional[ProgressFn] = None,
) -> int:
    """
    Write every generated graph on 2..max_vertices vertices to *path*.

    Output goes to a temporary file in the same directory which replaces
    *path* only once generation has finished; on error *path* is untouched.
    The result keeps the mode of the file it replaces, or gets the umask
    default when *path* is new.
    Returns the number of graphs written.
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".graphworks-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="ascii", newline="\n") as f:
            count = write_generated_graphs(f, max_vertices, progress=progress)
        _match_permissions(tmp_path, path)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    return count


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

def format_edge_list(edges: Sequence[WeightedEdge]) -> List[str]:
    return [f"   Edge {i}: {e.format()}" for i, e in enumerate(edges)]


def format_spanning_tree(tree: SpanningTree) -> List[str]:
    lines = format_edge_list(tree.edges)
    lines.append("")
    lines.append("Total weight of T:")
    lines.append(f"   {tree.total_weight}")
    return lines
