"""Command line entry point.

Subcommands
-----------
mst            Minimum spanning tree of the weight matrix in an input file.
generate       Write every graph on 2..N vertices to an output file.
combinations   List the k-combinations of n items in reverse colex order.
menu           Interactive menu (the default when no subcommand is given).

Usage
-----
    graphworks mst --input input.txt [--draw mst.png]
    graphworks generate 4 [--output generated_graphs.txt] [--quiet]
    graphworks combinations 5 2
    graphworks
"""
from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, TextIO

from graphworks import __version__
from graphworks.combinatorics.colex import reverse_colex_combinations
from graphworks.errors import GraphWorksError
from graphworks.io.text import (
    GRAPHWORKS_INPUT,
    GRAPHWORKS_OUTPUT,
    format_edge_list,
    format_spanning_tree,
    read_graph,
    write_generated_graphs_file,
)
from graphworks.mst.prim import prim_mst


def _status(msg: str) -> None:
    print(msg, file=sys.stderr)


def _progress(vertex_count: int, edge_count: int, n: int) -> None:
    _status(f"[v={vertex_count}] {edge_count} edge combinations complete ({n} graphs)")


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def cmd_mst(args: argparse.Namespace) -> int:
    vertex_count, edges = read_graph(args.input)

    print("Weighted edges will be shown as follows,")
    print("   index: <unordered vertices> weight[w]")
    print()
    print("For the given graph, G:")
    for line in format_edge_list(edges):
        print(line)
    print()

    tree = prim_mst(edges, vertex_count)

    print("The spanning tree T of G:")
    for line in format_spanning_tree(tree):
        print(line)

    if args.draw:
        from graphworks.viz.draw import draw_spanning_tree

        draw_spanning_tree(edges, tree, vertex_count, save_path=args.draw)
        _status(f"Saved drawing to {args.draw}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    progress = None if args.quiet else _progress
    total = write_generated_graphs_file(args.max_vertices, args.output, progress=progress)
    if not args.quiet:
        _status(f"Wrote {total} graphs on 2..{args.max_vertices} vertices to {args.output}")
    return 0


def cmd_combinations(args: argparse.Namespace) -> int:
    for comb in reverse_colex_combinations(args.n, args.k):
        print(" ".join(str(x) for x in comb))
    return 0


def _prompt(prompt: str, stdin: TextIO) -> str:
    print(prompt, end="", flush=True)
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.strip()


def cmd_menu(args: argparse.Namespace, stdin: Optional[TextIO] = None) -> int:
    """Interactive menu: 1 runs the spanning tree, 2 asks for N and generates."""
    stdin = stdin if stdin is not None else sys.stdin

    print()
    print("--------------------------------------------")
    print(f" Graph Works                  version {__version__}")
    print("--------------------------------------------")
    print()

    try:
        choice = ""
        while choice not in ("1", "2"):
            print(" 1: Spanning Tree")
            print(" 2: Graph Generation")
            choice = _prompt(" > ", stdin)
        print()

        if choice == "1":
            return cmd_mst(argparse.Namespace(input=args.input, draw=None))

        max_vertices = 0
        while max_vertices <= 2:
            print(" Generate all graphs up to how many vertices?")
            answer = _prompt(" > ", stdin)
            try:
                max_vertices = int(answer)
            except ValueError:
                max_vertices = 0
    except EOFError:
        print()
        return 1

    return cmd_generate(argparse.Namespace(max_vertices=max_vertices, output=args.output, quiet=args.quiet))


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphworks",
        description="Prim minimum spanning trees and exhaustive simple-graph generation.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("mst", help="minimum spanning tree of a weight matrix file")
    p.add_argument("--input", default=GRAPHWORKS_INPUT, help="weight matrix file (default: %(default)s)")
    p.add_argument("--draw", metavar="PNG", default=None, help="save a drawing of G with T highlighted")

    p = sub.add_parser("generate", help="write every graph on 2..N vertices")
    p.add_argument("max_vertices", type=int, help="maximum vertex count N (> 2)")
    p.add_argument("--output", default=GRAPHWORKS_OUTPUT, help="output file (default: %(default)s)")
    p.add_argument("--quiet", action="store_true", help="no progress lines on stderr")

    p = sub.add_parser("combinations", help="list k-combinations of n items in reverse colex order")
    p.add_argument("n", type=int)
    p.add_argument("k", type=int)

    p = sub.add_parser("menu", help="interactive menu")
    p.add_argument("--input", default=GRAPHWORKS_INPUT)
    p.add_argument("--output", default=GRAPHWORKS_OUTPUT)
    p.add_argument("--quiet", action="store_true")

    return parser


COMMANDS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "mst": cmd_mst,
    "generate": cmd_generate,
    "combinations": cmd_combinations,
    "menu": cmd_menu,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["menu"])

    try:
        return COMMANDS[args.command](args)
    except GraphWorksError as exc:
        _status(f"error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
