from __future__ import annotations


class GraphWorksError(Exception):
    """Base class for every error raised by graphworks."""


class InvalidCombinationParameters(GraphWorksError, ValueError):
    """Raised when a (n, k) pair does not describe any k-combination of n items."""

    def __init__(self, n: object, k: object) -> None:
        super().__init__(f"invalid combination parameters: need 0 <= k <= n, got n={n!r}, k={k!r}")
        self.n = n
        self.k = k


class InvalidVertexCount(GraphWorksError, ValueError):
    """Raised when graph generation is requested for a maximum vertex count <= 2."""

    def __init__(self, max_vertices: object) -> None:
        super().__init__(f"maximum vertex count must be an integer > 2, got {max_vertices!r}")
        self.max_vertices = max_vertices


class DisconnectedGraphError(GraphWorksError, RuntimeError):
    """
    Raised by Prim's algorithm when no edge leaves the saturated vertex set
    before the tree spans every vertex.
    """

    def __init__(self, vertex_count: int, tree_size: int, saturated: tuple[int, ...]) -> None:
        super().__init__(
            f"graph is disconnected: spanning tree stopped at {tree_size} of "
            f"{vertex_count - 1} edges (reached vertices {list(saturated)})"
        )
        self.vertex_count = vertex_count
        self.tree_size = tree_size
        self.saturated = saturated


class UnreadableInputError(GraphWorksError):
    """Input matrix source is absent or cannot be parsed."""


class MissingInputError(UnreadableInputError, FileNotFoundError):
    pass


class MalformedInputError(UnreadableInputError, ValueError):
    pass
