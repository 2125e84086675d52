"""Graph data structures produced by the Erdos-Renyi sampler."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
import scipy.sparse

from src.graph.model import ErModel

log = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1


@dataclass(frozen=True, slots=True)
class Edge:
    """Connection between two 1-based vertex ids.

    On undirected graphs Edge(a, b) and Edge(b, a) denote the same edge;
    the graph stores whichever orientation was drawn first.
    """

    src: int
    dst: int

    def is_self_loop(self) -> bool:
        return self.src == self.dst

    def reversed(self) -> "Edge":
        return Edge(self.dst, self.src)


@dataclass
class Graph:
    """A generated graph: vertex count plus an edge -> weight mapping.

    Vertices are numbered 1..n. The only mutation a graph undergoes after
    generation is resample_weights().
    """

    model: ErModel
    n: int
    edges: dict[Edge, int] = field(default_factory=dict)

    @property
    def nb_edges(self) -> int:
        return len(self.edges)

    def resample_weights(
        self,
        candidates: Sequence[int],
        rng: np.random.Generator | None = None,
    ) -> None:
        """Replace every edge weight by a uniform pick from candidates.

        Each edge draws independently (with replacement). The edge set is
        left unchanged.

        Args:
            candidates: Weight values to pick from.
            rng: numpy random Generator; a fresh unseeded one if omitted.

        Raises:
            ValueError: If candidates is empty.
        """
        if len(candidates) == 0:
            raise ValueError("weight candidates must not be empty")
        if rng is None:
            rng = np.random.default_rng()

        picks = rng.integers(0, len(candidates), size=len(self.edges))
        for edge, idx in zip(self.edges, picks):
            self.edges[edge] = int(candidates[int(idx)])

        log.debug(
            "Resampled %d edge weights from %d candidates",
            len(self.edges),
            len(candidates),
        )

    def to_adjacency(self, weighted: bool = True) -> scipy.sparse.csr_matrix:
        """n x n adjacency with 0-based indices.

        Holds one entry per stored edge in its stored orientation; undirected
        graphs are not symmetrized.

        Args:
            weighted: Use edge weights as data. When False every entry is 1,
                so edges weighted 0 are still stored.
        """
        if not self.edges:
            return scipy.sparse.csr_matrix((self.n, self.n), dtype=np.int64)

        rows = np.fromiter((e.src - 1 for e in self.edges), dtype=np.int64)
        cols = np.fromiter((e.dst - 1 for e in self.edges), dtype=np.int64)
        if weighted:
            data = np.fromiter(self.edges.values(), dtype=np.int64)
        else:
            data = np.ones(len(rows), dtype=np.int64)
        return scipy.sparse.csr_matrix(
            (data, (rows, cols)), shape=(self.n, self.n)
        )
