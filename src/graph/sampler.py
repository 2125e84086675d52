"""Rejection sampler drawing Erdos-Renyi graphs edge by edge.

Candidates are drawn uniformly from the full n x n grid whatever the
directedness or self loop policy, and rejected when they break that policy
or duplicate an accepted edge. Shrinking the draw range instead would bias
the distribution when self loops are disallowed.

Expected running time grows as target_edge_count() approaches
possible_edge_count(): late draws mostly hit edges that are already taken.
"""

import logging

import numpy as np

from src.graph.model import ErModel
from src.graph.types import DEFAULT_WEIGHT, Edge, Graph

log = logging.getLogger(__name__)

MIN_BATCH = 64
MAX_BATCH = 1 << 16


class ErGenerator:
    """Stateful G(n, p) sampler.

    Holds the model and an RNG stream. Every call to generate() returns a
    fresh, independent graph; the stream is never reset in between, so the
    sampler also works as an unbounded iterator of graphs.
    """

    def __init__(
        self,
        model: ErModel,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.model = model
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._space = model.sampling_space()

    def __iter__(self) -> "ErGenerator":
        return self

    def __next__(self) -> Graph:
        return self.generate()

    def _to_edge(self, number: int) -> Edge:
        n = self.model.n
        # Output formats number vertices from 1
        return Edge(number // n + 1, number % n + 1)

    def next_edge(self) -> Edge:
        """Draw one candidate edge uniformly from the n x n grid."""
        return self._to_edge(int(self.rng.integers(0, self._space)))

    def _accepts(self, edge: Edge, edges: dict[Edge, int]) -> bool:
        if edge.is_self_loop() and not self.model.self_loops:
            return False
        if edge in edges:
            return False
        if not self.model.directed and edge.reversed() in edges:
            return False
        return True

    def generate(self) -> Graph:
        """Sample one graph holding exactly target_edge_count() edges.

        Candidates are drawn in vectorized batches and consumed in draw
        order, so accepted edges are distributed exactly as with one draw
        per candidate. Unused draws at the end of a batch are discarded.

        Returns:
            Graph with every accepted edge weighted DEFAULT_WEIGHT.
        """
        model = self.model
        nb_edges = model.target_edge_count()
        edges: dict[Edge, int] = {}
        draws = 0

        log.info(
            "Sampling G(%d, %s) %s%s: %d of %d possible edges",
            model.n,
            model.p,
            "digraph" if model.directed else "graph",
            " with self loops" if model.self_loops else "",
            nb_edges,
            model.possible_edge_count(),
        )

        while len(edges) < nb_edges:
            remaining = nb_edges - len(edges)
            batch = min(max(2 * remaining, MIN_BATCH), MAX_BATCH)
            for number in self.rng.integers(0, self._space, size=batch):
                draws += 1
                edge = self._to_edge(int(number))
                if not self._accepts(edge, edges):
                    continue
                edges[edge] = DEFAULT_WEIGHT
                if len(edges) == nb_edges:
                    break

        log.debug(
            "Accepted %d edges out of %d draws (%d rejected)",
            len(edges),
            draws,
            draws - len(edges),
        )

        return Graph(model=model, n=model.n, edges=edges)
