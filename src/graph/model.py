"""Erdos-Renyi G(n, p) model configuration and edge combinatorics.

The model fixes the exact number of edges to sample up front
(round(p * possible_edges)) instead of flipping one coin per candidate
edge. Sampling then draws that many distinct edges without replacement.
"""

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from src.graph.sampler import ErGenerator

# numpy's Generator.integers draws int64 values
MAX_SAMPLING_SPACE = int(np.iinfo(np.int64).max)


class InstanceTooLargeError(ValueError):
    """Raised when n * n does not fit the sampler's integer range."""


@dataclass(frozen=True, slots=True)
class ErModel:
    """Immutable G(n, p) configuration.

    Builder methods return a new model; an instance is never mutated.
    Invalid combinations are rejected at construction so sampling can
    never start on an instance without a single valid edge.
    """

    n: int  # number of vertices
    p: float  # likelihood of any candidate edge to be picked
    directed: bool = False
    self_loops: bool = False

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"n must be >= 1, got {self.n}")
        if not self.self_loops and self.n < 2:
            raise ValueError(
                f"n must be >= 2 when self loops are not allowed, got {self.n}"
            )
        if not 0.0 <= self.p <= 1.0:
            raise ValueError(f"p must lie in [0, 1], got {self.p}")
        if self.sampling_space() > MAX_SAMPLING_SPACE:
            raise InstanceTooLargeError(
                f"instance too large: n * n = {self.sampling_space()} "
                f"exceeds {MAX_SAMPLING_SPACE}"
            )

    def as_directed(self) -> "ErModel":
        return replace(self, directed=True)

    def with_self_loops(self) -> "ErModel":
        return replace(self, self_loops=True)

    def generator(
        self, seed: int | None = None, rng: np.random.Generator | None = None
    ) -> "ErGenerator":
        """Return a new sampler for this model."""
        from src.graph.sampler import ErGenerator

        return ErGenerator(self, seed=seed, rng=rng)

    def sampling_space(self) -> int:
        """Size of the n x n grid candidate edges are drawn from."""
        return self.n * self.n

    def possible_edge_count(self) -> int:
        """Number of edges the graph would have if it were a full mesh.

        For undirected graphs with self loops and an odd n, the halving
        truncates (n * n is odd). That count is kept as is.
        """
        sources = self.n
        dests = self.n if self.self_loops else self.n - 1

        if self.directed:
            return sources * dests
        return (sources * dests) // 2

    def target_edge_count(self) -> int:
        """Exact number of distinct edges a generated graph holds.

        p * possible_edge_count() rounded half away from zero. The result is
        clamped to the possible count so float error on huge instances never
        requests more edges than exist.
        """
        possible = self.possible_edge_count()
        x = self.p * possible
        # floor(x + 0.5) would round values just below .5 up in float
        whole = math.floor(x)
        target = whole + (1 if x - whole >= 0.5 else 0)
        return min(int(target), possible)
