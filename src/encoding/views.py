"""Generatable instance kinds sharing the to_dimacs/to_dot capability.

Each view wraps a generated Graph without copying or mutating it. The set
is closed: wrap() maps a mode name to its view class, and adding an output
target means one new view class plus one MODE_VIEWS entry. The sampler is
never involved.
"""

import logging
from dataclasses import dataclass
from typing import Union

from src.encoding.dimacs import (
    clique_to_dimacs,
    graph_to_dimacs,
    literal,
    max2sat_to_wcnf,
)
from src.encoding.dot import graph_to_dot, max2sat_to_dot
from src.graph.types import Graph

log = logging.getLogger(__name__)

GRAPH = "graph"
MAX_CLIQUE = "max-clique"
MAX2SAT = "max2sat"
MODES: tuple[str, ...] = (GRAPH, MAX_CLIQUE, MAX2SAT)

DIMACS = "dimacs"
GRAPHVIZ = "graphviz"
# "dot" is accepted as an alias of "graphviz"
OUTPUTS: tuple[str, ...] = (DIMACS, GRAPHVIZ, "dot")


@dataclass(frozen=True, slots=True)
class PlainGraph:
    """Weighted graph rendered as is."""

    graph: Graph

    def to_dimacs(self) -> str:
        return graph_to_dimacs(self.graph)

    def to_dot(self) -> str:
        return graph_to_dot(self.graph)


@dataclass(frozen=True, slots=True)
class MaxCliqueView:
    """Unweighted edge list for "is there a clique of size k" instances."""

    graph: Graph

    def to_dimacs(self) -> str:
        return clique_to_dimacs(self.graph)

    def to_dot(self) -> str:
        return graph_to_dot(self.graph, weighted=False)


@dataclass(frozen=True, slots=True)
class Max2SatView:
    """Graph on 2 * vars vertices read as weighted 2-SAT clauses.

    Each edge is one clause; its weight is the clause weight.
    """

    graph: Graph

    @property
    def n_vars(self) -> int:
        return self.graph.n // 2

    def literal(self, vertex: int) -> int:
        return literal(vertex, self.graph.n)

    def to_dimacs(self) -> str:
        return max2sat_to_wcnf(self.graph)

    def to_dot(self) -> str:
        return max2sat_to_dot(self.graph)


Generatable = Union[PlainGraph, MaxCliqueView, Max2SatView]

MODE_VIEWS: dict[str, type] = {
    GRAPH: PlainGraph,
    MAX_CLIQUE: MaxCliqueView,
    MAX2SAT: Max2SatView,
}


def wrap(graph: Graph, mode: str = GRAPH) -> Generatable:
    """Wrap a generated graph in the view matching mode.

    Raises:
        ValueError: If mode is not one of MODES.
    """
    try:
        view = MODE_VIEWS[mode]
    except KeyError:
        raise ValueError(
            f"Unknown mode {mode!r}, expected one of {MODES}"
        ) from None
    log.debug("Wrapping %d-vertex graph as %s", graph.n, view.__name__)
    return view(graph)


def render(instance: Generatable, output: str = DIMACS) -> str:
    """Render an instance in the named output language.

    Args:
        instance: Any Generatable view.
        output: "dimacs", or "graphviz"/"dot" (case-insensitive).

    Raises:
        ValueError: If output is not one of OUTPUTS.
    """
    key = output.lower()
    if key == DIMACS:
        return instance.to_dimacs()
    if key in (GRAPHVIZ, "dot"):
        return instance.to_dot()
    raise ValueError(f"Unknown output {output!r}, expected one of {OUTPUTS}")
