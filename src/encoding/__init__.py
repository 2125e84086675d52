"""Text encodings of generated graphs: DIMACS, wcnf, and GraphViz dot."""

from src.encoding.dimacs import (
    clique_to_dimacs,
    format_probability,
    graph_to_dimacs,
    literal,
    max2sat_to_wcnf,
)
from src.encoding.dot import graph_to_dot, max2sat_to_dot
from src.encoding.views import (
    MODES,
    OUTPUTS,
    Generatable,
    Max2SatView,
    MaxCliqueView,
    PlainGraph,
    render,
    wrap,
)

__all__ = [
    "Generatable",
    "MODES",
    "Max2SatView",
    "MaxCliqueView",
    "OUTPUTS",
    "PlainGraph",
    "clique_to_dimacs",
    "format_probability",
    "graph_to_dimacs",
    "graph_to_dot",
    "literal",
    "max2sat_to_dot",
    "max2sat_to_wcnf",
    "render",
    "wrap",
]
