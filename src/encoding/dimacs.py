"""DIMACS-family text encoders for generated graphs.

Three grammars share one edge set:
- weighted graph: "<n> <m>" then "<src> <dst> <weight>" lines
- max-clique (unweighted): "p edge <n> <m>" then "e <src> <dst>" lines
- weighted max-2-SAT: "p wcnf <vars> <clauses>" then
  "<weight> <lit1> <lit2> 0" lines

Comment lines start with "c ". Lines are joined with newlines, without a
trailing newline. Edge lines follow the graph's edge insertion order,
which carries no meaning.
"""

import numpy as np

from src.graph.types import Graph

RULE = "c -------------------------------------------------------------"
SIGNATURE = "c Generated w/ graph_gen"


def format_probability(p: float) -> str:
    """Shortest round-trip positional text for p: 1, 0.5, 0.00001."""
    return np.format_float_positional(float(p), trim="-")


def _loops_note(graph: Graph) -> str:
    loops = "" if graph.model.self_loops else " NOT"
    return f"c it was generated to{loops} allow self loops"


def _graph_header(graph: Graph) -> list[str]:
    model = graph.model
    gtype = "digraph" if model.directed else "graph"
    return [
        f"c Pseudo-random Erdos-Renyi {gtype} "
        f"G({model.n}, {format_probability(model.p)})",
        _loops_note(graph),
        f"c This graph has {graph.n} vertices and {graph.nb_edges} edges",
    ]


def literal(vertex: int, n: int) -> int:
    """Map a vertex id of a 2-SAT graph on n vertices to a literal.

    Ids in the upper half (vertex > n // 2) are the negation of variable
    vertex // 2; ids in the lower half are the positive literal itself.
    """
    if vertex > n // 2:
        return -(vertex // 2)
    return vertex


def graph_to_dimacs(graph: Graph) -> str:
    """Weighted edge list: problem line "<n> <m>"."""
    out = _graph_header(graph)
    out.append(RULE)
    out.append(SIGNATURE)
    out.append(f"{graph.n} {graph.nb_edges}")

    for edge, w in graph.edges.items():
        out.append(f"{edge.src} {edge.dst} {w}")

    return "\n".join(out)


def clique_to_dimacs(graph: Graph) -> str:
    """Unweighted DIMACS edge format for max-clique solvers."""
    out = _graph_header(graph)
    out.append("c The edges of this graph are UNWEIGHTED")
    out.append(RULE)
    out.append(SIGNATURE)
    out.append(f"p edge {graph.n} {graph.nb_edges}")

    for edge in graph.edges:
        out.append(f"e {edge.src} {edge.dst}")

    return "\n".join(out)


def max2sat_to_wcnf(graph: Graph) -> str:
    """Weighted 2-SAT clauses over graph.n // 2 variables, one per edge."""
    model = graph.model
    n_vars = graph.n // 2
    out = [
        f"c Pseudo-random max2sat instance generated w/ Erdos-Renyi "
        f"G({model.n}, {format_probability(model.p)}) model",
        _loops_note(graph),
        f"c This instance has {n_vars} variables and "
        f"{graph.nb_edges} clauses",
        RULE,
        "c Each clause reads <weight> <source> <dest> 0",
        RULE,
        SIGNATURE,
        f"p wcnf {n_vars} {graph.nb_edges}",
    ]

    for edge, w in graph.edges.items():
        out.append(
            f"{w} {literal(edge.src, graph.n)} {literal(edge.dst, graph.n)} 0"
        )

    return "\n".join(out)
