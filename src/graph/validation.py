"""Structural validation of a generated graph against its model.

Checks the invariants every sampled graph must satisfy: exact edge count,
vertex ids within 1..n, the self loop policy, and (on undirected graphs)
the absence of an edge stored in both orientations.
"""

import logging

from src.graph.types import Graph

log = logging.getLogger(__name__)


def validate_graph(graph: Graph) -> list[str]:
    """Validate a generated graph against its model.

    Checks (cheapest first):
    1. Edge count equals the model's target edge count
    2. Every vertex id lies within [1, n]
    3. No self loops unless the model allows them
    4. No edge stored in both orientations on undirected graphs

    Args:
        graph: Graph produced by ErGenerator.generate().

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []
    model = graph.model

    # 1. Exact edge count
    target = model.target_edge_count()
    if graph.nb_edges != target:
        errors.append(
            f"Edge count {graph.nb_edges} != target edge count {target}"
        )

    # 2. Vertex range
    out_of_range = [
        e for e in graph.edges
        if not (1 <= e.src <= graph.n and 1 <= e.dst <= graph.n)
    ]
    if out_of_range:
        errors.append(
            f"{len(out_of_range)} edges reference vertices outside "
            f"[1, {graph.n}], first: {out_of_range[0]}"
        )
        # the adjacency checks below cannot index these edges
        return errors

    pattern = graph.to_adjacency(weighted=False)

    # 3. Self loops
    n_loops = int(pattern.diagonal().sum())
    if n_loops and not model.self_loops:
        errors.append(f"Self-loops detected: {n_loops} on the diagonal")

    # 4. Both orientations of one undirected edge
    if not model.directed:
        both = pattern.multiply(pattern.T).tocoo()
        n_twins = int((both.row != both.col).sum()) // 2
        if n_twins:
            errors.append(
                f"Undirected graph stores {n_twins} edges in both orientations"
            )

    if errors:
        log.debug("Graph validation failed: %s", "; ".join(errors))

    return errors
