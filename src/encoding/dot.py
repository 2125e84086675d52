"""GraphViz dot renderings mirroring the DIMACS encoders."""

from src.encoding.dimacs import literal
from src.graph.types import Graph


def graph_to_dot(graph: Graph, weighted: bool = True) -> str:
    """Render a graph as a dot block.

    Args:
        graph: Graph to render.
        weighted: Label each edge with its weight. Max-clique instances
            drop weights, as in their DIMACS form.

    Returns:
        "graph g { ... }" or "digraph g { ... }" text.
    """
    directed = graph.model.directed
    gtype = "digraph" if directed else "graph"
    connector = "->" if directed else "--"

    out = [f"{gtype} g {{"]
    for v in range(1, graph.n + 1):
        out.append(f"  {v};")
    for edge, w in graph.edges.items():
        label = f" [label={w}]" if weighted else ""
        out.append(f"  {edge.src} {connector} {edge.dst}{label};")
    out.append("}")

    return "\n".join(out)


def max2sat_to_dot(graph: Graph) -> str:
    """Render 2-SAT clauses as literal -- literal edges labeled by weight."""
    out = ["graph wcnf {"]
    for v in range(1, graph.n // 2 + 1):
        out.append(f"  {v};")
    for edge, w in graph.edges.items():
        out.append(
            f"  {literal(edge.src, graph.n)} -- {literal(edge.dst, graph.n)} "
            f"[label={w}];"
        )
    out.append("}")

    return "\n".join(out)
