"""Tests for the Generatable views and the mode/output dispatcher."""

import pytest

from src.encoding.dimacs import clique_to_dimacs, graph_to_dimacs, max2sat_to_wcnf
from src.encoding.dot import graph_to_dot, max2sat_to_dot
from src.encoding.views import (
    MODES,
    Max2SatView,
    MaxCliqueView,
    PlainGraph,
    render,
    wrap,
)
from src.graph.model import ErModel
from src.graph.sampler import ErGenerator
from src.graph.types import Graph


@pytest.fixture
def graph() -> Graph:
    g = ErGenerator(ErModel(8, 0.5), seed=17).generate()
    g.resample_weights([2, 4, 6])
    return g


class TestWrap:
    """wrap() selects the view for each mode without copying the graph."""

    @pytest.mark.parametrize(
        "mode, view",
        [("graph", PlainGraph), ("max-clique", MaxCliqueView), ("max2sat", Max2SatView)],
    )
    def test_mode_to_view(self, graph: Graph, mode: str, view: type) -> None:
        instance = wrap(graph, mode)
        assert isinstance(instance, view)
        assert instance.graph is graph

    def test_default_mode_is_plain(self, graph: Graph) -> None:
        assert isinstance(wrap(graph), PlainGraph)

    def test_unknown_mode(self, graph: Graph) -> None:
        with pytest.raises(ValueError, match="Unknown mode"):
            wrap(graph, "vertex-cover")

    def test_modes_closed_set(self) -> None:
        assert MODES == ("graph", "max-clique", "max2sat")

    def test_views_do_not_mutate_graph(self, graph: Graph) -> None:
        before = dict(graph.edges)
        for mode in MODES:
            instance = wrap(graph, mode)
            instance.to_dimacs()
            instance.to_dot()
        assert graph.edges == before


class TestViewsForward:
    """Each view forwards to its encoder pair."""

    def test_plain(self, graph: Graph) -> None:
        view = PlainGraph(graph)
        assert view.to_dimacs() == graph_to_dimacs(graph)
        assert view.to_dot() == graph_to_dot(graph)

    def test_clique(self, graph: Graph) -> None:
        view = MaxCliqueView(graph)
        assert view.to_dimacs() == clique_to_dimacs(graph)
        assert view.to_dot() == graph_to_dot(graph, weighted=False)
        assert "label" not in view.to_dot()

    def test_max2sat(self, graph: Graph) -> None:
        view = Max2SatView(graph)
        assert view.to_dimacs() == max2sat_to_wcnf(graph)
        assert view.to_dot() == max2sat_to_dot(graph)
        assert view.n_vars == 4

    def test_max2sat_literal(self) -> None:
        g = ErGenerator(ErModel(4, 0.5), seed=0).generate()
        view = Max2SatView(g)
        assert [view.literal(v) for v in (1, 2, 3, 4)] == [1, 2, -1, -2]


class TestRender:
    """render() picks the output language."""

    def test_dimacs(self, graph: Graph) -> None:
        instance = wrap(graph, "max-clique")
        assert render(instance, "dimacs") == instance.to_dimacs()

    @pytest.mark.parametrize("output", ["graphviz", "dot", "GraphViz", "DOT"])
    def test_dot_aliases(self, graph: Graph, output: str) -> None:
        instance = wrap(graph, "max2sat")
        assert render(instance, output) == instance.to_dot()

    def test_default_is_dimacs(self, graph: Graph) -> None:
        instance = wrap(graph)
        assert render(instance) == instance.to_dimacs()

    def test_unknown_output(self, graph: Graph) -> None:
        with pytest.raises(ValueError, match="Unknown output"):
            render(wrap(graph), "json")
