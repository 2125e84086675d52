"""Erdos-Renyi graph generation: model combinatorics, sampling, and validation."""

from src.graph.model import InstanceTooLargeError, ErModel
from src.graph.sampler import ErGenerator
from src.graph.types import DEFAULT_WEIGHT, Edge, Graph
from src.graph.validation import validate_graph

__all__ = [
    "DEFAULT_WEIGHT",
    "Edge",
    "ErGenerator",
    "ErModel",
    "Graph",
    "InstanceTooLargeError",
    "validate_graph",
]
