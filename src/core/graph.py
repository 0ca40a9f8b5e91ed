from __future__ import annotations

from typing import Dict, Hashable, Mapping, TypeVar

T = TypeVar('T', bound=Hashable)

# Maps every node to its outgoing edges, given as neighbor -> non-negative weight.
Adjacency = Mapping[T, Mapping[T, float]]


def add_edge(adjacency: Dict[T, Dict[T, float]], node_from: T, node_to: T, weight: float):
    """
    Adds the directed edge node_from -> node_to.
    An existing edge between the same nodes is overwritten.
    """
    adjacency.setdefault(node_from, {})[node_to] = weight
    adjacency.setdefault(node_to, {})


def add_undirected_edge(adjacency: Dict[T, Dict[T, float]], u: T, v: T, weight: float):
    add_edge(adjacency, u, v, weight)
    add_edge(adjacency, v, u, weight)
