from typing import Dict, Iterable, List, TextIO, Tuple

import numpy as np

from core.graph import add_undirected_edge


class NegativeWeightError(ValueError):
    pass


def read_edges(stream: TextIO) -> List[Tuple[str, str, float]]:
    """
    Reads whitespace separated triples `from_node to_node weight`.
    Line breaks carry no meaning, a triple may span several lines.
    Rejects the whole input if any weight is negative.
    """
    tokens = stream.read().split()
    if len(tokens) % 3 != 0:
        raise ValueError(
            f"Expected triples of the form 'from_node to_node weight', but the input ends with "
            f"an incomplete triple: {' '.join(tokens[len(tokens) - len(tokens) % 3:])}"
        )

    weights = np.asarray(tokens[2::3], dtype=float)
    negative = np.flatnonzero(weights < 0)
    if len(negative) > 0:
        i = negative[0]
        raise NegativeWeightError(f"negative weight: {tokens[3 * i]}, {tokens[3 * i + 1]} {weights[i]}")

    return list(zip(tokens[0::3], tokens[1::3], weights.tolist()))


def undirected_graph_from_edges(edges: Iterable[Tuple[str, str, float]]) -> Dict[str, Dict[str, float]]:
    """
    Adds every edge in both directions.
    If the same pair of nodes occurs more than once, the last weight is kept.
    """
    adjacency: Dict[str, Dict[str, float]] = {}
    for node_from, node_to, weight in edges:
        add_undirected_edge(adjacency, node_from, node_to, weight)
    return adjacency


def graph_from_edge_list(stream: TextIO) -> Dict[str, Dict[str, float]]:
    return undirected_graph_from_edges(read_edges(stream))
