from __future__ import annotations

from typing import Dict, Generic, List, Set, Tuple

from core.graph import Adjacency, T
from utilities.queues import ItemNotFoundError, PriorityQueue, QueueType, build_queue


def dijkstra(
        adjacency: Adjacency[T],
        source: T,
        queue_type: QueueType = QueueType.BINARY_HEAP
) -> Tuple[Dict[T, float], Dict[T, T]]:
    '''
    Assumes all edge weights to be non-negative.
    Returns the distance from source for every node of the graph (inf if source cannot reach it)
    and the predecessor of every node on its shortest path found.
    The source and nodes that were never relaxed have no predecessor.
    '''
    if source not in adjacency:
        raise ItemNotFoundError(source)

    dist: Dict[T, float] = {}
    pred: Dict[T, T] = {}
    visited: Set[T] = set()
    queue: PriorityQueue[T] = build_queue(queue_type)
    for v in adjacency.keys():
        queue.push(v, float('inf'))
        dist[v] = float('inf')

    queue.decrease_key(source, 0.)
    dist[source] = 0.

    while len(queue) > 0:
        u = queue.pop()
        visited.add(u)
        for v, weight in adjacency.get(u, {}).items():
            if v in visited:
                continue
            relaxation = dist[u] + weight
            if not queue.has(v):
                # Only happens for neighbors that are not keys of adjacency.
                queue.push(v, relaxation)
                dist[v] = relaxation
                if relaxation < float('inf'):
                    pred[v] = u
            elif relaxation < queue.key_of(v):
                queue.decrease_key(v, relaxation)
                pred[v] = u
                dist[v] = relaxation

    return dist, pred


class ShortestPaths(Generic[T]):
    """
    Shortest paths from a single source, computed on construction.
    """

    source: T
    _dist: Dict[T, float]
    _pred: Dict[T, T]

    def __init__(self, adjacency: Adjacency[T], source: T, queue_type: QueueType = QueueType.BINARY_HEAP):
        self.source = source
        self._dist, self._pred = dijkstra(adjacency, source, queue_type)

    def distance_to(self, dest: T) -> float:
        if dest not in self._dist:
            raise ItemNotFoundError(dest)
        return self._dist[dest]

    def has_path_to(self, dest: T) -> bool:
        return self.distance_to(dest) < float('inf')

    def path_to(self, dest: T) -> List[T]:
        """
        Follows the predecessors starting at dest and returns the nodes in order of traversal.
        If dest cannot be reached, the result is just [dest]; use `has_path_to` to tell this
        apart from the path of the source to itself.
        """
        path = [dest]
        while path[-1] in self._pred:
            path.append(self._pred[path[-1]])
        path.reverse()
        return path

    def distances(self) -> Dict[T, float]:
        return dict(self._dist)
