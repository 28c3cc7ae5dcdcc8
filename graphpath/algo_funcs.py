from typing import Dict, Iterable, List, Optional, Tuple
from graphpath.models import EdgeTriple, LabelledEdge, PathResult
import heapq

# -----------------------------
# Pathfinding
# -----------------------------

def build_adjacency(edges: Iterable[EdgeTriple]) -> Dict[str, List[Tuple[str, float]]]:
    adj: Dict[str, List[Tuple[str, float]]] = {}
    for from_, to, weight in edges:
        adj.setdefault(from_, []).append((to, float(weight)))
        adj.setdefault(to, []).append((from_, float(weight)))  # undirected
    return adj


def shortest_path(edges: Iterable[EdgeTriple], start: str, goal: str) -> PathResult:
    """
    Dijkstra over an undirected edge list.

    - weights must be >= 0; negative weights give undefined results and are not checked
    - an empty edge list is unreachable for any start/goal, even start == goal
    - start or goal that is not an endpoint of some edge is unreachable
    - parallel edges are kept, the lightest one wins naturally
    """
    adj = build_adjacency(edges)
    if not adj or start not in adj or goal not in adj:
        return PathResult.unreachable()

    dist = {node: float("inf") for node in adj}
    prev: Dict[str, Optional[str]] = {node: None for node in adj}
    dist[start] = 0.0

    heap = [(0.0, start)]  # (distance, node), may hold stale entries
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        if node == goal:
            break
        for nbr, w in adj[node]:
            nd = d + w
            if nd < dist[nbr]:
                dist[nbr] = nd
                prev[nbr] = node
                heapq.heappush(heap, (nd, nbr))

    if dist[goal] == float("inf"):
        return PathResult.unreachable()

    path = [goal]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return PathResult(path=path, distance=dist[goal])


def path_edge_ids(path: Optional[List[str]], edges: Iterable[LabelledEdge]) -> List[str]:
    """Ids of the edges a path runs over, first matching edge per hop in either direction."""
    if not path or len(path) < 2:
        return []
    edges = list(edges)
    ids = []
    for a, b in zip(path, path[1:]):
        match = next((eid for eid, u, v, _ in edges if (u == a and v == b) or (u == b and v == a)), None)
        if match is not None:
            ids.append(match)
    return ids
