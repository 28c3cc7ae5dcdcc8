import itertools
import math
import random

import pytest
from graphpath.algo_funcs import build_adjacency, shortest_path, path_edge_ids
from graphpath.models import PathResult

# -----------------------------
# Helpers
# -----------------------------

def brute_force_distance(edges, start, goal):
    """Minimum weight over all simple paths, by exhaustive DFS."""
    adj = build_adjacency(edges)
    if start not in adj or goal not in adj:
        return math.inf
    best = math.inf
    stack = [(start, {start}, 0.0)]
    while stack:
        node, seen, total = stack.pop()
        if node == goal:
            best = min(best, total)
            continue
        for nbr, w in adj[node]:
            if nbr not in seen:
                stack.append((nbr, seen | {nbr}, total + w))
    return best


def path_weight(edges, path):
    """Sum of the lightest edge for every hop; fails if a hop has no edge."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += min(w for u, v, w in edges if {u, v} == {a, b})
    return total

# -----------------------------
# Concrete scenarios
# -----------------------------

def test_triangle_prefers_two_hops():
    result = shortest_path([("A", "B", 1), ("B", "C", 2), ("A", "C", 4)], "A", "C")
    assert result.path == ["A", "B", "C"]
    assert result.distance == 3

def test_goal_absent_is_unreachable():
    result = shortest_path([("A", "B", 5)], "A", "C")
    assert not result.reachable
    assert result.path is None
    assert math.isinf(result.distance)

def test_empty_edges_is_unreachable():
    assert shortest_path([], "A", "B") == PathResult.unreachable()

def test_empty_edges_same_label_is_unreachable():
    assert not shortest_path([], "A", "A").reachable

def test_four_vertices():
    edges = [("A", "B", 2), ("B", "C", 2), ("A", "C", 5), ("C", "D", 1)]
    result = shortest_path(edges, "A", "D")
    assert result.path == ["A", "B", "C", "D"]
    assert result.distance == 5

# -----------------------------
# Edge cases
# -----------------------------

def test_same_start_and_goal():
    result = shortest_path([("A", "B", 3)], "B", "B")
    assert result.path == ["B"]
    assert result.distance == 0

def test_start_absent_is_unreachable():
    assert not shortest_path([("A", "B", 5)], "X", "A").reachable

def test_disconnected_components():
    edges = [("A", "B", 1), ("C", "D", 1)]
    assert not shortest_path(edges, "A", "D").reachable

def test_edges_are_undirected():
    result = shortest_path([("B", "A", 2), ("C", "B", 3)], "A", "C")
    assert result.path == ["A", "B", "C"]
    assert result.distance == 5

def test_parallel_edges_use_lightest():
    edges = [("A", "B", 7), ("A", "B", 2), ("B", "A", 4)]
    result = shortest_path(edges, "A", "B")
    assert result.path == ["A", "B"]
    assert result.distance == 2

def test_zero_weight_edges():
    edges = [("A", "B", 0), ("B", "C", 0), ("A", "C", 1)]
    assert shortest_path(edges, "A", "C").distance == 0

def test_float_weights():
    edges = [("A", "B", 0.5), ("B", "C", 0.25), ("A", "C", 1.0)]
    result = shortest_path(edges, "A", "C")
    assert result.path == ["A", "B", "C"]
    assert result.distance == pytest.approx(0.75)

def test_accepts_generator_input():
    edges = (e for e in [("A", "B", 1), ("B", "C", 1)])
    assert shortest_path(edges, "A", "C").path == ["A", "B", "C"]

def test_does_not_mutate_input():
    edges = [("A", "B", 1), ("B", "C", 2)]
    copy = list(edges)
    shortest_path(edges, "A", "C")
    assert edges == copy

def test_repeated_calls_identical():
    edges = [("A", "B", 2), ("B", "C", 2), ("A", "C", 5), ("C", "D", 1)]
    assert shortest_path(edges, "A", "D") == shortest_path(edges, "A", "D")

def test_adjacency_has_both_directions():
    adj = build_adjacency([("A", "B", 1), ("A", "B", 3)])
    assert adj == {"A": [("B", 1.0), ("B", 3.0)], "B": [("A", 1.0), ("A", 3.0)]}

# -----------------------------
# Property tests against brute force
# -----------------------------

@pytest.mark.parametrize("seed", range(25))
def test_matches_brute_force_on_random_graphs(seed):
    rng = random.Random(seed)
    labels = [chr(ord("A") + i) for i in range(rng.randint(2, 6))]
    edges = [
        (rng.choice(labels), rng.choice(labels), rng.randint(0, 9))
        for _ in range(rng.randint(1, 10))
    ]
    for start, goal in itertools.product(labels, repeat=2):
        result = shortest_path(edges, start, goal)
        expected = brute_force_distance(edges, start, goal)
        if math.isinf(expected):
            assert not result.reachable
            continue
        assert result.distance == expected
        assert result.path[0] == start
        assert result.path[-1] == goal
        assert path_weight(edges, result.path) == result.distance

# -----------------------------
# Path highlighting
# -----------------------------

def test_path_edge_ids_follow_hops():
    edges = [("e1", "A", "B", 1), ("e2", "C", "B", 2), ("e3", "A", "C", 4)]
    assert path_edge_ids(["A", "B", "C"], edges) == ["e1", "e2"]

def test_path_edge_ids_first_parallel_edge_wins():
    edges = [("e1", "A", "B", 5), ("e2", "B", "A", 1)]
    assert path_edge_ids(["B", "A"], edges) == ["e1"]

@pytest.mark.parametrize("path", [None, [], ["A"]])
def test_path_edge_ids_without_hops(path):
    assert path_edge_ids(path, [("e1", "A", "B", 1)]) == []
