"""
Unit tests for breadth-first traversal and Dijkstra.
"""

import heapq
import logging
import random

import pytest

from heapgraph.graph import Graph, bfs, dijkstra


def brute_force_costs(edges, source) -> dict:
    """Minimum cost to each reachable key by enumerating simple paths."""
    adjacency: dict = {}
    for src, dst, cost in edges:
        adjacency.setdefault(src, []).append((dst, cost))

    best = {source: 0}

    def walk(key, cost, on_path):
        for dst, edge_cost in adjacency.get(key, []):
            if dst in on_path:
                continue
            total = cost + edge_cost
            if dst not in best or total < best[dst]:
                best[dst] = total
            walk(dst, total, on_path | {dst})

    walk(source, 0, {source})
    return best


def heapq_costs(edges, source) -> dict:
    """Minimum cost to each reachable key using the stdlib heap."""
    adjacency: dict = {}
    for src, dst, cost in edges:
        adjacency.setdefault(src, []).append((dst, cost))

    best = {source: 0}
    settled = set()
    queue = [(0, 0, source)]
    order = 1  # Tie-breaker so keys are never compared
    while queue:
        cost, _, key = heapq.heappop(queue)
        if key in settled:
            continue
        settled.add(key)
        for dst, edge_cost in adjacency.get(key, []):
            total = cost + edge_cost
            if dst not in best or total < best[dst]:
                best[dst] = total
                heapq.heappush(queue, (total, order, dst))
                order += 1
    return best


def random_edges(rng: random.Random, vertices: int, count: int) -> list:
    return [
        (rng.randrange(vertices), rng.randrange(vertices), rng.randint(0, 20))
        for _ in range(count)
    ]


def random_cost(rng: random.Random) -> float:
    """Zero, integer or fractional cost in roughly equal shares."""
    roll = rng.random()
    if roll < 0.3:
        return 0
    if roll < 0.65:
        return rng.randint(0, 100)
    return rng.random()


def large_random_edges(seed: int) -> list:
    rng = random.Random(seed)
    vertices = rng.randint(50, 80)
    count = rng.randint(vertices, vertices * 6)
    edges = [
        (rng.randrange(vertices), rng.randrange(vertices), random_cost(rng))
        for _ in range(count)
    ]
    edges.append((0, 0, 0))  # Make sure the source exists
    return edges


class TestDijkstra:
    """Test minimum-cost computation."""

    def test_reference_scenario(self, sample_graph, expected_distances):
        """Reference graph should give the hand-computed costs."""
        assert dijkstra(sample_graph.get_vertex(1)) == expected_distances

    def test_source_only(self):
        """A vertex without edges should map only to itself."""
        graph = Graph.create([("a", "b", 1)])
        assert dijkstra(graph.get_vertex("b")) == {"b": 0}

    def test_unreachable_absent(self):
        """Vertices with no path from the source should be absent."""
        graph = Graph.create([("a", "b", 2), ("c", "a", 1)])
        distance = dijkstra(graph.get_vertex("a"))
        assert distance == {"a": 0, "b": 2}
        assert "c" not in distance

    def test_cycle_and_self_loop(self):
        """Cycles and self-loops should not affect minimum costs."""
        graph = Graph.create([(1, 1, 0), (1, 2, 5), (2, 3, 1), (3, 1, 1), (3, 2, 1)])
        assert dijkstra(graph.get_vertex(1)) == {1: 0, 2: 5, 3: 6}

    def test_parallel_edges_take_cheapest(self):
        """The cheapest of several parallel edges should win."""
        graph = Graph.create([("a", "b", 9), ("a", "b", 4), ("a", "b", 6)])
        assert dijkstra(graph.get_vertex("a"))["b"] == 4

    def test_zero_cost_edges(self):
        """Zero-cost edges should propagate distances unchanged."""
        graph = Graph.create([(1, 2, 0), (2, 3, 0), (1, 3, 1)])
        assert dijkstra(graph.get_vertex(1)) == {1: 0, 2: 0, 3: 0}

    def test_float_costs(self):
        """Fractional costs should be summed as-is."""
        graph = Graph.create([("s", "t", 0.5), ("t", "u", 0.25), ("s", "u", 1.0)])
        assert dijkstra(graph.get_vertex("s")) == {"s": 0, "t": 0.5, "u": 0.75}

    def test_repeatable(self, sample_graph, expected_distances):
        """Running twice on the same graph should give the same result."""
        source = sample_graph.get_vertex(1)
        assert dijkstra(source) == dijkstra(source) == expected_distances

    @pytest.mark.parametrize("seed", range(25))
    def test_matches_brute_force(self, seed):
        """Costs should equal the cheapest simple path on random graphs."""
        rng = random.Random(seed)
        vertices = rng.randint(2, 7)
        edges = random_edges(rng, vertices, rng.randint(0, vertices * 3))
        edges.append((0, 0, 0))  # Make sure the source exists

        graph = Graph.create(edges)
        assert dijkstra(graph.get_vertex(0)) == brute_force_costs(edges, 0)

    @pytest.mark.parametrize("block", range(10))
    def test_matches_heapq_on_large_graphs(self, block):
        """Costs should match a heapq Dijkstra on larger graphs with zero and fractional costs."""
        mismatched = []
        for seed in range(block * 300, (block + 1) * 300):
            edges = large_random_edges(seed)
            expected = heapq_costs(edges, 0)
            actual = dijkstra(Graph.create(edges).get_vertex(0))
            if actual.keys() != expected.keys() or actual != pytest.approx(expected):
                mismatched.append(seed)
        assert mismatched == []

    def test_mixed_costs_seed_1992(self):
        """Graph 1992 mixes zero and fractional costs along competing paths."""
        edges = large_random_edges(1992)
        expected = heapq_costs(edges, 0)
        actual = dijkstra(Graph.create(edges).get_vertex(0))
        assert actual.keys() == expected.keys()
        assert actual == pytest.approx(expected)

    def test_zero_and_fractional_chains(self):
        """Zero-cost chains behind fractional edges should match heapq exactly."""
        edges = [
            ("s", "a", 0.5), ("s", "b", 0.25), ("s", "c", 3.0),
            ("b", "c", 0.0), ("b", "d", 0.75), ("c", "e", 0.0),
            ("a", "e", 1.5), ("d", "e", 0.125), ("e", "f", 0.0),
        ]
        graph = Graph.create(edges)
        assert dijkstra(graph.get_vertex("s")) == heapq_costs(edges, "s")

    def test_logs_summary(self, sample_graph, caplog):
        """A debug summary should be logged after each run."""
        with caplog.at_level(logging.DEBUG, logger="heapgraph.graph.traversal"):
            dijkstra(sample_graph.get_vertex(1))
        assert "settled 6 vertices" in caplog.text


class TestBFS:
    """Test breadth-first traversal."""

    def test_visit_order(self, sample_graph):
        """Edges should be visited level by level in adjacency order."""
        seen = []
        bfs(sample_graph.get_vertex(1), lambda vertex, edge: seen.append((vertex.key, edge.vertex.key)))
        assert seen == [(1, 2), (1, 3), (2, 4), (2, 3), (3, 5), (4, 6), (5, 4), (5, 6)]

    def test_returns_none(self, sample_graph):
        """BFS should only act through the callback."""
        assert bfs(sample_graph.get_vertex(1), lambda vertex, edge: None) is None

    def test_cycle_terminates_once_per_vertex(self):
        """Each vertex's edges should be visited exactly once on a cycle."""
        graph = Graph.create([("a", "b", 1), ("b", "c", 1), ("c", "a", 1), ("b", "a", 1)])
        calls = {}

        def visit(vertex, edge):
            calls[vertex.key] = calls.get(vertex.key, 0) + 1

        bfs(graph.get_vertex("b"), visit)
        assert calls == {"b": 2, "c": 1, "a": 1}

    def test_only_reachable_vertices(self):
        """Vertices not reachable from the source should not be visited."""
        graph = Graph.create([(1, 2, 1), (3, 1, 1)])
        sources = []
        bfs(graph.get_vertex(1), lambda vertex, edge: sources.append(vertex.key))
        assert sources == [1]

    def test_default_callback_logs(self, sample_graph, caplog):
        """Default callback should log each edge at INFO."""
        with caplog.at_level(logging.INFO, logger="heapgraph.graph.traversal"):
            bfs(sample_graph.get_vertex(5))
        assert "5 -> 4 (cost 2)" in caplog.text
        assert "4 -> 6 (cost 1)" in caplog.text
