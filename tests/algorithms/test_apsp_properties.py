"""Property checks against a NetworkX Dijkstra reference on random graphs."""

import random
from itertools import product

import networkx as nx
import pytest

from fwgraph.algorithms.floyd_warshall import floyd_warshall, floyd_warshall_paths
from fwgraph.graph.nx import from_networkx
from fwgraph.types import UNREACHABLE

SEEDS = list(range(12))


def random_graph(seed: int, n: int = 10, p: float = 0.25) -> nx.Graph:
    rng = random.Random(seed)
    G = nx.Graph()
    G.add_nodes_from(range(n))
    for u, v in product(range(n), repeat=2):
        if u < v and rng.random() < p:
            G.add_edge(u, v, weight=rng.randrange(100))
    return G


@pytest.mark.parametrize("seed", SEEDS)
def test_distances_match_dijkstra(seed):
    G = random_graph(seed)
    view, node_map = from_networkx(G)
    distances = floyd_warshall(view)
    paths = floyd_warshall_paths(view)

    for src in G.nodes:
        reference = nx.single_source_dijkstra_path_length(G, src, weight="weight")
        i = node_map.to_index[src]
        for dst in G.nodes:
            j = node_map.to_index[dst]
            expected = reference.get(dst, UNREACHABLE)
            assert distances.get(i, j) == expected
            assert paths.distance(i, j) == expected
            assert paths.does_path_exist(i, j) == (dst in reference)


@pytest.mark.parametrize("seed", SEEDS)
def test_symmetry_diagonal_and_triangle_inequality(seed):
    view, _ = from_networkx(random_graph(seed))
    m = floyd_warshall_paths(view)
    n = view.node_count

    for v in range(n):
        assert m.get_path_len(v, v) == 0
    for i, j in product(range(n), repeat=2):
        assert m.distance(i, j) == m.distance(j, i)
        assert m.does_path_exist(i, j) == m.does_path_exist(j, i)
    for i, j, k in product(range(n), repeat=3):
        if m.does_path_exist(i, k) and m.does_path_exist(k, j):
            assert m.get_path_len(i, j) <= m.get_path_len(i, k) + m.get_path_len(k, j)


@pytest.mark.parametrize("seed", SEEDS)
def test_walking_the_path_sums_to_distance(seed):
    G = random_graph(seed)
    view, node_map = from_networkx(G)
    m = floyd_warshall_paths(view)

    for u, v in product(G.nodes, repeat=2):
        i, j = node_map.to_index[u], node_map.to_index[v]
        if i >= j or not m.does_path_exist(i, j):
            continue
        walk = [u, *m.get_path_iter(i, j), v]
        total = sum(G.edges[a, b]["weight"] for a, b in zip(walk, walk[1:]))
        assert total == m.get_path_len(i, j)
        # The reverse walk uses the same edges.
        back = [v, *reversed(m.get_path_iter(i, j)), u]
        assert back == walk[::-1]


@pytest.mark.parametrize("seed", SEEDS[:6])
def test_adding_an_edge_never_increases_distances(seed):
    rng = random.Random(1000 + seed)
    G = random_graph(seed)
    before = floyd_warshall(from_networkx(G)[0])

    missing = sorted(nx.non_edges(G))
    if not missing:
        pytest.skip("graph is complete")
    u, v = rng.choice(missing)
    G.add_edge(u, v, weight=rng.randrange(100))
    after = floyd_warshall(from_networkx(G)[0])

    n = G.number_of_nodes()
    for i, j in product(range(n), repeat=2):
        assert after.get(i, j) <= before.get(i, j)
