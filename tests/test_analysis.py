import networkx as nx
import pytest

from fwgraph import UNREACHABLE, ApspConfig, DuplicateEdgePolicy, all_pairs_shortest_paths


@pytest.fixture
def detour_graph():
    G = nx.Graph()
    G.add_weighted_edges_from([("a", "b", 1), ("b", "c", 1), ("a", "c", 3)])
    return G


@pytest.fixture
def chain_graph():
    # Names sort differently from the walking order: e - a - d - b
    G = nx.Graph()
    G.add_weighted_edges_from([("e", "a", 1), ("a", "d", 1), ("d", "b", 1)])
    G.add_node("z")
    return G


class TestAllPairsShortestPaths:
    def test_detour(self, detour_graph):
        sp = all_pairs_shortest_paths(detour_graph)
        assert sp.has_paths
        assert sp.distance("a", "b") == 1
        assert sp.distance("b", "c") == 1
        assert sp.distance("a", "c") == 2
        assert sp.path("a", "c") == ["b"]
        assert sp.path("c", "a") == ["b"]
        assert sp.path("a", "b") == []

    def test_path_follows_requested_direction(self, chain_graph):
        sp = all_pairs_shortest_paths(chain_graph)
        assert sp.path("e", "b") == ["a", "d"]
        assert sp.path("b", "e") == ["d", "a"]
        assert sp.full_path("b", "e") == ["b", "d", "a", "e"]
        assert sp.full_path("e", "e") == ["e"]
        assert sp.distance("b", "e") == 3

    def test_unreachable(self, chain_graph):
        sp = all_pairs_shortest_paths(chain_graph)
        assert not sp.path_exists("a", "z")
        assert sp.distance("z", "a") == UNREACHABLE
        assert sp.path("a", "z") == []
        assert sp.full_path("a", "z") is None
        assert sp.to_dict()["a"]["z"] is None
        assert sp.to_dict()["a"]["a"] == 0

    def test_distance_only(self, detour_graph):
        sp = all_pairs_shortest_paths(detour_graph, with_paths=False)
        assert not sp.has_paths
        assert sp.distance("a", "c") == 2
        assert sp.path_exists("c", "a")
        with pytest.raises(ValueError, match="not tracked"):
            sp.path("a", "c")

    def test_unknown_node(self, detour_graph):
        sp = all_pairs_shortest_paths(detour_graph)
        with pytest.raises(KeyError):
            sp.distance("a", "nope")

    def test_label_attr(self, detour_graph):
        detour_graph.nodes["b"]["city"] = "Bern"
        sp = all_pairs_shortest_paths(detour_graph, label_attr="city")
        assert sp.path("a", "c") == ["Bern"]

    def test_weight_attr(self):
        G = nx.Graph()
        G.add_edge("a", "b", cost=2, weight=100)
        sp = all_pairs_shortest_paths(G, weight_attr="cost")
        assert sp.distance("a", "b") == 2

    def test_multigraph_duplicate_policy(self):
        G = nx.MultiGraph()
        G.add_edge("a", "b", weight=2)
        G.add_edge("a", "b", weight=5)
        assert all_pairs_shortest_paths(G).distance("a", "b") == 2
        cfg = ApspConfig(duplicate_edges=DuplicateEdgePolicy.LAST_WINS)
        assert all_pairs_shortest_paths(G, config=cfg).distance("a", "b") == 5

    def test_directed_rejected(self):
        G = nx.DiGraph()
        G.add_edge("a", "b", weight=1)
        with pytest.raises(ValueError, match="undirected"):
            all_pairs_shortest_paths(G)

    def test_invalid_config(self, detour_graph):
        with pytest.raises(ValueError):
            all_pairs_shortest_paths(detour_graph, config=ApspConfig(max_nodes=-1))

    def test_fractional_weights_rejected(self):
        G = nx.Graph()
        G.add_edge("a", "b", weight=2.9)
        G.add_edge("b", "c", weight=2.9)
        G.add_edge("a", "c", weight=5)
        with pytest.raises(ValueError, match="must be an integer"):
            all_pairs_shortest_paths(G)


class TestShortestPathsRendering:
    def test_format_table(self, chain_graph):
        sp = all_pairs_shortest_paths(chain_graph)
        table = sp.format_table()
        lines = table.splitlines()
        assert len(lines) == 2 + 5
        assert lines[0].split("|")[1].split() == ["a", "b", "d", "e", "z"]
        assert lines[2].split() == ["a", "|", "0", "2", "1", "1", "-"]
        assert str(sp) == table

    def test_paths_dict(self, detour_graph):
        sp = all_pairs_shortest_paths(detour_graph)
        entries = sp.paths_dict()
        assert entries["a"]["c"] == {"distance": 2, "exists": True, "path": ["b"]}
        assert set(entries) == {"a", "b"}
        assert set(entries["a"]) == {"b", "c"}
        assert set(entries["b"]) == {"c"}

    def test_paths_dict_keeps_names_with_separators_apart(self):
        G = nx.Graph()
        G.add_edge("a|b", "c", weight=1)
        G.add_edge("a", "b|c", weight=2)
        entries = all_pairs_shortest_paths(G).paths_dict()
        assert entries["a"]["b|c"]["distance"] == 2
        assert entries["a|b"]["c"]["distance"] == 1
        assert entries["a"]["a|b"]["exists"] is False

    def test_dump(self, detour_graph):
        sp = all_pairs_shortest_paths(detour_graph)
        assert sp.dump().splitlines()[2] == "[2['b'], 1[], 0[]]"
