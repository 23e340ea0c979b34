import pytest

from fwgraph.graph.view import GraphView


@pytest.fixture
def complete4():
    # Every pair of A..D joined with weight 1
    return GraphView.from_edges(
        [(0, 1, 1), (0, 2, 1), (0, 3, 1), (1, 2, 1), (1, 3, 1), (2, 3, 1)],
        labels=["A", "B", "C", "D"],
    )


@pytest.fixture
def triangle_detour():
    #        [1]      [1]
    #   a ───────► b ───────► c
    #   │                     ▲
    #   └─────────────────────┘
    #             [3]
    return GraphView.from_edges(
        [(0, 1, 1), (1, 2, 1), (0, 2, 3)], labels=["a", "b", "c"]
    )


@pytest.fixture
def two_components():
    #   0 ──[1]── 1        2 ──[2]── 3
    return GraphView.from_edges([(0, 1, 1), (2, 3, 2)])


@pytest.fixture
def zigzag():
    # A single line whose node ids do not increase along it, so stored
    # sub-paths must be reversed when spliced:
    #
    #   2 ──[1]── 1 ──[2]── 4 ──[3]── 0 ──[4]── 3
    return GraphView.from_edges([(2, 1, 1), (1, 4, 2), (4, 0, 3), (0, 3, 4)])
