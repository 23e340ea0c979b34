import pytest

from fwgraph.config import APSP_CONFIG, ApspConfig
from fwgraph.types import UNREACHABLE, DuplicateEdgePolicy, saturating_add


def test_defaults():
    cfg = ApspConfig()
    assert cfg.duplicate_edges == DuplicateEdgePolicy.MIN_WEIGHT
    assert cfg.max_nodes is None
    assert cfg.weight_attr == "weight"
    assert cfg.default_weight == 1
    assert APSP_CONFIG == cfg


def test_validate_rejects_negative_values():
    with pytest.raises(ValueError, match="max_nodes"):
        ApspConfig(max_nodes=-1).validate()
    with pytest.raises(ValueError, match="default_weight"):
        ApspConfig(default_weight=-5).validate()
    ApspConfig(max_nodes=0).validate()


def test_check_node_count():
    ApspConfig().check_node_count(10_000)
    ApspConfig(max_nodes=3).check_node_count(3)
    with pytest.raises(ValueError, match="n\\^3"):
        ApspConfig(max_nodes=3).check_node_count(4)


def test_duplicate_policy_from_string():
    assert DuplicateEdgePolicy.from_string("min_weight") == DuplicateEdgePolicy.MIN_WEIGHT
    assert DuplicateEdgePolicy.from_string("LAST_WINS") == DuplicateEdgePolicy.LAST_WINS
    with pytest.raises(ValueError, match="Valid values"):
        DuplicateEdgePolicy.from_string("first")


def test_saturating_add():
    assert saturating_add(2, 3) == 5
    assert saturating_add(UNREACHABLE, 0) == UNREACHABLE
    assert saturating_add(UNREACHABLE, 7) == UNREACHABLE
    assert saturating_add(UNREACHABLE, UNREACHABLE) == UNREACHABLE
    assert saturating_add(UNREACHABLE - 1, 1) == UNREACHABLE
    assert saturating_add(UNREACHABLE - 2, 1) == UNREACHABLE - 1
