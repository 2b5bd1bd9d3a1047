import pytest

from graphgrow.core.errors import EdgeIndexError
from graphgrow.core.random_source import NumpyRandomSource
from graphgrow.graph.store import GraphStore, sample_position

from conftest import ScriptedRandomSource


def test_add_node_returns_previous_length():
    store = GraphStore()
    assert store.add_node((1, 2)) == 0
    assert store.add_node((3, 4)) == 1
    assert store.nodes == ((1, 2), (3, 4))
    assert len(store) == 2


def test_add_edge_appends_in_order():
    store = GraphStore()
    store.add_node((0, 0))
    store.add_node((5, 5))
    store.add_edge(0, 1)
    store.add_edge(1, 0)
    store.add_edge(1, 0)  # multi-edges are kept
    assert store.edges == ((0, 1), (1, 0), (1, 0))


def test_self_loop_is_accepted():
    store = GraphStore()
    store.add_node((0, 0))
    store.add_edge(0, 0)
    assert store.edges == ((0, 0),)


@pytest.mark.parametrize("a,b", [(0, 2), (2, 0), (-1, 0), (0, -1)])
def test_edge_to_missing_node_fails_fast(a, b):
    store = GraphStore()
    store.add_node((0, 0))
    store.add_node((1, 1))
    with pytest.raises(EdgeIndexError):
        store.add_edge(a, b)
    assert store.edge_count == 0


def test_edge_index_error_is_an_index_error():
    store = GraphStore()
    with pytest.raises(IndexError):
        store.add_edge(0, 0)


def test_views_are_read_only():
    store = GraphStore()
    store.add_node((0, 0))
    nodes = store.nodes
    with pytest.raises(TypeError):
        nodes[0] = (9, 9)
    with pytest.raises(AttributeError):
        nodes.append((9, 9))
    assert store.nodes == ((0, 0),)


def test_seeded_has_two_nodes_and_one_edge():
    rng = ScriptedRandomSource([10, 10, 20, 20])
    store = GraphStore.seeded(400, 400, rng)
    assert store.nodes == ((10, 10), (20, 20))
    assert store.edges == ((0, 1),)


def test_seeded_positions_are_in_bounds():
    for seed in range(20):
        store = GraphStore.seeded(400, 300, NumpyRandomSource(seed))
        for x, y in store.nodes:
            assert 0 <= x < 400
            assert 0 <= y < 300


def test_sample_position_bounds_small_canvas():
    rng = NumpyRandomSource(7)
    for _ in range(200):
        x, y = sample_position(2, 3, rng)
        assert x in (0, 1)
        assert y in (0, 1, 2)


def test_snapshot_is_frozen_copy():
    store = GraphStore()
    store.add_node((1, 1))
    snap = store.snapshot()
    store.add_node((2, 2))
    assert snap.node_count == 1
    assert store.node_count == 2


def test_iter_edge_segments():
    store = GraphStore()
    store.add_node((0, 0))
    store.add_node((10, 0))
    store.add_edge(1, 0)
    assert list(store.iter_edge_segments()) == [((10, 0), (0, 0))]
