"""Tests for chains and the chain registry."""

import math

import numpy as np
import pytest

from edgelink.linking.edge_map import EdgeMapInvariantError
from edgelink.linking.registry import Chain, ChainRegistry


def test_chain_properties():
    chain = Chain(chain_id=1, points=[(0, 0), (1, 1), (1, 2)])

    assert len(chain) == 3
    assert chain.start == (0, 0)
    assert chain.end == (1, 2)
    assert chain.path_length == pytest.approx(math.sqrt(2) + 1)
    np.testing.assert_array_equal(chain.as_array(), [[0, 0], [1, 1], [1, 2]])


def test_single_point_chain():
    chain = Chain(chain_id=1, points=[(4, 2)])

    assert chain.path_length == 0.0
    assert chain.as_array().shape == (1, 2)


def test_register_requires_dense_ids():
    registry = ChainRegistry(shape=(3, 3))
    registry.register(Chain(1, [(0, 0)]))

    with pytest.raises(EdgeMapInvariantError):
        registry.register(Chain(3, [(1, 1)]))

    registry.register(Chain(2, [(2, 2), (2, 1)]))
    assert [chain.chain_id for chain in registry] == [1, 2]


def test_lookup_and_summaries():
    registry = ChainRegistry(shape=(4, 4))
    registry.register(Chain(1, [(0, 0), (0, 1)]))
    registry.register(Chain(2, [(2, 0), (2, 1), (2, 2)]))
    registry.register(Chain(3, [(3, 3), (3, 2)]))

    assert registry.get(2).points == ((2, 0), (2, 1), (2, 2))
    with pytest.raises(KeyError):
        registry.get(0)
    with pytest.raises(KeyError):
        registry.get(4)

    assert registry.total_points == 7
    assert registry.length_histogram() == {2: 2, 3: 1}
    assert [a.shape for a in registry.edgelist()] == [(2, 2), (3, 2), (2, 2)]


def test_chains_returns_copy():
    registry = ChainRegistry(shape=(1, 1))
    registry.register(Chain(1, [(0, 0)]))

    registry.chains.clear()

    assert len(registry) == 1


def test_chain_is_immutable():
    chain = Chain(chain_id=1, points=[(0, 0), (0, 1)])

    assert chain.points == ((0, 0), (0, 1))
    with pytest.raises(AttributeError):
        chain.points = ((5, 5),)
    with pytest.raises(AttributeError):
        chain.points.append((0, 2))


def test_registered_chain_not_affected_by_source_list():
    points = [(0, 0), (0, 1)]
    registry = ChainRegistry(shape=(1, 2))
    registry.register(Chain(1, points))

    points.append((0, 2))

    assert len(registry.get(1)) == 2
