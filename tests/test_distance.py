"""Tests for edge weight lookups."""

import numpy as np
import pytest

from spgraph.distance import (
    CallableDistance,
    DefaultDistance,
    EdgeWeightDistance,
    MatrixDistance,
    as_weight_lookup,
)
from spgraph.exceptions import InvalidWeights


class TestDefaultDistance:
    def test_unit_weight(self):
        d = DefaultDistance()
        assert d.weight(0, 5) == 1
        assert d[3, 2] == 1

    def test_equality(self):
        assert DefaultDistance() == DefaultDistance()
        assert hash(DefaultDistance()) == hash(DefaultDistance())


class TestMatrixDistance:
    def test_nested_lists(self):
        d = MatrixDistance([[0, 2], [3, 0]])
        assert d.weight(0, 1) == 2
        assert d[1, 0] == 3
        assert d.size == 2

    def test_numpy_array_becomes_python_numbers(self):
        d = MatrixDistance(np.array([[0.0, 1.5], [2.5, 0.0]]))
        assert d.weight(0, 1) == 1.5
        assert type(d.weight(1, 0)) is float

    def test_not_square(self):
        with pytest.raises(ValueError, match="square"):
            MatrixDistance([[0, 1], [1]])


class TestEdgeWeightDistance:
    def test_lookup(self):
        d = EdgeWeightDistance({(0, 1): 4})
        assert d.weight(0, 1) == 4
        assert d[0, 1] == 4
        assert len(d) == 1

    def test_missing_without_default(self):
        d = EdgeWeightDistance({(0, 1): 4})
        with pytest.raises(KeyError):
            d.weight(1, 0)

    def test_missing_with_default(self):
        d = EdgeWeightDistance({(0, 1): 4}, default=7)
        assert d.weight(1, 0) == 7


class TestAsWeightLookup:
    def test_none_is_unit(self):
        assert isinstance(as_weight_lookup(None), DefaultDistance)

    def test_lookup_passthrough(self):
        d = MatrixDistance([[0]])
        assert as_weight_lookup(d) is d

    def test_mapping(self):
        assert isinstance(as_weight_lookup({(0, 1): 1}), EdgeWeightDistance)

    def test_callable(self):
        d = as_weight_lookup(lambda u, v: u + v)
        assert isinstance(d, CallableDistance)
        assert d.weight(2, 3) == 5

    def test_matrix(self):
        assert isinstance(as_weight_lookup([[0, 1], [1, 0]]), MatrixDistance)
        assert isinstance(as_weight_lookup(np.zeros((2, 2))), MatrixDistance)

    @pytest.mark.parametrize("bad", [42, "weights", object()])
    def test_unsupported(self, bad):
        with pytest.raises(InvalidWeights):
            as_weight_lookup(bad)
