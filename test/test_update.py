import numpy as np
import pytest
from dpmx.cluster.update import objective, relabel, update
from dpmx.errors import InconsistentState

def test_means_and_withinss():
    X = np.array([[0.0, 0.0], [2.0, 0.0], [10.0, 10.0]])
    C, ss = update(np.array([1, 1, 2]), X)
    np.testing.assert_allclose(C, [[1.0, 0.0], [10.0, 10.0]])
    np.testing.assert_allclose(ss, [2.0, 0.0])

def test_singleton_withinss_is_exactly_zero():
    X = np.array([[0.1, 0.7], [1e6, -3.3]])
    _, ss = update(np.array([1, 2]), X)
    assert ss.tolist() == [0.0, 0.0]

def test_relabel_drops_missing_indices_in_order():
    assert relabel(np.array([2, 2, 4, 3])).tolist() == [1, 1, 3, 2]

def test_empty_cluster_is_inconsistent():
    X = np.zeros((3, 1))
    with pytest.raises(InconsistentState):
        update(np.array([1, 1, 3]), X)
    with pytest.raises(InconsistentState):
        update(np.array([0, 1, 1]), X)
    with pytest.raises(InconsistentState):
        update(np.array([1, 1]), X)

def test_objective():
    assert objective(np.array([1.5, 0.5]), lam=3.0) == pytest.approx(8.0)
