import numpy as np
import pytest
from dpmx.metrics.clustering_scores import clustering_accuracy, compute_all

def test_metrics():
    y = np.array([0,0,1,1])
    yhat = np.array([1,1,0,0])
    m = compute_all(y, yhat)
    assert m["ACC"] == 1.0
    assert m["NMI"] == pytest.approx(1.0) and m["ARI"] == pytest.approx(1.0)

def test_accuracy_with_one_indexed_and_extra_clusters():
    y = np.array(["a", "a", "b", "b", "b"])
    yhat = np.array([3, 3, 1, 1, 7])
    assert clustering_accuracy(y, yhat) == 0.8
