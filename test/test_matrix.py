import numpy as np
import pandas as pd
import pytest
import torch
from dpmx.data.matrix import as_feature_matrix
from dpmx.errors import InvalidInput

def test_vector_becomes_one_column():
    fm = as_feature_matrix([1, 2, 3])
    assert fm.values.shape == (3, 1) and fm.values.dtype == np.float64
    assert fm.index is None and fm.columns is None

def test_dataframe_keeps_labels():
    df = pd.DataFrame({"a": [1, 2], "b": [3.5, 4.5]}, index=["x", "y"])
    fm = as_feature_matrix(df)
    assert (fm.n, fm.d) == (2, 2)
    assert list(fm.columns) == ["a", "b"] and list(fm.index) == ["x", "y"]
    centers = fm.wrap_centers(np.zeros((3, 2)))
    assert list(centers.index) == [1, 2, 3]
    assert fm.wrap_assignments(np.array([1, 2])).name == "cluster"

def test_series_and_tensor():
    assert as_feature_matrix(pd.Series([1.0, 2.0], name="v")).columns.tolist() == ["v"]
    fm = as_feature_matrix(torch.ones(4, 3, requires_grad=True))
    assert fm.values.shape == (4, 3)

@pytest.mark.parametrize("dtype", [torch.bfloat16, torch.float16, torch.int64, torch.bool])
def test_low_precision_and_integer_tensors(dtype):
    t = torch.tensor([[1.5, 0.0], [2.0, 1.0]]).to(dtype)
    fm = as_feature_matrix(t)
    assert fm.values.dtype == np.float64
    np.testing.assert_array_equal(fm.values, t.double().numpy())

def test_numeric_dataframe_with_int_and_bool_columns():
    fm = as_feature_matrix(pd.DataFrame({"n": [1, 2], "flag": [True, False]}))
    np.testing.assert_array_equal(fm.values, [[1.0, 1.0], [2.0, 0.0]])

@pytest.mark.parametrize("x", [
    [["a", "b"]],
    np.zeros((2, 2, 2)),
    np.empty((0, 3)),
    np.empty((3, 0)),
    [[1.0, float("nan")]],
    pd.DataFrame({"a": [1.0, np.inf]}),
    np.array([[1 + 5j, 0], [2 + 9j, 1]]),
    [[1.0, None]],
    np.array([["1.0", "2.0"]]),
    pd.DataFrame({"a": [1.0, 2.0], "name": ["x", "y"]}),
    pd.DataFrame({"z": np.array([1 + 1j, 2 + 0j])}),
    torch.tensor([[1 + 2j, 0j]]),
])
def test_rejects(x):
    with pytest.raises(InvalidInput):
        as_feature_matrix(x)
