from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from ..errors import InvalidInput


@dataclass(frozen=True)
class FeatureMatrix:
    """N x D float matrix plus the optional row/column labels of the source table."""

    values: np.ndarray
    index: Optional[pd.Index] = None
    columns: Optional[pd.Index] = None

    @property
    def n(self) -> int:
        return self.values.shape[0]

    @property
    def d(self) -> int:
        return self.values.shape[1]

    def wrap_centers(self, centers: np.ndarray):
        if self.columns is None:
            return centers
        return pd.DataFrame(centers, columns=self.columns, index=pd.RangeIndex(1, centers.shape[0] + 1))

    def wrap_assignments(self, labels: np.ndarray):
        if self.index is None:
            return labels
        return pd.Series(labels, index=self.index, name="cluster")


def as_real_array(x) -> np.ndarray:
    try:
        arr = np.asarray(x)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"features must be numeric: {e}") from e
    if np.iscomplexobj(arr):
        raise InvalidInput("features must be real-valued, got complex data")
    # bool, signed, unsigned and float only; object/str/datetime are rejected
    if arr.dtype.kind not in "biuf":
        raise InvalidInput(f"features must be numeric, got dtype {arr.dtype}")
    return arr.astype(np.float64, copy=False)


def check_finite(values: np.ndarray) -> None:
    if values.shape[0] == 0:
        raise InvalidInput("data has zero rows")
    if not np.isfinite(values).all():
        bad = np.argwhere(~np.isfinite(values))[0]
        raise InvalidInput(f"non-finite feature value at row {bad[0]}, column {bad[1]}")


def as_feature_matrix(x) -> FeatureMatrix:
    """Coerce an array, nested sequence, DataFrame/Series or tensor into a validated FeatureMatrix."""
    index = columns = None
    if isinstance(x, pd.Series):
        x = x.to_frame()
    if isinstance(x, pd.DataFrame):
        index, columns = x.index, x.columns
        for name, dtype in x.dtypes.items():
            if not pd.api.types.is_numeric_dtype(dtype) or pd.api.types.is_complex_dtype(dtype):
                raise InvalidInput(f"column {name!r} is not real-valued numeric ({dtype})")
        values = as_real_array(x.to_numpy(dtype=np.float64, na_value=np.nan))
    else:
        if hasattr(x, "detach"):  # torch.Tensor
            if x.is_complex():
                raise InvalidInput("features must be real-valued, got a complex tensor")
            # numpy cannot hold bfloat16
            x = x.detach().cpu().double().numpy()
        values = as_real_array(x)

    if values.ndim == 1:
        values = values.reshape(-1, 1)
    if values.ndim != 2:
        raise InvalidInput(f"expected a 2-D feature matrix, got {values.ndim} dimensions")
    if values.shape[1] == 0:
        raise InvalidInput("data has zero columns")
    check_finite(values)
    return FeatureMatrix(values=values, index=index, columns=columns)
