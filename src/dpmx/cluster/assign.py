from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from ..data.matrix import as_real_array, check_finite
from ..errors import InvalidInput


def check_lambda(lam) -> float:
    try:
        lam = float(lam)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"lambda must be a real number, got {lam!r}") from e
    if not math.isfinite(lam) or lam <= 0:
        raise InvalidInput(f"lambda must be a positive finite number, got {lam}")
    return lam


def sq_dists(X: np.ndarray, C: np.ndarray, max_cells: int = 1 << 22) -> np.ndarray:
    """(N, K) squared Euclidean distances, computed in row blocks of bounded size."""
    n, k = X.shape[0], C.shape[0]
    step = max(1, max_cells // max(1, k * X.shape[1]))
    out = np.empty((n, k))
    for s in range(0, n, step):
        out[s:s + step] = ((X[s:s + step, None, :] - C[None, :, :]) ** 2).sum(axis=2)
    return out


def assign(centers: np.ndarray, X: np.ndarray, lam: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    One DP-means assignment pass.

    Points are visited in row order. A point joins its nearest center (squared
    Euclidean distance, ties to the lowest index) when that distance is <= lam,
    otherwise it founds a new cluster centred on itself. Clusters founded during
    the pass compete for every later point of the same pass.

    Returns 1-indexed labels of length N and the grown (K_new x D) center matrix.
    """
    lam = check_lambda(lam)
    X = as_real_array(X)
    C = np.atleast_2d(as_real_array(centers))
    if X.ndim != 2:
        raise InvalidInput("data must be a 2-D matrix")
    check_finite(X)
    if C.shape[0] == 0 or C.shape[1] != X.shape[1]:
        raise InvalidInput(f"centers of shape {C.shape} do not match data with {X.shape[1]} columns")
    return assign_pass(C, X, lam)


def assign_pass(C: np.ndarray, X: np.ndarray, lam: float) -> Tuple[np.ndarray, np.ndarray]:
    # unchecked: float64 inputs, finite, matching widths, lam > 0
    n = X.shape[0]
    k0 = C.shape[0]
    # distances to the centers that exist before the pass
    d2 = sq_dists(X, C)
    nearest = d2.argmin(axis=1)
    min_d2 = d2[np.arange(n), nearest]

    spawned = np.empty_like(X)
    m = 0
    labels = np.empty(n, dtype=np.int64)
    for i in range(n):
        best, best_d2 = int(nearest[i]), float(min_d2[i])
        if m:
            new_d2 = ((spawned[:m] - X[i]) ** 2).sum(axis=1)
            j = int(new_d2.argmin())
            # strict: earlier (lower) indices win ties
            if new_d2[j] < best_d2:
                best, best_d2 = k0 + j, float(new_d2[j])
        if best_d2 > lam:
            spawned[m] = X[i]
            best = k0 + m
            m += 1
        labels[i] = best + 1

    if m:
        C = np.vstack([C, spawned[:m]])
    return labels, C
