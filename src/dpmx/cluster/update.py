from __future__ import annotations

from typing import Tuple

import numpy as np

from ..errors import InconsistentState


def relabel(assignments: np.ndarray) -> np.ndarray:
    """Renumber the labels present in `assignments` to 1..K, keeping their order.

    Centers that caught no point in the last pass (the seed, typically) disappear
    here, so every derived cluster has at least one member.
    """
    _, inv = np.unique(np.asarray(assignments), return_inverse=True)
    return inv.reshape(-1).astype(np.int64) + 1


def update(assignments: np.ndarray, X: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Cluster means and per-cluster within sum of squares for 1-indexed labels.

    Every index 1..max(assignments) must own at least one row.
    """
    labels = np.asarray(assignments)
    if labels.ndim != 1 or labels.shape[0] != X.shape[0]:
        raise InconsistentState(f"assignment vector of shape {labels.shape} does not cover {X.shape[0]} rows")
    if labels.min() < 1:
        raise InconsistentState(f"cluster indices start at 1, got {labels.min()}")

    idx = labels.astype(np.int64) - 1
    k = int(idx.max()) + 1
    counts = np.bincount(idx, minlength=k)
    empty = np.flatnonzero(counts == 0)
    if empty.size:
        raise InconsistentState(f"clusters {(empty + 1).tolist()} have no members")

    sums = np.zeros((k, X.shape[1]))
    np.add.at(sums, idx, X)
    centers = sums / counts[:, None]

    resid = ((X - centers[idx]) ** 2).sum(axis=1)
    withinss = np.bincount(idx, weights=resid, minlength=k)
    return centers, withinss


def objective(withinss: np.ndarray, lam: float) -> float:
    # penalized sum of squares
    return float(np.sum(withinss) + lam * len(withinss))
