from __future__ import annotations

import math
import numbers

import numpy as np

from ..data.matrix import as_feature_matrix
from ..errors import InvalidConfiguration
from ..logging import progress
from .assign import assign_pass, check_lambda
from .result import DPMeansResult, FitStatus
from .update import objective, relabel, update


def _check_config(max_iter, tol):
    if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral) or max_iter < 1:
        raise InvalidConfiguration(f"max_iter must be an integer >= 1, got {max_iter!r}")
    try:
        tol = float(tol)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"tol must be a real number, got {tol!r}") from e
    if math.isnan(tol) or tol < 0:
        raise InvalidConfiguration(f"tol must be >= 0, got {tol}")
    return int(max_iter), tol


def fit(x, lam: float, max_iter: int = 100, tol: float = 1e-3, verbose: bool = True, writer=None) -> DPMeansResult:
    """
    DP-means clustering of the rows of `x`.

    Starts from a single cluster at the global feature mean and alternates a
    sequential assignment pass (which opens a cluster for every point farther
    than `lam`, in squared Euclidean distance, from all centers) with a mean
    update. Stops once the penalized sum of squares, sum(withinss) + lam * K,
    drops by no more than `tol` between two iterations, or after `max_iter`
    iterations.

    Clusters are renumbered 1..K after every assignment pass, in the order they
    were founded. A center that caught no point in a pass (always the initial
    global-mean seed when every point is farther than `lam` from it) is dropped,
    so no returned cluster is empty; as a consequence K can shrink between
    iterations on ordinary data.

    `x` may be an array, a nested sequence, a pandas DataFrame (column names and
    row index are carried to `centers` and `cluster`) or a torch tensor.
    `writer` is an optional TensorBoard-style object receiving the objective and
    K per iteration.
    """
    lam = check_lambda(lam)
    max_iter, tol = _check_config(max_iter, tol)
    fm = as_feature_matrix(x)
    X = fm.values

    state = FitStatus.INITIALIZING
    centers = X.mean(axis=0, keepdims=True)
    prev_total = None
    for iteration in range(1, max_iter + 1):
        state = FitStatus.ITERATING
        labels, _ = assign_pass(centers, X, lam)
        labels = relabel(labels)
        centers, withinss = update(labels, X)
        k = len(withinss)
        total = objective(withinss, lam)

        if verbose:
            progress(f"After iteration {iteration}: clusters = {k}, penalized sum of squares = {total:.4f}")
        if writer is not None:
            writer.add_scalar("dpmeans/objective", total, iteration)
            writer.add_scalar("dpmeans/k", k, iteration)

        if prev_total is not None and prev_total - total <= tol:
            state = FitStatus.CONVERGED
            if verbose:
                progress("Reached convergence")
            break
        prev_total = total
    else:
        state = FitStatus.ITERATION_LIMIT_REACHED
        if verbose:
            progress("Reached iteration limit")

    ss = float(withinss.sum())
    return DPMeansResult(
        centers=fm.wrap_centers(centers),
        cluster=fm.wrap_assignments(labels),
        totss=total,
        withinss=withinss,
        betweenss=ss,
        tot_withinss=ss,
        size=np.bincount(labels - 1),
        iter=iteration,
        ifault=0,
        status=state,
    )
