from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

import numpy as np
import pandas as pd


class FitStatus(str, Enum):
    INITIALIZING = "initializing"
    ITERATING = "iterating"
    CONVERGED = "converged"
    ITERATION_LIMIT_REACHED = "iteration_limit_reached"


@dataclass
class DPMeansResult:
    """
    Final state of a DP-means fit, laid out like a k-means result.

    `totss` holds the penalized objective of the last iteration
    (sum(withinss) + lam * K), not the unpenalized total sum of squares a
    k-means result would carry. `betweenss` and `tot_withinss` both hold
    sum(withinss).
    """
    centers: Union[np.ndarray, pd.DataFrame]
    cluster: Union[np.ndarray, pd.Series]
    totss: float
    withinss: np.ndarray
    betweenss: float
    tot_withinss: float
    size: np.ndarray
    iter: int
    ifault: int = 0
    status: FitStatus = FitStatus.CONVERGED

    @property
    def n_clusters(self) -> int:
        return len(self.size)

    @property
    def converged(self) -> bool:
        return self.status is FitStatus.CONVERGED

    def as_kmeans(self) -> Dict[str, Any]:
        return {
            "centers": self.centers,
            "cluster": self.cluster,
            "totss": self.totss,
            "withinss": self.withinss,
            "betweenss": self.betweenss,
            "tot.withinss": self.tot_withinss,
            "size": self.size,
            "iter": self.iter,
            "ifault": self.ifault,
        }
