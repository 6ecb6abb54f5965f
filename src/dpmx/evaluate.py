from __future__ import annotations
import numpy as np
from omegaconf import DictConfig
from rich.console import Console
from .run import load_from_cfg, run_dp_means
from .metrics.clustering_scores import compute_all

def main_eval(cfg: DictConfig):
    console = Console()
    x, y = load_from_cfg(cfg)
    if y is None:
        raise ValueError(f"eval mode needs ground-truth labels in {cfg.features}")
    result = run_dp_means(cfg, x)
    clus = compute_all(y, np.asarray(result.cluster))

    console.print(f"DP-means (lambda={cfg.lam}): K={result.n_clusters}, iter={result.iter}, converged={result.converged}")
    console.print(f"Clustering ACC={clus['ACC']:.4f} NMI={clus['NMI']:.4f} ARI={clus['ARI']:.4f}")
    return clus
