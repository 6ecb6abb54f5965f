from __future__ import annotations

import os
from pathlib import Path

import numpy as np
from omegaconf import DictConfig
from rich.table import Table

from .cluster.dp_means import fit
from .cluster.result import DPMeansResult
from .data.loaders import load_features
from .logging import get_logger


def run_dp_means(cfg: DictConfig, x, writer=None) -> DPMeansResult:
    return fit(
        x,
        lam=cfg.lam,
        max_iter=cfg.max_iter,
        tol=cfg.tol,
        verbose=cfg.verbose,
        writer=writer,
    )


def cluster_table(result: DPMeansResult) -> Table:
    table = Table(title=f"{result.n_clusters} clusters after {result.iter} iterations ({result.status.value})")
    table.add_column("cluster", justify="right")
    table.add_column("size", justify="right")
    table.add_column("withinss", justify="right")
    for c, (n, ss) in enumerate(zip(result.size, result.withinss), start=1):
        table.add_row(str(c), str(int(n)), f"{ss:.4f}")
    return table


def load_from_cfg(cfg: DictConfig):
    return load_features(
        cfg.features,
        label_column=cfg.get("label_column"),
        index_col=cfg.get("index_col"),
    )


def main_fit(cfg: DictConfig) -> DPMeansResult:
    # ---- data
    x, _ = load_from_cfg(cfg)

    # ---- logging
    out_dir = os.path.join(cfg.output_dir, "fit")
    console, writer = get_logger(Path(out_dir), use_tb=cfg.log.tb)
    console.rule(f"DP-means on {cfg.features} (lambda={cfg.lam})")

    # ---- clustering
    try:
        result = run_dp_means(cfg, x, writer)
        if writer:
            writer.add_histogram("dpmeans/size", np.asarray(result.size), result.iter)
    finally:
        if writer:
            writer.close()
    console.print(cluster_table(result))
    console.log(f"penalized sum of squares {result.totss:.4f}, within {result.tot_withinss:.4f}")
    return result
