from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple
import numpy as np
import pandas as pd
import torch

from ..errors import InvalidInput

def _from_pt(path: Path):
    obj = torch.load(path, map_location="cpu")
    if isinstance(obj, dict):
        if "Z" not in obj:
            raise InvalidInput(f"{path}: expected a 'Z' entry, found {sorted(obj)}")
        y = obj.get("y")
        return obj["Z"].float().numpy(), (y.numpy() if y is not None else None)
    if isinstance(obj, torch.Tensor):
        return obj.float().numpy(), None
    raise InvalidInput(f"{path}: unsupported payload {type(obj).__name__}")

def _from_npz(path: Path):
    with np.load(path) as f:
        key = "Z" if "Z" in f else "X"
        if key not in f:
            raise InvalidInput(f"{path}: expected a 'Z' or 'X' array, found {list(f.keys())}")
        return f[key], (f["y"] if "y" in f else None)

def _from_csv(path: Path, label_column: Optional[str], index_col: Optional[str]):
    df = pd.read_csv(path, index_col=index_col)
    y = None
    if label_column is not None:
        if label_column not in df.columns:
            raise InvalidInput(f"{path}: no column named {label_column!r}")
        y = df.pop(label_column).to_numpy()
    return df, y

def load_features(path, label_column: Optional[str] = None, index_col: Optional[str] = None) -> Tuple[object, Optional[np.ndarray]]:
    """
    Read a feature matrix and optional ground-truth labels.

    .pt   tensor, or {"Z": (N, D) tensor, "y": (N,) tensor} as dumped by the feature extractor
    .npy  (N, D) array
    .npz  "Z" (or "X") and optional "y"
    .csv  table; `label_column` is split off as labels, `index_col` becomes the row index
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidInput(f"feature file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".pt":
        return _from_pt(path)
    if suffix == ".npy":
        return np.load(path), None
    if suffix == ".npz":
        return _from_npz(path)
    if suffix == ".csv":
        return _from_csv(path, label_column, index_col)
    raise InvalidInput(f"unsupported feature file type: {suffix}")
