from __future__ import annotations
import numpy as np
from sklearn.metrics import normalized_mutual_info_score, adjusted_rand_score
from scipy.optimize import linear_sum_assignment

def clustering_accuracy(y_true, y_pred) -> float:
    # Hungarian match; labels of any type, K may differ from the number of classes
    y_true, y_pred = np.asarray(y_true).ravel(), np.asarray(y_pred).ravel()
    if y_true.size != y_pred.size:
        raise ValueError(f"label vectors differ in length: {y_true.size} vs {y_pred.size}")
    _, t = np.unique(y_true, return_inverse=True)
    _, p = np.unique(y_pred, return_inverse=True)
    w = np.zeros((p.max() + 1, t.max() + 1), dtype=np.int64)
    np.add.at(w, (p, t), 1)
    r, c = linear_sum_assignment(w.max() - w)
    return float(w[r, c].sum()) / y_pred.size

def compute_all(y_true, y_pred):
    y_true, y_pred = np.asarray(y_true).ravel(), np.asarray(y_pred).ravel()
    return {
        "ACC": clustering_accuracy(y_true, y_pred),
        "NMI": normalized_mutual_info_score(y_true, y_pred, average_method="arithmetic"),
        "ARI": adjusted_rand_score(y_true, y_pred),
    }
