from .cluster.dp_means import fit
from .cluster.result import DPMeansResult, FitStatus
from .errors import DPMeansError, InconsistentState, InvalidConfiguration, InvalidInput

__all__ = [
    "fit",
    "DPMeansResult",
    "FitStatus",
    "DPMeansError",
    "InvalidInput",
    "InvalidConfiguration",
    "InconsistentState",
]
