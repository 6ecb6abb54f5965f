from __future__ import annotations


class DPMeansError(Exception):
    """Base class for every error raised by dpmx."""


class InvalidInput(DPMeansError, ValueError):
    """Malformed or out-of-range data or threshold."""


class InvalidConfiguration(DPMeansError, ValueError):
    """Bad iteration limit or tolerance."""


class InconsistentState(DPMeansError, RuntimeError):
    """An internal invariant was broken between assignment and update."""
