"""Team statistics: score tiers and roster aggregation."""

from .aggregation import aggregate, round2
from .classification import PerformanceTier, classify

__all__ = [
    "PerformanceTier",
    "aggregate",
    "classify",
    "round2",
]
