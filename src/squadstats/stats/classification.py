"""Map a numeric score to a performance tier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PerformanceTier:
    tier: str
    label: str


EXCELLENT = PerformanceTier(tier="excellent", label="Excellent")
GOOD = PerformanceTier(tier="good", label="Good")
NEEDS_IMPROVEMENT = PerformanceTier(tier="needs-improvement", label="Needs Improvement")

# Inclusive lower bounds, checked from the top down.
_THRESHOLDS: tuple[tuple[float, PerformanceTier], ...] = (
    (80.0, EXCELLENT),
    (60.0, GOOD),
)


def classify(score: Any) -> PerformanceTier:
    """Return the tier for ``score``; out-of-range values are not clamped."""

    try:
        value = float(score) if score is not None else 0.0
    except (TypeError, ValueError):
        value = 0.0
    for lower_bound, tier in _THRESHOLDS:
        if value >= lower_bound:
            return tier
    return NEEDS_IMPROVEMENT


__all__ = [
    "EXCELLENT",
    "GOOD",
    "NEEDS_IMPROVEMENT",
    "PerformanceTier",
    "classify",
]
